"""Append-only per-player season history with a parquet backing file.

Every player key owns an ordered sequence of :class:`SeasonSnapshot` values.
Appending a snapshot whose season label already exists for that key replaces
the stored snapshot in place, which makes re-uploading a season idempotent.
Nothing is ever deleted.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
import logging

import polars as pl

from league_records.config import HISTORY_PATH
from league_records.core.identity import PlayerKey
from league_records.core.models import STAT_FIELDS, SeasonSnapshot

logger = logging.getLogger(__name__)

HISTORY_SCHEMA: dict[str, pl.DataType] = {
    "player_key": pl.Utf8,
    "position": pl.Utf8,
    "player_name": pl.Utf8,
    "slot": pl.Int32,
    "season": pl.Utf8,
    **{name: pl.Float64 for name in STAT_FIELDS},
}


def _empty_history_frame() -> pl.DataFrame:
    return pl.DataFrame(schema=HISTORY_SCHEMA)


class SeasonHistoryStore:
    """In-memory ``PlayerKey -> snapshots`` store with optional persistence."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._entries: dict[PlayerKey, list[SeasonSnapshot]] = {}
        self._revision = 0

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def revision(self) -> int:
        """Counter bumped on every append; lets readers detect stale views."""

        return self._revision

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: PlayerKey) -> tuple[SeasonSnapshot, ...]:
        return tuple(self._entries.get(key, ()))

    def append(self, key: PlayerKey, snapshot: SeasonSnapshot) -> None:
        """Store ``snapshot``, replacing any snapshot with the same season label."""

        snapshots = self._entries.setdefault(key, [])
        for index, existing in enumerate(snapshots):
            if existing.season == snapshot.season:
                snapshots[index] = snapshot
                logger.debug("Replaced %s snapshot for %s", snapshot.season, key)
                break
        else:
            snapshots.append(snapshot)
        self._revision += 1

    def extend(self, items: Iterable[tuple[PlayerKey, SeasonSnapshot]]) -> int:
        count = 0
        for key, snapshot in items:
            self.append(key, snapshot)
            count += 1
        return count

    def all_entries(self) -> dict[PlayerKey, tuple[SeasonSnapshot, ...]]:
        """Return a detached copy of every history line."""

        return {key: tuple(snapshots) for key, snapshots in self._entries.items()}

    def seasons(self) -> list[str]:
        """Distinct season labels in first-seen order."""

        labels: dict[str, None] = {}
        for snapshots in self._entries.values():
            for snapshot in snapshots:
                labels.setdefault(snapshot.season, None)
        return list(labels)

    def to_frame(self) -> pl.DataFrame:
        """Flatten the store into one row per snapshot."""

        rows = [
            {
                "player_key": str(key),
                "position": key.position,
                "player_name": key.name,
                "slot": slot,
                "season": snapshot.season,
                **{name: float(value) for name, value in snapshot.stats().items()},
            }
            for key, snapshots in self._entries.items()
            for slot, snapshot in enumerate(snapshots)
        ]
        if not rows:
            return _empty_history_frame()
        return pl.DataFrame(rows, schema=HISTORY_SCHEMA)

    @classmethod
    def from_frame(cls, frame: pl.DataFrame, *, path: Path | None = None) -> "SeasonHistoryStore":
        """Rebuild a store from :meth:`to_frame` output."""

        missing = [column for column in ("player_key", "season") if column not in frame.columns]
        if missing:
            raise ValueError(f"Season history frame is missing columns: {missing}")

        store = cls(path=path)
        ordered = frame.sort("slot", maintain_order=True) if "slot" in frame.columns else frame
        for row in ordered.iter_rows(named=True):
            key = PlayerKey.parse(str(row["player_key"]))
            store.append(key, SeasonSnapshot.from_row(row))
        return store

    def save(self, path: Path | None = None) -> Path:
        target = path or self._path or HISTORY_PATH
        target.parent.mkdir(parents=True, exist_ok=True)
        frame = self.to_frame()
        frame.write_parquet(target, compression="zstd")
        logger.info("Wrote %s season snapshots to %s", frame.height, target)
        return target

    @classmethod
    def load(cls, path: Path | None = None) -> "SeasonHistoryStore":
        """Load a persisted store; a missing file yields an empty store."""

        target = path or HISTORY_PATH
        if not target.exists():
            logger.info("No season history at %s; starting empty.", target)
            return cls(path=target)
        frame = pl.read_parquet(target)
        store = cls.from_frame(frame, path=target)
        logger.info("Loaded %s history lines from %s", len(store), target)
        return store


__all__ = ["HISTORY_SCHEMA", "SeasonHistoryStore"]
