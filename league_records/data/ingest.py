"""Turn normalized upload rows into career data and season history entries.

Rows arrive already parsed and validated, either as Polars frames (one per
position category) or as plain mappings. Missing stat columns are treated as
zero. Nothing here parses CSV text.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
import logging
import re
from typing import Any

import polars as pl

from league_records.config import DEFAULT_SEASON_LABEL
from league_records.core.identity import PlayerKey, key_for
from league_records.core.models import CATEGORY_POSITIONS, CareerData, CareerPlayer, SeasonSnapshot

from .season_history import SeasonHistoryStore

logger = logging.getLogger(__name__)

_SEASON_PATTERN = re.compile(r"y(\d+)", re.IGNORECASE)


def season_label_from_filename(filename: str) -> str:
    """Derive ``"Y<n>"`` from an upload name such as ``league_y3.csv``."""

    match = _SEASON_PATTERN.search(Path(filename).name)
    if match is None:
        return DEFAULT_SEASON_LABEL
    return f"Y{match.group(1)}"


def normalise_season_label(label: Any) -> str:
    if label is None:
        return DEFAULT_SEASON_LABEL
    text = str(label).strip()
    return text or DEFAULT_SEASON_LABEL


def _to_polars(frame: object) -> pl.DataFrame:
    if isinstance(frame, pl.DataFrame):
        return frame
    try:
        return pl.DataFrame(frame)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Unsupported frame type for league rows: {type(frame)!r}") from exc


def players_from_rows(rows: Iterable[Mapping[str, Any]], *, position: str) -> tuple[CareerPlayer, ...]:
    players: list[CareerPlayer] = []
    for row in rows:
        player = CareerPlayer.from_row(row, position=position)
        if not player.name:
            logger.debug("Keeping %s row without a name verbatim", position)
        players.append(player)
    return tuple(players)


def career_data_from_frames(frames: Mapping[str, object]) -> CareerData:
    """Build :class:`CareerData` from ``category -> frame`` inputs.

    Categories missing from ``frames`` stay empty; unknown ones are rejected.
    """

    unknown = [name for name in frames if name not in CATEGORY_POSITIONS]
    if unknown:
        raise ValueError(f"Unknown player categories: {sorted(unknown)}")

    collections: dict[str, tuple[CareerPlayer, ...]] = {}
    for category, raw in frames.items():
        frame = _to_polars(raw)
        collections[category] = players_from_rows(
            frame.iter_rows(named=True),
            position=CATEGORY_POSITIONS[category],
        )
        logger.debug("Loaded %s %s", len(collections[category]), category)
    return CareerData.from_players(collections)


def load_league_directory(directory: Path) -> CareerData:
    """Read ``<category>.parquet`` files from ``directory``."""

    if not directory.is_dir():
        raise FileNotFoundError(f"League data directory not found: {directory}")

    frames: dict[str, pl.DataFrame] = {}
    for category in CATEGORY_POSITIONS:
        path = directory / f"{category}.parquet"
        if path.exists():
            frames[category] = pl.read_parquet(path)
    if not frames:
        logger.warning("No category parquet files found in %s", directory)
    data = career_data_from_frames(frames)
    logger.info("Loaded %s players from %s", len(data.all_players()), directory)
    return data


def career_frame(career: CareerData) -> pl.DataFrame:
    """Flatten career data into one row per player, in category order."""

    rows = [player.to_dict() for player in career.all_players()]
    if not rows:
        return pl.DataFrame()
    return pl.DataFrame(rows, infer_schema_length=None)


def season_snapshots(season_data: CareerData, season: str) -> list[tuple[PlayerKey, SeasonSnapshot]]:
    """Pair every uploaded season line with its history key."""

    label = normalise_season_label(season)
    items: list[tuple[PlayerKey, SeasonSnapshot]] = []
    for _, players in season_data.categories():
        for player in players:
            snapshot = SeasonSnapshot.from_row(player.to_dict(), season=label)
            items.append((key_for(player), snapshot))
    return items


def record_season(store: SeasonHistoryStore, season_data: CareerData, season: str) -> int:
    """Append (or replace) one snapshot per uploaded player; returns the count."""

    items = season_snapshots(season_data, season)
    count = store.extend(items)
    logger.info("Recorded %s snapshots for season %s", count, normalise_season_label(season))
    return count


__all__ = [
    "career_data_from_frames",
    "career_frame",
    "load_league_directory",
    "normalise_season_label",
    "players_from_rows",
    "record_season",
    "season_label_from_filename",
    "season_snapshots",
]
