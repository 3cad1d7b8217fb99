"""Immutable league records: season snapshots and career aggregates.

Both records share the same set of counting stats. Every stat defaults to zero
so sparse upload rows never need special casing downstream.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass, fields
import logging
import math
from typing import Any

from league_records.config import ACTIVE_STATUS, DEFAULT_SEASON_LABEL

logger = logging.getLogger(__name__)

STAT_FIELDS: tuple[str, ...] = (
    "games",
    "pass_attempts",
    "completions",
    "pass_yards",
    "pass_tds",
    "interceptions",
    "rush_attempts",
    "rush_yards",
    "rush_tds",
    "receptions",
    "rec_yards",
    "rec_tds",
    "tackles",
    "sacks",
    "forced_fumbles",
    "mvp",
    "opoy",
    "sbmvp",
    "roty",
    "rings",
)

AWARD_FIELDS: tuple[str, ...] = ("mvp", "opoy", "sbmvp", "roty", "rings")

RATING_FIELDS: tuple[str, ...] = ("tpg", "career_legacy", "dominance")

# Column spellings accepted on input. The league export uses camelCase.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "games": ("games", "games_played", "gp"),
    "pass_attempts": ("pass_attempts", "attempts", "passAtt"),
    "completions": ("completions", "comp"),
    "pass_yards": ("pass_yards", "passYds", "passing_yards"),
    "pass_tds": ("pass_tds", "passTD", "passing_tds"),
    "interceptions": ("interceptions", "ints", "int"),
    "rush_attempts": ("rush_attempts", "rushAtt", "carries"),
    "rush_yards": ("rush_yards", "rushYds", "rushing_yards"),
    "rush_tds": ("rush_tds", "rushTD", "rushing_tds"),
    "receptions": ("receptions", "rec"),
    "rec_yards": ("rec_yards", "recYds", "receiving_yards"),
    "rec_tds": ("rec_tds", "recTD", "receiving_tds"),
    "tackles": ("tackles", "tkl"),
    "sacks": ("sacks",),
    "forced_fumbles": ("forced_fumbles", "forcedFumbles", "ff"),
    "mvp": ("mvp",),
    "opoy": ("opoy",),
    "sbmvp": ("sbmvp",),
    "roty": ("roty",),
    "rings": ("rings",),
    "tpg": ("tpg",),
    "career_legacy": ("career_legacy", "careerLegacy", "legacy"),
    "dominance": ("dominance",),
}

# Career collection name -> position tag carried by its players.
CATEGORY_POSITIONS: dict[str, str] = {
    "quarterbacks": "QB",
    "running_backs": "RB",
    "wide_receivers": "WR",
    "tight_ends": "TE",
    "offensive_line": "OL",
    "linebackers": "LB",
    "defensive_backs": "DB",
    "defensive_line": "DL",
}

DEFENSIVE_POSITIONS: tuple[str, ...] = ("LB", "DB", "DL")


def _to_number(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Treating non-numeric stat value %r as 0", value)
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _first_present(row: Mapping[str, Any], names: tuple[str, ...]) -> Any | None:
    for name in names:
        if name in row and row[name] is not None:
            return row[name]
    return None


def _stat_values(row: Mapping[str, Any], names: tuple[str, ...]) -> dict[str, float]:
    return {name: _to_number(_first_present(row, FIELD_ALIASES[name])) for name in names}


def _clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


@dataclass(frozen=True)
class SeasonSnapshot:
    """One player's stat line for exactly one season."""

    season: str = DEFAULT_SEASON_LABEL
    games: float = 0
    pass_attempts: float = 0
    completions: float = 0
    pass_yards: float = 0
    pass_tds: float = 0
    interceptions: float = 0
    rush_attempts: float = 0
    rush_yards: float = 0
    rush_tds: float = 0
    receptions: float = 0
    rec_yards: float = 0
    rec_tds: float = 0
    tackles: float = 0
    sacks: float = 0
    forced_fumbles: float = 0
    mvp: float = 0
    opoy: float = 0
    sbmvp: float = 0
    roty: float = 0
    rings: float = 0

    @classmethod
    def from_row(cls, row: Mapping[str, Any], *, season: str | None = None) -> "SeasonSnapshot":
        """Build a snapshot from a normalized upload row.

        ``season`` overrides any ``season`` column found in the row; blank labels
        fall back to the generic placeholder.
        """

        label = season if season is not None else _clean_text(row.get("season"))
        return cls(season=label or DEFAULT_SEASON_LABEL, **_stat_values(row, STAT_FIELDS))

    def stats(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in STAT_FIELDS}

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CareerPlayer:
    """Cumulative totals for one player as supplied by the career upload."""

    name: str
    position: str
    team: str | None = None
    status: str = ""
    games: float = 0
    pass_attempts: float = 0
    completions: float = 0
    pass_yards: float = 0
    pass_tds: float = 0
    interceptions: float = 0
    rush_attempts: float = 0
    rush_yards: float = 0
    rush_tds: float = 0
    receptions: float = 0
    rec_yards: float = 0
    rec_tds: float = 0
    tackles: float = 0
    sacks: float = 0
    forced_fumbles: float = 0
    mvp: float = 0
    opoy: float = 0
    sbmvp: float = 0
    roty: float = 0
    rings: float = 0
    tpg: float = 0
    career_legacy: float = 0
    dominance: float = 0

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS

    @classmethod
    def from_row(cls, row: Mapping[str, Any], *, position: str | None = None) -> "CareerPlayer":
        """Create a player from a normalized row.

        The collection's position tag wins over any ``position`` column so that a
        player always lands in the category it was uploaded under.
        """

        name = row.get("name")
        if name is None:
            name = _first_present(row, ("player_name", "full_name", "display_name"))
        resolved_position = position or _clean_text(row.get("position")) or ""
        return cls(
            name="" if name is None else str(name),
            position=resolved_position,
            team=_clean_text(row.get("team")),
            status=_clean_text(row.get("status")) or "",
            **_stat_values(row, STAT_FIELDS),
            **_stat_values(row, RATING_FIELDS),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CareerData:
    """Career aggregates grouped by position category."""

    quarterbacks: tuple[CareerPlayer, ...] = ()
    running_backs: tuple[CareerPlayer, ...] = ()
    wide_receivers: tuple[CareerPlayer, ...] = ()
    tight_ends: tuple[CareerPlayer, ...] = ()
    offensive_line: tuple[CareerPlayer, ...] = ()
    linebackers: tuple[CareerPlayer, ...] = ()
    defensive_backs: tuple[CareerPlayer, ...] = ()
    defensive_line: tuple[CareerPlayer, ...] = ()

    @classmethod
    def from_players(cls, players: Mapping[str, Any]) -> "CareerData":
        """Build from a ``category -> iterable of players`` mapping."""

        unknown = set(players) - set(CATEGORY_POSITIONS)
        if unknown:
            raise ValueError(f"Unknown player categories: {sorted(unknown)}")
        return cls(**{category: tuple(items) for category, items in players.items()})

    def category(self, name: str) -> tuple[CareerPlayer, ...]:
        if name not in CATEGORY_POSITIONS:
            raise ValueError(f"Unknown player category '{name}'. Expected one of {tuple(CATEGORY_POSITIONS)}.")
        return getattr(self, name)

    def categories(self) -> Iterator[tuple[str, tuple[CareerPlayer, ...]]]:
        for item in fields(self):
            yield item.name, getattr(self, item.name)

    def defenders(self) -> tuple[CareerPlayer, ...]:
        return self.linebackers + self.defensive_backs + self.defensive_line

    def all_players(self) -> tuple[CareerPlayer, ...]:
        players: tuple[CareerPlayer, ...] = ()
        for _, members in self.categories():
            players += members
        return players

    def is_empty(self) -> bool:
        return not any(members for _, members in self.categories())


__all__ = [
    "AWARD_FIELDS",
    "CATEGORY_POSITIONS",
    "CareerData",
    "CareerPlayer",
    "DEFENSIVE_POSITIONS",
    "FIELD_ALIASES",
    "RATING_FIELDS",
    "STAT_FIELDS",
    "SeasonSnapshot",
]
