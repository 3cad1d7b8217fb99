"""Composite season quality scores and tiers.

Each snapshot is scored by one of four closed formula variants chosen from the
player's position, plus an award bonus taken from the same season:

* ``QB``: passing volume and touchdowns, rushing, minus interceptions
* ``RB``: rushing and receiving production
* ``WR_TE``: receiving yards, catches and touchdowns
* ``DEF``: tackles, sacks, takeaways (also the fallback for any other tag)

Scores map onto tiers with inclusive lower bounds.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
import logging
from typing import Literal

from league_records.config import GREATEST_SEASONS_LIMIT

from .identity import PlayerKey
from .models import SeasonSnapshot

logger = logging.getLogger(__name__)

ScoringVariant = Literal["QB", "RB", "WR_TE", "DEF"]

VARIANT_BY_POSITION: dict[str, ScoringVariant] = {
    "QB": "QB",
    "RB": "RB",
    "WR": "WR_TE",
    "TE": "WR_TE",
}

AWARD_WEIGHTS: dict[str, float] = {
    "mvp": 100,
    "opoy": 75,
    "sbmvp": 80,
    "roty": 50,
    "rings": 60,
}

LEGENDARY = "LEGENDARY"
ELITE = "ELITE"
GREAT = "GREAT"
NOTABLE = "NOTABLE"
SOLID = "SOLID"

# Checked top-down; the first threshold the score reaches wins.
TIER_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (800, LEGENDARY),
    (600, ELITE),
    (400, GREAT),
    (250, NOTABLE),
)


def variant_for(position: str) -> ScoringVariant:
    return VARIANT_BY_POSITION.get(position, "DEF")


def award_bonus(snapshot: SeasonSnapshot) -> float:
    return (
        snapshot.mvp * AWARD_WEIGHTS["mvp"]
        + snapshot.opoy * AWARD_WEIGHTS["opoy"]
        + snapshot.sbmvp * AWARD_WEIGHTS["sbmvp"]
        + snapshot.roty * AWARD_WEIGHTS["roty"]
        + snapshot.rings * AWARD_WEIGHTS["rings"]
    )


def _score_quarterback(s: SeasonSnapshot) -> float:
    return s.pass_yards / 50 + s.pass_tds * 10 + s.rush_yards / 20 + s.rush_tds * 15 - s.interceptions * 5


def _score_running_back(s: SeasonSnapshot) -> float:
    return s.rush_yards / 20 + s.rush_tds * 15 + s.rec_yards / 30 + s.rec_tds * 10


def _score_receiver(s: SeasonSnapshot) -> float:
    return s.rec_yards / 20 + s.receptions * 2 + s.rec_tds * 15


def _score_defender(s: SeasonSnapshot) -> float:
    return s.tackles * 2 + s.sacks * 15 + s.interceptions * 20 + s.forced_fumbles * 10


_SCORERS: dict[ScoringVariant, Callable[[SeasonSnapshot], float]] = {
    "QB": _score_quarterback,
    "RB": _score_running_back,
    "WR_TE": _score_receiver,
    "DEF": _score_defender,
}


def score_season(snapshot: SeasonSnapshot, position: str) -> float:
    """Score one season for a player listed at ``position``."""

    return float(_SCORERS[variant_for(position)](snapshot) + award_bonus(snapshot))


def classify_score(score: float) -> str:
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return SOLID


@dataclass(frozen=True)
class KeyStat:
    label: str
    value: float


@dataclass(frozen=True)
class AwardCounts:
    mvp: float = 0
    opoy: float = 0
    sbmvp: float = 0
    roty: float = 0
    rings: float = 0

    @classmethod
    def from_snapshot(cls, snapshot: SeasonSnapshot) -> "AwardCounts":
        return cls(
            mvp=snapshot.mvp,
            opoy=snapshot.opoy,
            sbmvp=snapshot.sbmvp,
            roty=snapshot.roty,
            rings=snapshot.rings,
        )


KEY_STAT_FIELDS: dict[ScoringVariant, tuple[tuple[str, str], ...]] = {
    "QB": (("Pass Yds", "pass_yards"), ("Pass TD", "pass_tds"), ("Rush Yds", "rush_yards")),
    "RB": (("Rush Yds", "rush_yards"), ("Rush TD", "rush_tds"), ("Rec Yds", "rec_yards")),
    "WR_TE": (("Rec Yds", "rec_yards"), ("Rec", "receptions"), ("Rec TD", "rec_tds")),
    "DEF": (("Tackles", "tackles"), ("Sacks", "sacks"), ("INTs", "interceptions")),
}


def key_stats(snapshot: SeasonSnapshot, position: str) -> tuple[KeyStat, ...]:
    """Headline stats for the position variant, skipping zero values."""

    return tuple(
        KeyStat(label=label, value=getattr(snapshot, name))
        for label, name in KEY_STAT_FIELDS[variant_for(position)]
        if getattr(snapshot, name)
    )


@dataclass(frozen=True)
class GreatSeason:
    player_name: str
    position: str
    season: str
    score: float
    key_stats: tuple[KeyStat, ...]
    awards: AwardCounts

    @property
    def tier(self) -> str:
        return classify_score(self.score)


def greatest_seasons(
    history: Mapping[PlayerKey, Sequence[SeasonSnapshot]],
    *,
    limit: int = GREATEST_SEASONS_LIMIT,
) -> list[GreatSeason]:
    """Score every snapshot of multi-season players and keep the best ``limit``."""

    seasons: list[GreatSeason] = []
    for key, snapshots in history.items():
        if len(snapshots) <= 1:
            continue
        for snapshot in snapshots:
            seasons.append(
                GreatSeason(
                    player_name=key.name,
                    position=key.position,
                    season=snapshot.season,
                    score=score_season(snapshot, key.position),
                    key_stats=key_stats(snapshot, key.position),
                    awards=AwardCounts.from_snapshot(snapshot),
                )
            )
    seasons.sort(key=lambda season: season.score, reverse=True)
    logger.debug("Scored %s seasons for the greatest-seasons list", len(seasons))
    return seasons[: max(limit, 0)]


__all__ = [
    "AWARD_WEIGHTS",
    "AwardCounts",
    "ELITE",
    "GREAT",
    "GreatSeason",
    "KeyStat",
    "LEGENDARY",
    "NOTABLE",
    "SOLID",
    "ScoringVariant",
    "TIER_THRESHOLDS",
    "VARIANT_BY_POSITION",
    "award_bonus",
    "classify_score",
    "greatest_seasons",
    "key_stats",
    "score_season",
    "variant_for",
]
