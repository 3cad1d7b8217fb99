"""Guarded rate statistics derived from raw counting stats.

Every ratio is computed fresh from the counting stats. A zero denominator
yields ``0.0`` rather than ``NaN``/``inf`` so rate columns can be ranked
without special cases. "Best in class" leaders additionally require the
denominator to clear an explicit minimum sample; players at or below that
minimum are not considered at all.

The same guards are available as Polars expressions for frame-level exports.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
import logging
import math
from typing import Any

import polars as pl

from league_records.config import GAMES_PER_SEASON

from .models import CareerData, CareerPlayer

logger = logging.getLogger(__name__)


def safe_ratio(numerator: float, denominator: float, scale: float = 1.0) -> float:
    """Return ``numerator / denominator * scale`` as a finite, non-negative float."""

    if not denominator or denominator <= 0:
        return 0.0
    value = numerator / denominator * scale
    if not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


@dataclass(frozen=True)
class RatioDefinition:
    """A named ratio of summed stat fields."""

    name: str
    label: str
    numerator: tuple[str, ...]
    denominator: tuple[str, ...]
    scale: float = 1.0

    def numerator_value(self, stats: Any) -> float:
        return sum(float(getattr(stats, name, 0) or 0) for name in self.numerator)

    def denominator_value(self, stats: Any) -> float:
        return sum(float(getattr(stats, name, 0) or 0) for name in self.denominator)

    def compute(self, stats: Any) -> float:
        return safe_ratio(self.numerator_value(stats), self.denominator_value(stats), self.scale)


RATIOS: dict[str, RatioDefinition] = {
    definition.name: definition
    for definition in (
        RatioDefinition("yards_per_attempt", "Yards Per Attempt", ("pass_yards",), ("pass_attempts",)),
        RatioDefinition("completion_pct", "Completion %", ("completions",), ("pass_attempts",), scale=100.0),
        RatioDefinition("td_int_ratio", "TD/INT Ratio", ("pass_tds",), ("interceptions",)),
        RatioDefinition("yards_per_carry", "Yards Per Carry", ("rush_yards",), ("rush_attempts",)),
        RatioDefinition(
            "scrimmage_yards_per_game",
            "Scrimmage Yds/Game",
            ("rush_yards", "rec_yards"),
            ("games",),
        ),
        RatioDefinition("yards_per_reception", "Yards Per Rec", ("rec_yards",), ("receptions",)),
        RatioDefinition("rec_yards_per_game", "Receiving Yds/Game", ("rec_yards",), ("games",)),
        RatioDefinition(
            "rec_tds_per_16",
            "TDs/16 Games",
            ("rec_tds",),
            ("games",),
            scale=float(GAMES_PER_SEASON),
        ),
        RatioDefinition("tackles_per_game", "Tackles/Game", ("tackles",), ("games",)),
        RatioDefinition("sacks_per_game", "Sacks/Game", ("sacks",), ("games",)),
        RatioDefinition(
            "turnovers_per_game",
            "Turnovers/Game",
            ("interceptions", "forced_fumbles"),
            ("games",),
        ),
    )
}


def get_ratio(name: str) -> RatioDefinition:
    try:
        return RATIOS[name]
    except KeyError:
        raise KeyError(f"Unknown ratio '{name}'. Expected one of {sorted(RATIOS)}.") from None


def compute_ratio(stats: Any, name: str) -> float:
    """Compute the named ratio for any object exposing the stat attributes."""

    return get_ratio(name).compute(stats)


def ratio(name: str) -> Callable[[Any], float]:
    """Return the named ratio as a value function usable by leaderboards."""

    definition = get_ratio(name)
    return definition.compute


@dataclass(frozen=True)
class LeaderMetric:
    """Single-leader metric gated by a minimum denominator sample."""

    name: str
    ratio: str
    minimum: float
    pool: str
    description: str

    def qualifies(self, player: CareerPlayer) -> bool:
        return get_ratio(self.ratio).denominator_value(player) > self.minimum


@dataclass(frozen=True)
class AdvancedMetric:
    """The single best qualifying player for a leader metric."""

    name: str
    value: float
    player_name: str
    position: str
    description: str
    team: str | None = None


_POOLS: dict[str, Callable[[CareerData], Sequence[CareerPlayer]]] = {
    "quarterbacks": lambda career: career.quarterbacks,
    "running_backs": lambda career: career.running_backs,
    "wide_receivers": lambda career: career.wide_receivers,
    "defense": lambda career: career.defenders(),
}

LEADER_METRICS: tuple[LeaderMetric, ...] = (
    LeaderMetric(
        "Best Yards/Attempt",
        "yards_per_attempt",
        200,
        "quarterbacks",
        "Highest career yards per pass attempt (min 200 attempts)",
    ),
    LeaderMetric(
        "Best TD/INT Ratio",
        "td_int_ratio",
        0,
        "quarterbacks",
        "Most touchdowns per interception thrown",
    ),
    LeaderMetric(
        "Completion %",
        "completion_pct",
        200,
        "quarterbacks",
        "Highest career completion percentage",
    ),
    LeaderMetric(
        "Best Yards/Carry",
        "yards_per_carry",
        100,
        "running_backs",
        "Highest career yards per rush attempt",
    ),
    LeaderMetric(
        "Scrimmage Yds/Game",
        "scrimmage_yards_per_game",
        16,
        "running_backs",
        "Combined rushing + receiving yards per game",
    ),
    LeaderMetric(
        "Best Yards/Catch",
        "yards_per_reception",
        50,
        "wide_receivers",
        "Highest yards per reception (min 50 catches)",
    ),
    LeaderMetric(
        "Receiving Yds/Game",
        "rec_yards_per_game",
        16,
        "wide_receivers",
        "Highest receiving yards per game played",
    ),
    LeaderMetric(
        "Sacks/Game",
        "sacks_per_game",
        32,
        "defense",
        "Highest sacks per game (min 32 games)",
    ),
    LeaderMetric(
        "Turnovers/Game",
        "turnovers_per_game",
        32,
        "defense",
        "Interceptions + forced fumbles per game",
    ),
)


def best_in_class(players: Iterable[CareerPlayer], metric: LeaderMetric) -> AdvancedMetric | None:
    """Return the top qualifying player for ``metric`` or ``None`` when nobody qualifies."""

    definition = get_ratio(metric.ratio)
    leader: CareerPlayer | None = None
    leader_value = 0.0
    for player in players:
        if not metric.qualifies(player):
            continue
        value = definition.compute(player)
        # Strict comparison keeps the first of several tied players.
        if leader is None or value > leader_value:
            leader, leader_value = player, value
    if leader is None:
        return None
    return AdvancedMetric(
        name=metric.name,
        value=leader_value,
        player_name=leader.name,
        position=leader.position,
        description=metric.description,
        team=leader.team,
    )


def advanced_metrics(
    career: CareerData | None,
    metrics: Sequence[LeaderMetric] = LEADER_METRICS,
) -> list[AdvancedMetric]:
    """Evaluate every leader metric, omitting the ones with no qualifier."""

    if career is None:
        return []
    results: list[AdvancedMetric] = []
    for metric in metrics:
        leader = best_in_class(_POOLS[metric.pool](career), metric)
        if leader is None:
            logger.debug("No qualifying player for %s", metric.name)
            continue
        results.append(leader)
    return results


def _numeric_or_zero(frame: pl.DataFrame, column: str) -> pl.Expr:
    if column not in frame.columns:
        return pl.repeat(0.0, pl.len(), dtype=pl.Float64)
    return pl.col(column).cast(pl.Float64, strict=False).fill_null(0.0)


def ratio_expr(frame: pl.DataFrame, definition: RatioDefinition) -> pl.Expr:
    """Polars form of :meth:`RatioDefinition.compute` with the same guards."""

    numerator = pl.sum_horizontal([_numeric_or_zero(frame, column) for column in definition.numerator])
    denominator = pl.sum_horizontal([_numeric_or_zero(frame, column) for column in definition.denominator])
    raw = numerator / denominator * definition.scale
    return (
        pl.when((denominator > 0) & raw.is_finite() & (raw > 0))
        .then(raw)
        .otherwise(0.0)
        .alias(definition.name)
    )


def with_ratio_columns(frame: pl.DataFrame, names: Iterable[str] | None = None) -> pl.DataFrame:
    """Append guarded ratio columns to a frame of counting stats."""

    selected = list(names) if names is not None else list(RATIOS)
    if frame.is_empty() and not frame.columns:
        return frame
    return frame.with_columns([ratio_expr(frame, get_ratio(name)) for name in selected])


__all__ = [
    "AdvancedMetric",
    "LEADER_METRICS",
    "LeaderMetric",
    "RATIOS",
    "RatioDefinition",
    "advanced_metrics",
    "best_in_class",
    "compute_ratio",
    "get_ratio",
    "ratio",
    "ratio_expr",
    "with_ratio_columns",
]
