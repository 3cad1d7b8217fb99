"""Record-pace projections for active players.

A player's career rate is extrapolated to a 16-game season and used to
forecast how many more seasons it would take to pass the category's current
career record. Projections beyond the forecast horizon are dropped.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging
import math

from league_records.config import GAMES_PER_SEASON, PACE_HORIZON_SEASONS

from .models import CareerData, CareerPlayer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaceRecord:
    player_name: str
    position: str
    record_name: str
    current_value: float
    record_value: float
    record_holder: str
    seasons_to_break: int
    pace_per_season: float
    percent_to_record: float
    team: str | None = None


@dataclass(frozen=True)
class PaceCategory:
    """A career record chased by the active players of one collection."""

    record_name: str
    category: str
    position: str
    value: Callable[[CareerPlayer], float]


PACE_CATEGORIES: tuple[PaceCategory, ...] = (
    PaceCategory("Career Passing Yards", "quarterbacks", "QB", lambda p: p.pass_yards),
    PaceCategory("Career Rushing Yards", "running_backs", "RB", lambda p: p.rush_yards),
    PaceCategory("Career Receiving Yards", "wide_receivers", "WR", lambda p: p.rec_yards),
)


def governing_record(
    players: Sequence[CareerPlayer],
    value_fn: Callable[[CareerPlayer], float],
) -> tuple[float, CareerPlayer] | None:
    """Return the category maximum and the first player holding it."""

    holder: CareerPlayer | None = None
    record = 0.0
    for player in players:
        value = float(value_fn(player))
        if holder is None or value > record:
            holder, record = player, value
    if holder is None:
        return None
    return record, holder


def pace_per_season(total: float, games: float) -> float:
    if games <= 0:
        return 0.0
    return total / games * GAMES_PER_SEASON


def seasons_to_break(remaining: float, pace: float) -> int | None:
    """Whole seasons needed to cover ``remaining`` at ``pace``; ``None`` when never."""

    if pace <= 0 or remaining <= 0:
        return None
    return math.ceil(remaining / pace)


def project_player(
    player: CareerPlayer,
    category: PaceCategory,
    record_value: float,
    record_holder: CareerPlayer,
    *,
    horizon: int = PACE_HORIZON_SEASONS,
) -> PaceRecord | None:
    """Project one player against a record; ``None`` when not within the horizon."""

    if not player.is_active or player.games < GAMES_PER_SEASON:
        return None
    current = float(category.value(player))
    pace = pace_per_season(current, player.games)
    if pace <= 0 or current >= record_value:
        return None
    seasons = seasons_to_break(record_value - current, pace)
    if seasons is None or seasons > horizon:
        return None
    return PaceRecord(
        player_name=player.name,
        position=category.position,
        record_name=category.record_name,
        current_value=current,
        record_value=record_value,
        record_holder=record_holder.name,
        seasons_to_break=seasons,
        pace_per_season=pace,
        percent_to_record=current / record_value * 100,
        team=player.team,
    )


def pace_to_records(
    career: CareerData | None,
    *,
    categories: Sequence[PaceCategory] = PACE_CATEGORIES,
    horizon: int = PACE_HORIZON_SEASONS,
) -> list[PaceRecord]:
    """Every active player within ``horizon`` seasons of a record, soonest first."""

    if career is None:
        return []
    projections: list[PaceRecord] = []
    for category in categories:
        players = career.category(category.category)
        record = governing_record(players, category.value)
        if record is None:
            continue
        record_value, holder = record
        for player in players:
            projection = project_player(player, category, record_value, holder, horizon=horizon)
            if projection is not None:
                projections.append(projection)
    projections.sort(key=lambda item: item.seasons_to_break)
    logger.debug("Found %s players on record pace", len(projections))
    return projections


__all__ = [
    "PACE_CATEGORIES",
    "PaceCategory",
    "PaceRecord",
    "governing_record",
    "pace_per_season",
    "pace_to_records",
    "project_player",
    "seasons_to_break",
]
