"""Performance review of a freshly uploaded season.

Players are tiered on one primary stat per position group against fixed
thresholds, then grouped legendary-first. Each review carries the matching
career record (looked up by name) when one exists.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging

from .models import CareerData, CareerPlayer
from .scoring import KeyStat

logger = logging.getLogger(__name__)

PERFORMANCE_TIERS: tuple[str, ...] = ("legendary", "great", "good", "average", "poor")


@dataclass(frozen=True)
class ReviewGroup:
    """Position group reviewed on a single primary stat."""

    label: str
    pool: Callable[[CareerData], Sequence[CareerPlayer]]
    primary: str
    key_stats: tuple[tuple[str, str], ...]
    # Lower bounds for legendary, great, good and average.
    thresholds: tuple[float, float, float, float]


REVIEW_GROUPS: tuple[ReviewGroup, ...] = (
    ReviewGroup(
        "QB",
        lambda data: data.quarterbacks,
        "pass_yards",
        (("Pass Yds", "pass_yards"), ("Pass TDs", "pass_tds"), ("Rush Yds", "rush_yards")),
        (4500, 3500, 2500, 1500),
    ),
    ReviewGroup(
        "RB",
        lambda data: data.running_backs,
        "rush_yards",
        (("Rush Yds", "rush_yards"), ("Rush TDs", "rush_tds"), ("Rec Yds", "rec_yards")),
        (1500, 1000, 700, 400),
    ),
    ReviewGroup(
        "WR",
        lambda data: data.wide_receivers,
        "rec_yards",
        (("Rec Yds", "rec_yards"), ("Receptions", "receptions"), ("TDs", "rec_tds")),
        (1400, 1000, 700, 400),
    ),
    ReviewGroup(
        "TE",
        lambda data: data.tight_ends,
        "rec_yards",
        (("Rec Yds", "rec_yards"), ("Receptions", "receptions"), ("TDs", "rec_tds")),
        (1000, 700, 500, 300),
    ),
    ReviewGroup(
        "DEF",
        lambda data: data.defenders(),
        "tackles",
        (("Tackles", "tackles"), ("INTs", "interceptions"), ("Sacks", "sacks")),
        (100, 70, 50, 30),
    ),
)

_SUMMARY_TEMPLATES: dict[str, str] = {
    "legendary": "Absolutely dominant with {value} {label}.",
    "great": "Excellent production: {value} {label}.",
    "good": "Solid performance with {value} {label}.",
    "average": "Modest output of {value} {label}.",
    "poor": "Limited action: {value} {label}.",
}


@dataclass(frozen=True)
class SeasonPerformance:
    player: CareerPlayer
    season_stats: CareerPlayer
    tier: str
    summary: str
    key_stats: tuple[KeyStat, ...]


def format_stat(value: float) -> str:
    """Render a stat with thousands separators, dropping a trailing ``.0``."""

    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def performance_tier(value: float, thresholds: Sequence[float]) -> str:
    for tier, bound in zip(PERFORMANCE_TIERS, thresholds):
        if value >= bound:
            return tier
    return PERFORMANCE_TIERS[-1]


def summarize(tier: str, stats: Sequence[KeyStat]) -> str:
    if not stats:
        return ""
    main = stats[0]
    return _SUMMARY_TEMPLATES[tier].format(value=format_stat(main.value), label=main.label.lower())


def _review_group(
    group: ReviewGroup,
    season_players: Sequence[CareerPlayer],
    career_players: Sequence[CareerPlayer],
) -> list[SeasonPerformance]:
    career_by_name: dict[str, CareerPlayer] = {}
    for player in career_players:
        career_by_name.setdefault(player.name, player)

    performances: list[SeasonPerformance] = []
    for season_player in season_players:
        primary = getattr(season_player, group.primary)
        if primary <= 0:
            continue
        tier = performance_tier(primary, group.thresholds)
        stats = tuple(KeyStat(label, getattr(season_player, name)) for label, name in group.key_stats)
        performances.append(
            SeasonPerformance(
                player=career_by_name.get(season_player.name, season_player),
                season_stats=season_player,
                tier=tier,
                summary=summarize(tier, stats),
                key_stats=stats,
            )
        )
    performances.sort(key=lambda item: PERFORMANCE_TIERS.index(item.tier))
    return performances


def review_season(
    season_data: CareerData | None,
    career: CareerData | None,
    *,
    groups: Sequence[ReviewGroup] = REVIEW_GROUPS,
) -> list[SeasonPerformance]:
    """Tier every player who recorded the primary stat for their group."""

    if season_data is None or career is None:
        return []
    performances: list[SeasonPerformance] = []
    for group in groups:
        reviewed = _review_group(group, group.pool(season_data), group.pool(career))
        logger.debug("Reviewed %s %s performances", len(reviewed), group.label)
        performances.extend(reviewed)
    return performances


__all__ = [
    "PERFORMANCE_TIERS",
    "REVIEW_GROUPS",
    "ReviewGroup",
    "SeasonPerformance",
    "format_stat",
    "performance_tier",
    "review_season",
    "summarize",
]
