"""League report: headline counts, career leaders and season stories."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging

from league_records.config import HALL_OF_FAME_LEGACY, LEGENDARY_LEGACY

from .models import CareerData, CareerPlayer
from .season_review import format_stat

logger = logging.getLogger(__name__)

LEADER_COUNT = 5


@dataclass(frozen=True)
class SeasonStory:
    headline: str
    body: str
    tier: str
    player: CareerPlayer | None = None


@dataclass(frozen=True)
class LeagueReport:
    total_players: int
    active_players: int
    hall_of_fame_count: int
    legendary_count: int
    top_by_legacy: tuple[CareerPlayer, ...]
    top_by_tpg: tuple[CareerPlayer, ...]
    top_by_rings: tuple[CareerPlayer, ...]
    top_by_mvp: tuple[CareerPlayer, ...]
    season_stories: tuple[SeasonStory, ...] = ()


@dataclass(frozen=True)
class StandoutRule:
    pool: Callable[[CareerData], Sequence[CareerPlayer]]
    stat: str
    legendary_at: float
    legendary_headline: str
    headline: str
    regular_tier: str
    body: Callable[[CareerPlayer, CareerPlayer | None], str]


def _last_name(name: str) -> str:
    return name.split(" ")[-1]


def _ordinal_suffix(count: int) -> str:
    if count == 2:
        return "nd"
    if count == 3:
        return "rd"
    return "th"


def _passing_body(player: CareerPlayer, career: CareerPlayer | None) -> str:
    tail = f", bringing their career total to {format_stat(career.pass_yards)} yards" if career else ""
    return (
        f"{player.name} threw for {format_stat(player.pass_yards)} yards and "
        f"{format_stat(player.pass_tds)} touchdowns this season{tail}."
    )


def _rushing_body(player: CareerPlayer, career: CareerPlayer | None) -> str:
    tail = f". Career rushing yards now sit at {format_stat(career.rush_yards)}" if career else ""
    return (
        f"{player.name} rushed for {format_stat(player.rush_yards)} yards with "
        f"{format_stat(player.rush_tds)} touchdowns{tail}."
    )


def _receiving_body(player: CareerPlayer, career: CareerPlayer | None) -> str:
    tail = f". Now has {format_stat(career.rec_yards)} career receiving yards" if career else ""
    return (
        f"{player.name} hauled in {format_stat(player.receptions)} catches for "
        f"{format_stat(player.rec_yards)} yards and {format_stat(player.rec_tds)} scores{tail}."
    )


STANDOUT_RULES: tuple[StandoutRule, ...] = (
    StandoutRule(
        lambda data: data.quarterbacks,
        "pass_yards",
        4500,
        "{last} Posts Historic Season",
        "{last} Leads League in Passing",
        "breaking",
        _passing_body,
    ),
    StandoutRule(
        lambda data: data.running_backs,
        "rush_yards",
        1500,
        "{last} Dominates on the Ground",
        "{last} Paces Rushing Attack",
        "notable",
        _rushing_body,
    ),
    StandoutRule(
        lambda data: data.wide_receivers,
        "rec_yards",
        1400,
        "{last} Has Career Year",
        "{last} Leads Receivers",
        "notable",
        _receiving_body,
    ),
)


def _find_by_name(players: Sequence[CareerPlayer], name: str) -> CareerPlayer | None:
    return next((player for player in players if player.name == name), None)


def _standout(players: Sequence[CareerPlayer], stat: str) -> CareerPlayer | None:
    """Season leader for ``stat``; on ties the later player wins."""

    leader: CareerPlayer | None = None
    for player in players:
        if leader is None or not getattr(leader, stat) > getattr(player, stat):
            leader = player
    return leader


def _top(players: Sequence[CareerPlayer], value: Callable[[CareerPlayer], float]) -> tuple[CareerPlayer, ...]:
    return tuple(sorted(players, key=value, reverse=True)[:LEADER_COUNT])


def season_stories(career: CareerData, season_data: CareerData) -> list[SeasonStory]:
    """Headlines for the uploaded season; MVP first, then championships, then standouts."""

    stories: list[SeasonStory] = []
    for rule in STANDOUT_RULES:
        standout = _standout(rule.pool(season_data), rule.stat)
        if standout is None or getattr(standout, rule.stat) <= 0:
            continue
        legendary = getattr(standout, rule.stat) >= rule.legendary_at
        career_player = _find_by_name(rule.pool(career), standout.name)
        template = rule.legendary_headline if legendary else rule.headline
        stories.append(
            SeasonStory(
                headline=template.format(last=_last_name(standout.name)),
                body=rule.body(standout, career_player),
                tier="legendary" if legendary else rule.regular_tier,
                player=career_player or standout,
            )
        )

    season_players = season_data.all_players()
    champions = [player for player in season_players if player.rings > 0]
    if champions:
        plural = len(champions) > 1
        stories.insert(
            0,
            SeasonStory(
                headline="Championship Glory",
                body=(
                    f"{len(champions)} player{'s' if plural else ''} added a ring to "
                    f"{'their collections' if plural else 'their collection'} this season: "
                    f"{', '.join(player.name for player in champions)}."
                ),
                tier="legendary",
            ),
        )

    mvps = [player for player in season_players if player.mvp > 0]
    if mvps:
        mvp = mvps[0]
        career_mvp = _find_by_name(career.all_players(), mvp.name)
        detail = ""
        if career_mvp is not None and career_mvp.mvp > 1:
            count = int(career_mvp.mvp)
            detail = f", their {count}{_ordinal_suffix(count)} career MVP award"
        stories.insert(
            0,
            SeasonStory(
                headline=f"{_last_name(mvp.name)} Wins MVP",
                body=f"{mvp.name} captured the league's highest individual honor{detail}.",
                tier="legendary",
                player=career_mvp or mvp,
            ),
        )
    return stories


def league_report(career: CareerData | None, season_data: CareerData | None = None) -> LeagueReport | None:
    """Summarise the league; ``None`` until career data is loaded."""

    if career is None:
        return None
    players = career.all_players()
    active = [player for player in players if player.is_active]
    stories = season_stories(career, season_data) if season_data is not None else []
    logger.debug("League report covers %s players and %s stories", len(players), len(stories))
    return LeagueReport(
        total_players=len(players),
        active_players=len(active),
        hall_of_fame_count=sum(1 for player in players if player.career_legacy >= HALL_OF_FAME_LEGACY),
        legendary_count=sum(1 for player in players if player.career_legacy >= LEGENDARY_LEGACY),
        top_by_legacy=_top(players, lambda player: player.career_legacy),
        top_by_tpg=_top(active, lambda player: player.tpg),
        top_by_rings=_top(players, lambda player: player.rings),
        top_by_mvp=_top([player for player in players if player.mvp > 0], lambda player: player.mvp),
        season_stories=tuple(stories),
    )


__all__ = ["LeagueReport", "SeasonStory", "league_report", "season_stories"]
