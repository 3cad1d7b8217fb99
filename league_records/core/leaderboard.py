"""Career and single-season leaderboards.

Both catalogues rest on :func:`rank_top_n`: keep strictly positive values,
sort descending, slice. Python's sort is stable, so tied players keep the
order they were supplied in; no secondary key is applied.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
import logging
from typing import TypeVar

from league_records.config import DEFAULT_TOP_N

from .identity import PlayerKey
from .models import DEFENSIVE_POSITIONS, CareerData, CareerPlayer, SeasonSnapshot
from .ratios import ratio

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RecordEntry:
    """One ranked row of a leaderboard."""

    stat: str
    value: float
    player_name: str
    position: str
    team: str | None = None
    season: str | None = None


@dataclass(frozen=True)
class TopNRecord:
    stat: str
    description: str
    entries: tuple[RecordEntry, ...]


@dataclass(frozen=True)
class SeasonEntry:
    """A stored snapshot paired with the history key it belongs to."""

    key: PlayerKey
    snapshot: SeasonSnapshot


def rank_top_n(items: Iterable[T], value_fn: Callable[[T], float], n: int) -> list[tuple[T, float]]:
    """Return up to ``n`` ``(item, value)`` pairs with the highest positive values."""

    if n <= 0:
        return []
    scored = [(item, float(value_fn(item))) for item in items]
    positive = [pair for pair in scored if pair[1] > 0]
    positive.sort(key=lambda pair: pair[1], reverse=True)
    return positive[:n]


def top_n(
    players: Iterable[CareerPlayer],
    value_fn: Callable[[CareerPlayer], float],
    label: str,
    n: int = DEFAULT_TOP_N,
) -> list[RecordEntry]:
    """Rank career players by ``value_fn``."""

    return [
        RecordEntry(
            stat=label,
            value=value,
            player_name=player.name,
            position=player.position,
            team=player.team,
        )
        for player, value in rank_top_n(players, value_fn, n)
    ]


def top_n_seasons(
    entries: Iterable[SeasonEntry],
    value_fn: Callable[[SeasonSnapshot], float],
    label: str,
    n: int = DEFAULT_TOP_N,
) -> list[RecordEntry]:
    """Rank individual season snapshots by ``value_fn``."""

    ranked = rank_top_n(entries, lambda entry: value_fn(entry.snapshot), n)
    return [
        RecordEntry(
            stat=label,
            value=value,
            player_name=entry.key.name,
            position=entry.key.position,
            season=entry.snapshot.season,
        )
        for entry, value in ranked
    ]


def build_record(stat: str, description: str, entries: Sequence[RecordEntry]) -> TopNRecord | None:
    if not entries:
        return None
    return TopNRecord(stat=stat, description=description, entries=tuple(entries))


@dataclass(frozen=True)
class CareerRecordSpec:
    key: str
    stat: str
    description: str
    pool: Callable[[CareerData], Sequence[CareerPlayer]]
    value: Callable[[CareerPlayer], float]


def _quarterbacks(career: CareerData) -> Sequence[CareerPlayer]:
    return career.quarterbacks


def _running_backs(career: CareerData) -> Sequence[CareerPlayer]:
    return career.running_backs


def _wide_receivers(career: CareerData) -> Sequence[CareerPlayer]:
    return career.wide_receivers


def _tight_ends(career: CareerData) -> Sequence[CareerPlayer]:
    return career.tight_ends


def _defenders(career: CareerData) -> Sequence[CareerPlayer]:
    return career.defenders()


def _everyone(career: CareerData) -> Sequence[CareerPlayer]:
    return career.all_players()


CAREER_RECORDS: tuple[CareerRecordSpec, ...] = (
    # Quarterbacks
    CareerRecordSpec("qb_pass_yds", "Career Passing Yards", "Total passing yards", _quarterbacks, lambda p: p.pass_yards),
    CareerRecordSpec("qb_pass_td", "Career Passing TDs", "Total TD passes", _quarterbacks, lambda p: p.pass_tds),
    CareerRecordSpec("qb_ypa", "Yards Per Attempt", "Pass efficiency", _quarterbacks, ratio("yards_per_attempt")),
    CareerRecordSpec("qb_td_int", "TD/INT Ratio", "Decision making", _quarterbacks, ratio("td_int_ratio")),
    CareerRecordSpec("qb_total_td", "Total TDs", "Combined TDs", _quarterbacks, lambda p: p.pass_tds + p.rush_tds),
    CareerRecordSpec("qb_total_yds", "Total Yards", "Pass + Rush", _quarterbacks, lambda p: p.pass_yards + p.rush_yards),
    # Running backs
    CareerRecordSpec("rb_rush_yds", "Career Rushing Yards", "Total rushing yards", _running_backs, lambda p: p.rush_yards),
    CareerRecordSpec("rb_rush_td", "Career Rushing TDs", "Total rushing TDs", _running_backs, lambda p: p.rush_tds),
    CareerRecordSpec("rb_ypc", "Yards Per Carry", "Rushing efficiency", _running_backs, ratio("yards_per_carry")),
    CareerRecordSpec("rb_scrimmage", "Scrimmage Yards", "Rush + Receiving", _running_backs, lambda p: p.rush_yards + p.rec_yards),
    CareerRecordSpec("rb_ypg", "Yds/Game", "Avg per game", _running_backs, ratio("scrimmage_yards_per_game")),
    # Wide receivers
    CareerRecordSpec("wr_rec_yds", "Career Receiving Yards", "Total receiving yards", _wide_receivers, lambda p: p.rec_yards),
    CareerRecordSpec("wr_rec_td", "Career Receiving TDs", "Total receiving TDs", _wide_receivers, lambda p: p.rec_tds),
    CareerRecordSpec("wr_ypr", "Yards Per Rec", "Catch efficiency", _wide_receivers, ratio("yards_per_reception")),
    CareerRecordSpec("wr_td_per_16", "TDs/16 Games", "TD rate", _wide_receivers, ratio("rec_tds_per_16")),
    # Tight ends
    CareerRecordSpec("te_rec_yds", "TE Receiving Yards", "Total receiving yards", _tight_ends, lambda p: p.rec_yards),
    CareerRecordSpec("te_rec_td", "TE Receiving TDs", "Total receiving TDs", _tight_ends, lambda p: p.rec_tds),
    # Defense
    CareerRecordSpec("def_tackles", "Career Tackles", "Total tackles", _defenders, lambda p: p.tackles),
    CareerRecordSpec("def_sacks", "Career Sacks", "Total sacks", _defenders, lambda p: p.sacks),
    CareerRecordSpec("def_int", "Career INTs", "Total interceptions", _defenders, lambda p: p.interceptions),
    CareerRecordSpec(
        "def_turnovers",
        "Turnovers Created",
        "INTs + FF",
        _defenders,
        lambda p: p.interceptions + p.forced_fumbles,
    ),
    CareerRecordSpec("def_tpg", "Tackles/Game", "Avg tackles", _defenders, ratio("tackles_per_game")),
    # Accolades
    CareerRecordSpec("rings", "Championships", "Rings won", _everyone, lambda p: p.rings),
    CareerRecordSpec("mvp", "MVP Awards", "League MVPs", _everyone, lambda p: p.mvp),
    CareerRecordSpec("legacy", "Career Legacy", "Overall impact", _everyone, lambda p: p.career_legacy),
    CareerRecordSpec("dominance", "Peak Dominance", "Best at peak", _everyone, lambda p: p.dominance),
)


def all_time_records(
    career: CareerData | None,
    *,
    n: int = DEFAULT_TOP_N,
    specs: Sequence[CareerRecordSpec] = CAREER_RECORDS,
) -> dict[str, TopNRecord | None] | None:
    """Build every career leaderboard; ``None`` when no career data is loaded."""

    if career is None:
        return None
    records: dict[str, TopNRecord | None] = {}
    for spec in specs:
        entries = top_n(spec.pool(career), spec.value, spec.stat, n)
        records[spec.key] = build_record(spec.stat, spec.description, entries)
    return records


@dataclass(frozen=True)
class SeasonRecordSpec:
    key: str
    stat: str
    description: str
    positions: tuple[str, ...]
    value: Callable[[SeasonSnapshot], float]


SINGLE_SEASON_RECORDS: tuple[SeasonRecordSpec, ...] = (
    SeasonRecordSpec("qb_pass_yds", "Passing Yards", "Single season", ("QB",), lambda s: s.pass_yards),
    SeasonRecordSpec("qb_pass_td", "Passing TDs", "Single season", ("QB",), lambda s: s.pass_tds),
    SeasonRecordSpec("qb_total_td", "Total TDs", "Pass + Rush", ("QB",), lambda s: s.pass_tds + s.rush_tds),
    SeasonRecordSpec("rb_rush_yds", "Rushing Yards", "Single season", ("RB",), lambda s: s.rush_yards),
    SeasonRecordSpec("rb_rush_td", "Rushing TDs", "Single season", ("RB",), lambda s: s.rush_tds),
    SeasonRecordSpec("rb_scrimmage", "Scrimmage Yds", "Rush + Rec", ("RB",), lambda s: s.rush_yards + s.rec_yards),
    SeasonRecordSpec("wr_rec_yds", "Receiving Yards", "Single season", ("WR",), lambda s: s.rec_yards),
    SeasonRecordSpec("wr_rec_td", "Receiving TDs", "Single season", ("WR",), lambda s: s.rec_tds),
    SeasonRecordSpec("te_rec_yds", "TE Rec Yards", "Single season", ("TE",), lambda s: s.rec_yards),
    SeasonRecordSpec("def_tackles", "Tackles", "Single season", DEFENSIVE_POSITIONS, lambda s: s.tackles),
    SeasonRecordSpec("def_sacks", "Sacks", "Single season", DEFENSIVE_POSITIONS, lambda s: s.sacks),
    SeasonRecordSpec("def_int", "INTs", "Single season", DEFENSIVE_POSITIONS, lambda s: s.interceptions),
)


def season_entries(
    history: Mapping[PlayerKey, Sequence[SeasonSnapshot]],
    *,
    min_seasons: int = 2,
) -> list[SeasonEntry]:
    """Flatten history lines that hold at least ``min_seasons`` snapshots."""

    return [
        SeasonEntry(key=key, snapshot=snapshot)
        for key, snapshots in history.items()
        if len(snapshots) >= min_seasons
        for snapshot in snapshots
    ]


def single_season_records(
    history: Mapping[PlayerKey, Sequence[SeasonSnapshot]],
    *,
    n: int = DEFAULT_TOP_N,
    specs: Sequence[SeasonRecordSpec] = SINGLE_SEASON_RECORDS,
) -> dict[str, TopNRecord | None] | None:
    """Build the single-season leaderboards; ``None`` when no snapshot is eligible."""

    entries = season_entries(history)
    if not entries:
        return None
    records: dict[str, TopNRecord | None] = {}
    for spec in specs:
        pool = [entry for entry in entries if entry.key.matches(spec.positions)]
        ranked = top_n_seasons(pool, spec.value, spec.stat, n)
        records[spec.key] = build_record(spec.stat, spec.description, ranked)
    logger.debug("Built %s single-season records from %s snapshots", len(records), len(entries))
    return records


__all__ = [
    "CAREER_RECORDS",
    "CareerRecordSpec",
    "RecordEntry",
    "SINGLE_SEASON_RECORDS",
    "SeasonEntry",
    "SeasonRecordSpec",
    "TopNRecord",
    "all_time_records",
    "build_record",
    "rank_top_n",
    "season_entries",
    "single_season_records",
    "top_n",
    "top_n_seasons",
]
