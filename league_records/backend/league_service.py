"""Query surface over the current league state.

Every query is a pure function of a :class:`LeagueState`. The service owns the
mutable pieces (career data, season history, current season), stamps each
state it hands out with a revision number and memoizes query results per
revision. Loading career data or uploading a season bumps the revision and so
invalidates every cached result.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import copy
from dataclasses import dataclass, field
import logging
from typing import Any, TypeVar

from league_records.config import DEFAULT_TOP_N, GREATEST_SEASONS_LIMIT
from league_records.core.commentary import LeagueReport, league_report
from league_records.core.identity import PlayerKey
from league_records.core.leaderboard import TopNRecord, all_time_records, single_season_records
from league_records.core.models import CareerData, SeasonSnapshot
from league_records.core.pace import PaceRecord, pace_to_records
from league_records.core.ratios import AdvancedMetric, advanced_metrics
from league_records.core.scoring import GreatSeason, greatest_seasons
from league_records.core.season_review import SeasonPerformance, review_season
from league_records.data.ingest import normalise_season_label, record_season, season_label_from_filename
from league_records.data.season_history import SeasonHistoryStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

RecordBook = dict[str, TopNRecord | None]


@dataclass(frozen=True)
class LeagueState:
    """Immutable view of everything the record queries read."""

    revision: int
    career: CareerData | None = None
    history: Mapping[PlayerKey, tuple[SeasonSnapshot, ...]] = field(default_factory=dict)
    current_season: str | None = None
    season_data: CareerData | None = None


def get_all_time_records(state: LeagueState, *, n: int = DEFAULT_TOP_N) -> RecordBook | None:
    return all_time_records(state.career, n=n)


def get_single_season_records(state: LeagueState, *, n: int = DEFAULT_TOP_N) -> RecordBook | None:
    return single_season_records(state.history, n=n)


def get_greatest_seasons(state: LeagueState, *, limit: int = GREATEST_SEASONS_LIMIT) -> list[GreatSeason]:
    return greatest_seasons(state.history, limit=limit)


def get_advanced_metrics(state: LeagueState) -> list[AdvancedMetric]:
    return advanced_metrics(state.career)


def get_pace_to_records(state: LeagueState) -> list[PaceRecord]:
    return pace_to_records(state.career)


def get_season_review(state: LeagueState) -> list[SeasonPerformance]:
    return review_season(state.season_data, state.career)


def get_league_report(state: LeagueState) -> LeagueReport | None:
    return league_report(state.career, state.season_data)


class LeagueRecordsService:
    """Holds league data and answers record queries with per-revision caching."""

    def __init__(
        self,
        store: SeasonHistoryStore | None = None,
        *,
        persist: bool = False,
        top_n: int = DEFAULT_TOP_N,
    ) -> None:
        self._store = store if store is not None else SeasonHistoryStore()
        self._persist = persist
        self._top_n = top_n
        self._career: CareerData | None = None
        self._season_data: CareerData | None = None
        self._current_season: str | None = None
        self._changes = 0
        self._cache: dict[str, tuple[int, Any]] = {}

    @property
    def store(self) -> SeasonHistoryStore:
        return self._store

    @property
    def career(self) -> CareerData | None:
        return self._career

    @property
    def current_season(self) -> str | None:
        return self._current_season

    @property
    def revision(self) -> int:
        """Monotonic data version covering both service updates and history appends."""

        return self._changes + self._store.revision

    def load_career(self, career: CareerData) -> int:
        """Replace the career aggregates wholesale."""

        self._career = career
        self._changes += 1
        logger.info("Loaded career data for %s players (revision %s)", len(career.all_players()), self.revision)
        return self.revision

    def upload_season(
        self,
        season_data: CareerData,
        season: str | None = None,
        *,
        filename: str | None = None,
    ) -> int:
        """Record a season upload into the history and make it the current season.

        The label comes from ``season`` when given, otherwise from ``filename``,
        otherwise the generic placeholder.
        """

        if season is not None:
            label = normalise_season_label(season)
        elif filename is not None:
            label = season_label_from_filename(filename)
        else:
            label = normalise_season_label(None)

        record_season(self._store, season_data, label)
        self._season_data = season_data
        self._current_season = label
        self._changes += 1
        if self._persist:
            self._store.save()
        logger.info("Uploaded season %s (revision %s)", label, self.revision)
        return self.revision

    def state(self) -> LeagueState:
        return LeagueState(
            revision=self.revision,
            career=self._career,
            history=self._store.all_entries(),
            current_season=self._current_season,
            season_data=self._season_data,
        )

    def _memoized(self, name: str, compute: Callable[[LeagueState], T]) -> T:
        """Return the cached result for the current revision, computing it once.

        Returns a shallow copy; the cached object itself is never handed out.
        """

        revision = self.revision
        cached = self._cache.get(name)
        if cached is not None and cached[0] == revision:
            return copy.copy(cached[1])
        logger.debug("Recomputing %s for revision %s", name, revision)
        result = compute(self.state())
        self._cache[name] = (revision, result)
        return copy.copy(result)

    def get_all_time_records(self) -> RecordBook | None:
        return self._memoized("all_time_records", lambda state: get_all_time_records(state, n=self._top_n))

    def get_single_season_records(self) -> RecordBook | None:
        return self._memoized(
            "single_season_records",
            lambda state: get_single_season_records(state, n=self._top_n),
        )

    def get_greatest_seasons(self) -> list[GreatSeason]:
        return self._memoized("greatest_seasons", get_greatest_seasons)

    def get_advanced_metrics(self) -> list[AdvancedMetric]:
        return self._memoized("advanced_metrics", get_advanced_metrics)

    def get_pace_to_records(self) -> list[PaceRecord]:
        return self._memoized("pace_to_records", get_pace_to_records)

    def get_season_review(self) -> list[SeasonPerformance]:
        return self._memoized("season_review", get_season_review)

    def get_league_report(self) -> LeagueReport | None:
        return self._memoized("league_report", get_league_report)


__all__ = [
    "LeagueRecordsService",
    "LeagueState",
    "get_advanced_metrics",
    "get_all_time_records",
    "get_greatest_seasons",
    "get_league_report",
    "get_pace_to_records",
    "get_season_review",
    "get_single_season_records",
]
