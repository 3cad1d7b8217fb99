"""Core domain models and record computations."""

from .identity import PlayerKey, key_for, resolve
from .models import CareerData, CareerPlayer, SeasonSnapshot
from .leaderboard import RecordEntry, TopNRecord, all_time_records, single_season_records, top_n
from .ratios import AdvancedMetric, advanced_metrics, compute_ratio, safe_ratio
from .scoring import GreatSeason, classify_score, greatest_seasons, score_season
from .pace import PaceRecord, pace_to_records
from .season_review import SeasonPerformance, review_season
from .commentary import LeagueReport, SeasonStory, league_report

__all__ = [
    "AdvancedMetric",
    "CareerData",
    "CareerPlayer",
    "GreatSeason",
    "LeagueReport",
    "PaceRecord",
    "PlayerKey",
    "RecordEntry",
    "SeasonPerformance",
    "SeasonSnapshot",
    "SeasonStory",
    "TopNRecord",
    "advanced_metrics",
    "all_time_records",
    "classify_score",
    "compute_ratio",
    "greatest_seasons",
    "key_for",
    "league_report",
    "pace_to_records",
    "resolve",
    "review_season",
    "safe_ratio",
    "score_season",
    "single_season_records",
    "top_n",
]
