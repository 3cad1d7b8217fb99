"""Tunable constants shared across the league records engine."""

from __future__ import annotations

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
CACHE_DIRECTORY = PROJECT_ROOT / "data" / "cache"
HISTORY_PATH = CACHE_DIRECTORY / "season_history.parquet"

# A pace is always expressed as a 16-game season.
GAMES_PER_SEASON = 16
# Pace projections further out than this many seasons are not reported.
PACE_HORIZON_SEASONS = 5

DEFAULT_TOP_N = 5
GREATEST_SEASONS_LIMIT = 20

DEFAULT_SEASON_LABEL = "New Season"

HALL_OF_FAME_LEGACY = 5000
LEGENDARY_LEGACY = 8000
ACTIVE_STATUS = "Active"

__all__ = [
    "ACTIVE_STATUS",
    "CACHE_DIRECTORY",
    "DEFAULT_SEASON_LABEL",
    "DEFAULT_TOP_N",
    "GAMES_PER_SEASON",
    "GREATEST_SEASONS_LIMIT",
    "HALL_OF_FAME_LEGACY",
    "HISTORY_PATH",
    "LEGENDARY_LEGACY",
    "PACE_HORIZON_SEASONS",
    "PROJECT_ROOT",
]
