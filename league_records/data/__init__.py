"""Season history storage and upload ingestion."""

from __future__ import annotations

from .season_history import HISTORY_SCHEMA, SeasonHistoryStore
from .ingest import (
    career_data_from_frames,
    career_frame,
    load_league_directory,
    normalise_season_label,
    record_season,
    season_label_from_filename,
    season_snapshots,
)

__all__ = [
    "HISTORY_SCHEMA",
    "SeasonHistoryStore",
    "career_data_from_frames",
    "career_frame",
    "load_league_directory",
    "normalise_season_label",
    "record_season",
    "season_label_from_filename",
    "season_snapshots",
]
