"""Backend services that answer record queries for the presentation layer."""

from .league_service import LeagueRecordsService, LeagueState

__all__ = ["LeagueRecordsService", "LeagueState"]
