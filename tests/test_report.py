from rich.console import Console

from league_records import render_league_report
from league_records.backend import LeagueRecordsService
from league_records.core.models import CareerData, CareerPlayer
from league_records.data.season_history import SeasonHistoryStore


def _console() -> Console:
    return Console(record=True, width=200)


def test_empty_service_prints_placeholder():
    console = _console()
    render_league_report(LeagueRecordsService(SeasonHistoryStore()), console=console)
    assert "No data available" in console.export_text()


def test_report_renders_records_and_season_review():
    service = LeagueRecordsService(SeasonHistoryStore())
    service.load_career(
        CareerData(
            quarterbacks=(
                CareerPlayer(name="Sam Stone", position="QB", status="Active", pass_yards=30000, pass_attempts=3600, games=120),
            ),
        )
    )
    service.upload_season(
        CareerData(quarterbacks=(CareerPlayer(name="Sam Stone", position="QB", pass_yards=4600, pass_tds=35),)),
        "Y3",
    )
    console = _console()
    render_league_report(service, console=console)
    text = console.export_text()

    assert "LEAGUE REPORT" in text
    assert "Career Passing Yards" in text
    assert "30,000" in text
    assert "Season Y3 Review" in text
    assert "Stone Posts Historic Season" in text
    assert "Best Yards/Attempt" in text
