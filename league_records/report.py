"""Rich terminal rendering of the league record book."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.table import Table

from league_records.backend.league_service import LeagueRecordsService
from league_records.core.commentary import LeagueReport
from league_records.core.leaderboard import TopNRecord
from league_records.core.pace import PaceRecord
from league_records.core.ratios import AdvancedMetric
from league_records.core.scoring import GreatSeason
from league_records.core.season_review import SeasonPerformance, format_stat


def record_table(record: TopNRecord, *, show_season: bool = False) -> Table:
    table = Table(title=f"{record.stat} ({record.description})", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Pos")
    if show_season:
        table.add_column("Season")
    table.add_column("Value", justify="right")
    for rank, entry in enumerate(record.entries, start=1):
        cells = [str(rank), entry.player_name, entry.position]
        if show_season:
            cells.append(entry.season or "")
        cells.append(format_stat(entry.value))
        table.add_row(*cells)
    return table


def greatest_seasons_table(seasons: Sequence[GreatSeason]) -> Table:
    table = Table(title="Greatest Seasons")
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("Season")
    table.add_column("Score", justify="right")
    table.add_column("Tier")
    table.add_column("Key Stats")
    for rank, season in enumerate(seasons, start=1):
        stats = ", ".join(f"{format_stat(stat.value)} {stat.label}" for stat in season.key_stats)
        table.add_row(
            str(rank),
            season.player_name,
            season.position,
            season.season,
            f"{season.score:.1f}",
            season.tier,
            stats,
        )
    return table


def advanced_metrics_table(metrics: Sequence[AdvancedMetric]) -> Table:
    table = Table(title="Advanced Metrics")
    table.add_column("Metric")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("Value", justify="right")
    table.add_column("Description")
    for metric in metrics:
        table.add_row(metric.name, metric.player_name, metric.position, f"{metric.value:.2f}", metric.description)
    return table


def pace_table(records: Sequence[PaceRecord]) -> Table:
    table = Table(title="Pace to Records")
    table.add_column("Player")
    table.add_column("Record")
    table.add_column("Current", justify="right")
    table.add_column("Mark", justify="right")
    table.add_column("Holder")
    table.add_column("Pace/Season", justify="right")
    table.add_column("Seasons", justify="right")
    table.add_column("% of Record", justify="right")
    for record in records:
        table.add_row(
            f"{record.player_name} ({record.position})",
            record.record_name,
            format_stat(record.current_value),
            format_stat(record.record_value),
            record.record_holder,
            f"{record.pace_per_season:,.0f}",
            str(record.seasons_to_break),
            f"{record.percent_to_record:.1f}%",
        )
    return table


def season_review_table(performances: Sequence[SeasonPerformance], season: str | None) -> Table:
    table = Table(title=f"Season {season} Review" if season else "Season Review")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("Tier")
    table.add_column("Summary")
    for performance in performances:
        table.add_row(
            performance.player.name,
            performance.season_stats.position,
            performance.tier.upper(),
            performance.summary,
        )
    return table


def _print_record_book(console: Console, book: Mapping[str, TopNRecord | None], *, show_season: bool) -> None:
    for record in book.values():
        if record is None:
            continue
        console.print(record_table(record, show_season=show_season))


def _print_league_report(console: Console, report: LeagueReport, season: str | None) -> None:
    console.print(
        f"[bold]LEAGUE REPORT[/bold] season {season or '-'}: {report.total_players} players, "
        f"{report.active_players} active, {report.hall_of_fame_count} Hall of Famers, "
        f"{report.legendary_count} legendary"
    )
    for story in report.season_stories:
        console.print(f"[bold]{story.headline}[/bold] ({story.tier})")
        console.print(f"  {story.body}")


def render_league_report(service: LeagueRecordsService, console: Console | None = None) -> None:
    """Print every section the service can currently produce."""

    console = console or Console()
    report = service.get_league_report()
    if report is None:
        console.print("\n[yellow]No data available[/yellow]")
        return

    _print_league_report(console, report, service.current_season)

    all_time = service.get_all_time_records()
    if all_time:
        console.print("\n[bold cyan]All-Time Records[/bold cyan]")
        _print_record_book(console, all_time, show_season=False)

    single = service.get_single_season_records()
    if single:
        console.print("\n[bold cyan]Single-Season Records[/bold cyan]")
        _print_record_book(console, single, show_season=True)

    greatest = service.get_greatest_seasons()
    if greatest:
        console.print(greatest_seasons_table(greatest))

    metrics = service.get_advanced_metrics()
    if metrics:
        console.print(advanced_metrics_table(metrics))

    pace = service.get_pace_to_records()
    if pace:
        console.print(pace_table(pace))

    review = service.get_season_review()
    if review:
        console.print(season_review_table(review, service.current_season))


__all__ = [
    "advanced_metrics_table",
    "greatest_seasons_table",
    "pace_table",
    "record_table",
    "render_league_report",
    "season_review_table",
]
