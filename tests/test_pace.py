import pytest

from league_records.core.models import CareerData, CareerPlayer
from league_records.core.pace import pace_per_season, pace_to_records, seasons_to_break


def _qb(name: str, pass_yards: float, games: float, status: str = "Active") -> CareerPlayer:
    return CareerPlayer(name=name, position="QB", status=status, pass_yards=pass_yards, games=games)


def test_seasons_to_break_rounds_up():
    assert seasons_to_break(500, 100) == 5
    assert seasons_to_break(501, 100) == 6
    assert seasons_to_break(100, 0) is None


def test_pace_extrapolates_to_sixteen_games():
    assert pace_per_season(2000, 8) == 4000
    assert pace_per_season(2000, 0) == 0


def test_projections_within_horizon_sorted_soonest_first():
    career = CareerData(
        quarterbacks=(
            _qb("Old Legend", 60000, 250, status="Retired"),
            _qb("Slow Climber", 16000, 64),
            _qb("Near Miss", 40000, 128),
            _qb("Closer", 48000, 160),
            _qb("Rookie Flash", 5000, 10),
        )
    )
    projections = pace_to_records(career)

    assert [record.player_name for record in projections] == ["Closer", "Near Miss"]
    closer = projections[0]
    assert closer.seasons_to_break == 3
    assert closer.pace_per_season == 4800
    assert closer.record_value == 60000
    assert closer.record_holder == "Old Legend"
    assert closer.record_name == "Career Passing Yards"
    assert closer.percent_to_record == pytest.approx(80.0)
    assert projections[1].seasons_to_break == 4


def test_horizon_is_inclusive():
    career = CareerData(
        running_backs=(
            CareerPlayer(name="Holder", position="RB", rush_yards=10000, games=160),
            CareerPlayer(name="Chaser", position="RB", status="Active", rush_yards=5000, games=80),
        )
    )
    projections = pace_to_records(career)
    assert [(record.player_name, record.seasons_to_break) for record in projections] == [("Chaser", 5)]
    assert pace_to_records(career, horizon=4) == []


def test_record_holder_and_inactive_players_are_not_projected():
    career = CareerData(
        wide_receivers=(
            CareerPlayer(name="Active Holder", position="WR", status="Active", rec_yards=15000, games=200),
            CareerPlayer(name="Retired Chaser", position="WR", status="Retired", rec_yards=14000, games=180),
        )
    )
    assert pace_to_records(career) == []


def test_no_career_means_no_projections():
    assert pace_to_records(None) == []
