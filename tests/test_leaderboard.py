from __future__ import annotations

from league_records.core.identity import PlayerKey
from league_records.core.leaderboard import (
    CAREER_RECORDS,
    SINGLE_SEASON_RECORDS,
    all_time_records,
    rank_top_n,
    single_season_records,
    top_n,
)
from league_records.core.models import CareerData, CareerPlayer, SeasonSnapshot


def _rb(name: str, rush_yards: float, **stats: float) -> CareerPlayer:
    return CareerPlayer(name=name, position="RB", rush_yards=rush_yards, **stats)


def test_rank_top_n_drops_non_positive_values_and_limits_length():
    ranked = rank_top_n([3, 0, 7, -1, 5, 1], float, 3)
    assert [value for _, value in ranked] == [7.0, 5.0, 3.0]
    assert rank_top_n([1, 2], float, 0) == []


def test_top_n_is_descending_and_stable_on_ties():
    players = [_rb("A", 900), _rb("B", 1200), _rb("C", 900), _rb("D", 0)]
    entries = top_n(players, lambda p: p.rush_yards, "Rushing Yards", n=5)

    assert [entry.player_name for entry in entries] == ["B", "A", "C"]
    values = [entry.value for entry in entries]
    assert values == sorted(values, reverse=True)
    assert all(entry.position == "RB" for entry in entries)


def test_all_time_records_cover_every_catalogue_entry():
    career = CareerData(
        running_backs=(
            _rb("Joe Dash", 5000, rush_attempts=1000, rec_yards=1000, games=60, rush_tds=40),
            _rb("Max Power", 6000, rush_attempts=1500, games=80, rush_tds=45),
        ),
    )
    records = all_time_records(career, n=5)

    assert set(records) == {spec.key for spec in CAREER_RECORDS}
    assert [entry.player_name for entry in records["rb_rush_yds"].entries] == ["Max Power", "Joe Dash"]
    assert [entry.player_name for entry in records["rb_scrimmage"].entries] == ["Joe Dash", "Max Power"]
    assert records["rb_ypc"].entries[0].value == 5.0
    assert records["rb_ypg"].entries[0].value == 100.0
    # Empty pools produce no board rather than an empty one.
    assert records["qb_pass_yds"] is None
    assert records["rings"] is None


def test_all_time_records_without_career():
    assert all_time_records(None) is None


def test_n_caps_every_board():
    career = CareerData(running_backs=tuple(_rb(f"RB{i}", 100 * (i + 1)) for i in range(8)))
    records = all_time_records(career, n=3)
    assert len(records["rb_rush_yds"].entries) == 3
    assert records["rb_rush_yds"].entries[0].player_name == "RB7"


def test_single_season_records_need_two_snapshots_per_player():
    veteran = PlayerKey("QB", "Sam Stone")
    rookie = PlayerKey("QB", "One Year")
    history = {
        veteran: (
            SeasonSnapshot(season="Y1", pass_yards=3200, pass_tds=20, rush_tds=2),
            SeasonSnapshot(season="Y2", pass_yards=4100, pass_tds=30, rush_tds=3),
        ),
        rookie: (SeasonSnapshot(season="Y2", pass_yards=5000, pass_tds=45),),
    }
    records = single_season_records(history, n=5)

    assert set(records) == {spec.key for spec in SINGLE_SEASON_RECORDS}
    passing = records["qb_pass_yds"].entries
    assert [(entry.player_name, entry.season) for entry in passing] == [("Sam Stone", "Y2"), ("Sam Stone", "Y1")]
    assert records["qb_total_td"].entries[0].value == 33.0
    assert records["def_tackles"] is None


def test_single_season_records_group_defenders():
    history = {
        PlayerKey("LB", "Kyle Vance"): (SeasonSnapshot(season="Y1", tackles=110), SeasonSnapshot(season="Y2", tackles=95)),
        PlayerKey("DB", "Ray Cole"): (SeasonSnapshot(season="Y1", tackles=120), SeasonSnapshot(season="Y2", tackles=60)),
    }
    entries = single_season_records(history)["def_tackles"].entries
    assert [(entry.player_name, entry.value) for entry in entries] == [
        ("Ray Cole", 120.0),
        ("Kyle Vance", 110.0),
        ("Kyle Vance", 95.0),
        ("Ray Cole", 60.0),
    ]


def test_single_season_records_none_without_eligible_history():
    history = {PlayerKey("QB", "One Year"): (SeasonSnapshot(season="Y1", pass_yards=4000),)}
    assert single_season_records(history) is None
    assert single_season_records({}) is None


def test_zero_denominator_players_are_left_off_rate_boards():
    career = CareerData(
        quarterbacks=(
            CareerPlayer(name="Clipboard Holder", position="QB", pass_yards=0, pass_attempts=0, pass_tds=3),
            CareerPlayer(name="Sam Stone", position="QB", pass_yards=2100, pass_attempts=300, pass_tds=20, interceptions=5),
        ),
    )
    records = all_time_records(career)

    assert [entry.player_name for entry in records["qb_ypa"].entries] == ["Sam Stone"]
    assert [entry.player_name for entry in records["qb_td_int"].entries] == ["Sam Stone"]
    assert records["qb_ypa"].entries[0].value == 7.0
