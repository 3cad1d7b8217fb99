import math

import polars as pl
import pytest

from league_records.core.models import CareerData, CareerPlayer
from league_records.core.ratios import (
    LEADER_METRICS,
    advanced_metrics,
    best_in_class,
    compute_ratio,
    get_ratio,
    safe_ratio,
    with_ratio_columns,
)


def _qb(name: str, **stats: float) -> CareerPlayer:
    return CareerPlayer(name=name, position="QB", **stats)


def _metric(name: str):
    return next(metric for metric in LEADER_METRICS if metric.name == name)


@pytest.mark.parametrize(
    "numerator, denominator, expected",
    [
        (10, 0, 0.0),
        (0, 0, 0.0),
        (10, -2, 0.0),
        (10, float("nan"), 0.0),
        (-10, 5, 0.0),
        (10, 4, 2.5),
    ],
)
def test_safe_ratio_is_finite_and_non_negative(numerator, denominator, expected):
    value = safe_ratio(numerator, denominator)
    assert math.isfinite(value)
    assert value == expected


def test_zero_interceptions_do_not_produce_infinite_ratio():
    player = _qb("Perfect Passer", pass_tds=12, interceptions=0)
    assert compute_ratio(player, "td_int_ratio") == 0.0


def test_scaled_and_summed_ratios():
    player = CareerPlayer(
        name="Lee Hart",
        position="WR",
        games=32,
        rec_tds=10,
        rush_yards=100,
        rec_yards=1500,
        completions=0,
    )
    assert compute_ratio(player, "rec_tds_per_16") == 5.0
    assert compute_ratio(player, "scrimmage_yards_per_game") == 50.0
    assert compute_ratio(_qb("A", completions=150, pass_attempts=250), "completion_pct") == pytest.approx(60.0)


def test_unknown_ratio_raises_key_error():
    with pytest.raises(KeyError):
        get_ratio("yards_per_snap")


def test_leader_requires_denominator_strictly_above_minimum():
    metric = _metric("Best Yards/Attempt")
    at_minimum = _qb("Small Sample", pass_yards=4000, pass_attempts=200)
    above = _qb("Volume Arm", pass_yards=1608, pass_attempts=201)

    assert best_in_class([at_minimum], metric) is None
    leader = best_in_class([at_minimum, above], metric)
    assert leader is not None
    assert leader.player_name == "Volume Arm"
    assert leader.value == 8.0


def test_ties_keep_the_first_player():
    metric = _metric("Best Yards/Attempt")
    first = _qb("First", pass_yards=2100, pass_attempts=300)
    second = _qb("Second", pass_yards=2100, pass_attempts=300)
    assert best_in_class([first, second], metric).player_name == "First"


def test_advanced_metrics_skip_metrics_without_qualifier():
    career = CareerData(
        quarterbacks=(_qb("Sam Stone", pass_yards=2100, pass_attempts=300, completions=180, pass_tds=20, interceptions=5),),
        linebackers=(CareerPlayer(name="Kyle Vance", position="LB", games=48, sacks=24, interceptions=6, forced_fumbles=6),),
    )
    metrics = {metric.name: metric for metric in advanced_metrics(career)}

    assert set(metrics) == {
        "Best Yards/Attempt",
        "Best TD/INT Ratio",
        "Completion %",
        "Sacks/Game",
        "Turnovers/Game",
    }
    assert metrics["Best Yards/Attempt"].value == 7.0
    assert metrics["Best TD/INT Ratio"].value == 4.0
    assert metrics["Completion %"].value == pytest.approx(60.0)
    assert metrics["Sacks/Game"].value == 0.5
    assert metrics["Turnovers/Game"].value == 0.25
    assert metrics["Sacks/Game"].position == "LB"


def test_advanced_metrics_without_career_is_empty():
    assert advanced_metrics(None) == []


def test_ratio_columns_guard_zero_denominators():
    frame = pl.DataFrame(
        {
            "name": ["A", "B"],
            "pass_yards": [2000, 500],
            "pass_attempts": [250, 0],
        }
    )
    enriched = with_ratio_columns(frame, ["yards_per_attempt", "td_int_ratio"])

    assert enriched["yards_per_attempt"].to_list() == [8.0, 0.0]
    # Missing stat columns count as zero.
    assert enriched["td_int_ratio"].to_list() == [0.0, 0.0]


def test_zero_interception_passer_never_leads_td_int_ratio():
    career = CareerData(
        quarterbacks=(
            _qb("Never Picked", pass_tds=60, interceptions=0, pass_attempts=900, pass_yards=7200),
            _qb("Sam Stone", pass_tds=30, interceptions=10, pass_attempts=500, pass_yards=3500),
        )
    )
    metrics = {metric.name: metric for metric in advanced_metrics(career)}

    leader = metrics["Best TD/INT Ratio"]
    assert leader.player_name == "Sam Stone"
    assert leader.value == 3.0
