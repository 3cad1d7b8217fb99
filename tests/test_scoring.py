"""Unit tests for season scoring and the greatest-seasons list."""

from __future__ import annotations

import unittest

from league_records.core.identity import PlayerKey
from league_records.core.models import SeasonSnapshot
from league_records.core.scoring import (
    ELITE,
    GREAT,
    LEGENDARY,
    NOTABLE,
    SOLID,
    award_bonus,
    classify_score,
    greatest_seasons,
    key_stats,
    score_season,
    variant_for,
)


class ScoreSeasonTestCase(unittest.TestCase):
    def test_quarterback_formula(self) -> None:
        snapshot = SeasonSnapshot(
            season="Y1",
            pass_yards=4000,
            pass_tds=30,
            rush_yards=200,
            rush_tds=2,
            interceptions=10,
        )
        self.assertEqual(score_season(snapshot, "QB"), 370.0)
        self.assertEqual(classify_score(370.0), NOTABLE)

    def test_award_bonus_is_added(self) -> None:
        snapshot = SeasonSnapshot(season="Y1", pass_yards=4000, pass_tds=30, mvp=1, rings=1)
        self.assertEqual(award_bonus(snapshot), 160.0)
        self.assertEqual(score_season(snapshot, "QB"), 540.0)

    def test_running_back_and_receiver_formulas(self) -> None:
        back = SeasonSnapshot(rush_yards=1200, rush_tds=10, rec_yards=300, rec_tds=2)
        self.assertEqual(score_season(back, "RB"), 60 + 150 + 10 + 20)

        receiver = SeasonSnapshot(rec_yards=1400, receptions=100, rec_tds=10)
        self.assertEqual(score_season(receiver, "WR"), 70 + 200 + 150)
        self.assertEqual(score_season(receiver, "TE"), score_season(receiver, "WR"))

    def test_unknown_positions_use_defensive_formula(self) -> None:
        snapshot = SeasonSnapshot(tackles=100, sacks=10, interceptions=2, forced_fumbles=3)
        self.assertEqual(score_season(snapshot, "LB"), 200 + 150 + 40 + 30)
        self.assertEqual(variant_for("OL"), "DEF")
        self.assertEqual(score_season(snapshot, "OL"), score_season(snapshot, "DB"))


class ClassifyScoreTestCase(unittest.TestCase):
    def test_thresholds_are_inclusive_lower_bounds(self) -> None:
        self.assertEqual(classify_score(800), LEGENDARY)
        self.assertEqual(classify_score(799.999), ELITE)
        self.assertEqual(classify_score(600), ELITE)
        self.assertEqual(classify_score(400), GREAT)
        self.assertEqual(classify_score(250), NOTABLE)
        self.assertEqual(classify_score(249.5), SOLID)
        self.assertEqual(classify_score(-20), SOLID)


def test_key_stats_skip_zero_values():
    snapshot = SeasonSnapshot(pass_yards=3000, pass_tds=0, rush_yards=150)
    stats = key_stats(snapshot, "QB")
    assert [(stat.label, stat.value) for stat in stats] == [("Pass Yds", 3000), ("Rush Yds", 150)]


def test_greatest_seasons_orders_by_score_and_skips_single_season_players():
    history = {
        PlayerKey("QB", "Sam Stone"): (
            SeasonSnapshot(season="Y1", pass_yards=2500),
            SeasonSnapshot(season="Y2", pass_yards=5000, mvp=1),
        ),
        PlayerKey("LB", "Kyle Vance"): (
            SeasonSnapshot(season="Y1", tackles=120),
            SeasonSnapshot(season="Y2", tackles=80),
        ),
        PlayerKey("RB", "One Year"): (SeasonSnapshot(season="Y2", rush_yards=2000, rush_tds=20),),
    }
    seasons = greatest_seasons(history, limit=3)

    assert [(season.player_name, season.season) for season in seasons] == [
        ("Kyle Vance", "Y1"),
        ("Sam Stone", "Y2"),
        ("Kyle Vance", "Y2"),
    ]
    assert [season.score for season in seasons] == [240.0, 200.0, 160.0]
    assert seasons[1].awards.mvp == 1
    assert seasons[0].tier == SOLID


def test_greatest_seasons_respects_limit():
    history = {
        PlayerKey("WR", f"WR{i}"): (
            SeasonSnapshot(season="Y1", rec_yards=100 * (i + 1)),
            SeasonSnapshot(season="Y2", rec_yards=50),
        )
        for i in range(15)
    }
    assert len(greatest_seasons(history, limit=20)) == 20
    assert greatest_seasons(history, limit=0) == []
