"""
Tests for the headless league runner and its CSV export.
"""

import csv
from functools import partial

from connect3.ai.difficulty_agent import DifficultyAgent
from connect3.ai.random_agent import RandomAgent
from connect3.scripts.league import CSV_COLUMNS, export_csv, main, round_robin
from connect3.scripts.league_play import play_headless
from connect3.scripts.league_roster import build_roster
from connect3.scripts.league_stats import DRAW, Agg, Team, add_result, wilson_lcb
from connect3.types import Difficulty, GameVariant


def small_roster():
    return [
        Team("Random", partial(RandomAgent, name="Random", seed=1)),
        Team("Hard", partial(DifficultyAgent, name="Hard", difficulty=Difficulty.HARD)),
        Team("Easy seed0", partial(DifficultyAgent, name="Easy seed0", difficulty=Difficulty.EASY, seed=0)),
    ]


class TestHeadless:

    def test_connect3_game_finishes(self):
        outcome, stats = play_headless(RandomAgent(seed=1), RandomAgent(seed=2), GameVariant.CONNECT3)
        assert outcome in ("red", "yellow", DRAW)
        assert stats["red"]["kings"] == stats["yellow"]["kings"] == 0
        assert stats["red"]["moves"] + stats["yellow"]["moves"] <= 30

    def test_classic_game_reports_side_stats(self):
        outcome, stats = play_headless(
            DifficultyAgent(difficulty=Difficulty.HARD), RandomAgent(seed=5), GameVariant.CLASSIC, seed_base=3
        )
        assert outcome in ("red", "yellow", DRAW)
        for side in ("red", "yellow"):
            assert set(stats[side]) == {"moves", "time_ms", "matches", "cascades", "kings", "score"}
            assert stats[side]["kings"] == stats[side]["matches"]

    def test_move_cap_is_a_draw(self):
        outcome, _ = play_headless(RandomAgent(seed=1), RandomAgent(seed=2), GameVariant.CLASSIC, max_moves=3)
        assert outcome == DRAW


class TestAggregation:

    def test_add_result(self):
        a, b = Agg(), Agg()
        add_result(a, b, "red", a_is_red=True)
        add_result(a, b, "red", a_is_red=False)
        add_result(a, b, DRAW, a_is_red=True)
        assert (a.wins, a.draws, a.losses) == (1, 1, 1)
        assert (b.wins, b.draws, b.losses) == (1, 1, 1)
        assert a.points == b.points == 1.5
        assert a.ppg == 0.5

    def test_wilson(self):
        assert wilson_lcb(0.5, 0, 1.28) == 0.0
        assert 0.0 < wilson_lcb(0.8, 50, 1.28) < 0.8
        assert Agg().strength(1.28) == 0.0

    def test_round_robin_totals(self):
        agg = round_robin(small_roster(), variant=GameVariant.CONNECT3, games_per_pair=2, max_workers=1)
        assert set(agg) == {"Random", "Hard", "Easy seed0"}
        for a in agg.values():
            assert a.games == 4
            assert a.wins + a.draws + a.losses == a.games
        assert sum(a.wins for a in agg.values()) == sum(a.losses for a in agg.values())

    def test_roster(self):
        names = [t.name for t in build_roster(seeds=2)]
        assert names == ["Random", "Easy seed0", "Easy seed1", "Medium seed0", "Medium seed1", "Hard seed0"]
        assert all(hasattr(t.make(), "choose_move") for t in build_roster(seeds=1))


class TestExport:

    def test_export_csv(self, tmp_path):
        agg = round_robin(small_roster()[:2], variant=GameVariant.CONNECT3, games_per_pair=2)
        path = export_csv(agg, GameVariant.CONNECT3, tmp_path / "results", z=1.28)

        assert path.name.startswith("league_results_")
        with open(path, newline="") as f:
            reader = csv.DictReader(f)
            assert reader.fieldnames == CSV_COLUMNS
            rows = list(reader)
        assert {r["name"] for r in rows} == {"Random", "Hard"}
        assert all(r["variant"] == "connect3" for r in rows)

    def test_main_writes_csv(self, tmp_path, capsys):
        rc = main(["--variant", "connect3", "--games", "1", "--seeds", "1", "--out-dir", str(tmp_path)])
        assert rc == 0
        assert list(tmp_path.glob("league_results_*.csv"))
        assert "League table" in capsys.readouterr().out
