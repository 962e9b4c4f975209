import pytest

from connect3.core.board import Board
from connect3.game.controller import run_game
from connect3.game.engine import GameEngine
from connect3.types import Difficulty, GameMode, GameStatus, GameVariant, Player
from connect3.ui.prompts import parse_choice, parse_move
from connect3.ui.render import king_line, render


class TestPrompts:

    def test_parse_move(self):
        assert parse_move(" 3 ", 5) == 2
        assert parse_move("q", 5) is None
        with pytest.raises(ValueError, match="between 1 and 5"):
            parse_move("6", 5)
        with pytest.raises(ValueError):
            parse_move("left", 5)

    def test_parse_choice(self):
        opts = {"1": "connect3", "2": "classic"}
        assert parse_choice("", opts, "connect3") == "connect3"
        assert parse_choice("2", opts, "connect3") == "classic"
        with pytest.raises(ValueError):
            parse_choice("9", opts, "connect3")


class TestRender:

    def test_kings_shown(self, capsys):
        b = Board.from_rows([".....", ".....", ".....", ".....", "R....", "yrY.."])
        assert king_line(b) == "Kings  red 1  yellow 1"
        render(b, "Yellow's turn.", show_kings=True)
        out = capsys.readouterr().out
        assert "Kings  red 1  yellow 1" in out
        assert out.count("♛") == 2


def feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))


class TestRunGame:

    def test_pvp_game_to_a_win(self, monkeypatch, capsys):
        feed(monkeypatch, ["x", "9", "3", "4", "3", "4", "3"])
        engine = GameEngine(GameVariant.CONNECT3)
        run_game(engine, show_thinking=False)
        assert engine.status is GameStatus.WON
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "Red wins with three in a row!" in out

    def test_quit(self, monkeypatch):
        feed(monkeypatch, ["1", "q"])
        engine = GameEngine(GameVariant.CLASSIC)
        run_game(engine, show_thinking=False)
        assert engine.moves_made == 1
        assert engine.status is GameStatus.PLAYING

    def test_against_ai(self, monkeypatch):
        feed(monkeypatch, ["1", "q"])
        engine = GameEngine(GameVariant.CONNECT3, GameMode.ai(Difficulty.HARD))
        run_game(engine, show_thinking=False)
        assert engine.board.owner_at(5, 2) is Player.RED
        assert engine.board.owner_at(5, 0) is Player.YELLOW


class TestSpinner:

    def test_returns_the_awaited_result(self, capsys):
        import asyncio

        from connect3.ui.effects import thinking_spinner

        async def work():
            await asyncio.sleep(0.02)
            return 7

        assert asyncio.run(thinking_spinner(work(), "Thinking")) == 7
        assert "Thinking..." in capsys.readouterr().out


class TestMenu:

    def test_league_runs_the_chosen_variant(self, monkeypatch):
        import connect3.scripts.league as league
        from connect3.ui.menu import run_menu

        calls = []
        feed(monkeypatch, ["1", "3"])
        monkeypatch.setattr("time.sleep", lambda _s: None)
        monkeypatch.setattr(league, "main", lambda argv: calls.append(argv))
        run_menu()
        assert calls == [["--variant", "connect3"]]
