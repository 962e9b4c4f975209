"""
Tests for match promotion and cascade resolution (Classic variant).
"""

import pytest

from connect3.core.board import Board
from connect3.core.cascade import king_landing, promote, resolve_move, run_cascade
from connect3.types import Piece, Player

EMPTY = "....."


def rows(*bottom):
    return Board.from_rows([EMPTY] * (6 - len(bottom)) + list(bottom))


class TestKingLanding:

    def test_deepest_column_wins(self):
        # row 4 was just cleared; column 1 has a hole down to the floor
        b = rows(".....", "r.r..")
        assert king_landing(b, [(4, 0), (4, 1), (4, 2)]) == (5, 1)

    def test_tie_goes_to_first_column_in_run(self):
        b = rows(".....", "rrr..")
        assert king_landing(b, [(4, 2), (4, 1), (4, 0)]) == (4, 2)

    def test_vertical_group_lands_at_bottom(self):
        b = rows()
        assert king_landing(b, [(5, 3), (4, 3), (3, 3)]) == (5, 3)

    def test_no_room(self):
        b = Board.from_rows(["r....", "y....", "r....", "y....", "r....", "y...."])
        with pytest.raises(ValueError):
            king_landing(b, [(0, 0)])


class TestPromote:

    def test_three_become_one_king(self):
        b = rows("rrr..")
        event, conversion = promote(b, Player.RED, [(5, 0), (5, 1), (5, 2)], is_king=False, depth=0)
        assert b.to_rows()[5] == "R...."
        assert event.size == 3
        assert event.cascade_depth == 0
        assert conversion.king_at == (5, 0)
        assert b.count_pieces() == 1


class TestResolveMove:

    def test_no_match_only_settles(self):
        b = rows("r....")
        row = b.drop(1, Piece(Player.YELLOW))
        result = resolve_move(b, row, 1, Player.YELLOW)
        assert result.matches == []
        assert result.rounds == []
        assert result.board.to_rows()[5] == "ry..."

    def test_cascade_chain(self, cascade_board):
        b = cascade_board.copy()
        row = b.drop(2, Piece(Player.RED))
        assert row == 4

        result = resolve_move(b, row, 2, Player.RED)

        assert [m.cascade_depth for m in result.matches] == [0, 1]
        first, second = result.matches
        assert first.player is Player.RED
        assert first.positions == ((4, 0), (4, 1), (4, 2))
        assert second.player is Player.YELLOW
        assert second.positions == ((3, 0), (4, 1), (5, 2))
        assert [c.king_at for c in result.conversions] == [(4, 0), (5, 2)]

        assert result.board.to_rows() == [EMPTY] * 4 + ["R....", "yrY.."]
        assert result.board.king_counts() == {Player.RED: 1, Player.YELLOW: 1}
        assert result.board.is_settled()
        assert result.max_depth == 1
        assert result.cascade_rounds == 1

    def test_long_run_leaves_remainder(self):
        b = rows("rr.r.")
        row = b.drop(2, Piece(Player.RED))
        result = resolve_move(b, row, 2, Player.RED)
        assert len(result.matches) == 1
        assert result.matches[0].positions == ((5, 0), (5, 1), (5, 2))
        assert result.board.to_rows()[5] == "R..r."

    def test_king_in_match_is_flagged(self):
        b = rows("Rr...")
        row = b.drop(2, Piece(Player.RED))
        result = resolve_move(b, row, 2, Player.RED)
        assert result.matches[0].is_king
        assert result.board.to_rows()[5] == "R...."


class TestRunCascade:

    def test_simultaneous_groups_share_a_round(self):
        b = rows("....y", "....y", "rrr.y")
        result = run_cascade(b)
        assert len(result.rounds) == 1
        assert [m.player for m in result.matches] == [Player.YELLOW, Player.RED]
        assert all(m.simultaneous == 2 for m in result.matches)
        assert all(m.cascade_depth == 1 for m in result.matches)
        assert result.board.to_rows()[5] == "R...Y"
        assert result.board.count_pieces() == 2

    def test_king_runs_left_alone(self):
        b = rows("RRR..")
        result = run_cascade(b)
        assert result.matches == []
        assert result.board.to_rows()[5] == "RRR.."

    def test_terminates_on_random_boards(self):
        import random

        rng = random.Random(7)
        for _ in range(50):
            b = Board()
            for _ in range(rng.randrange(10, 25)):
                moves = b.valid_moves()
                if not moves:
                    break
                b.drop(rng.choice(moves), Piece(rng.choice(list(Player))))
            before = b.count_pieces()
            result = run_cascade(b)
            assert result.board.is_settled()
            assert result.board.count_pieces() <= before
            # every round removes at least two pieces net
            assert before - result.board.count_pieces() == 2 * len(result.matches)
