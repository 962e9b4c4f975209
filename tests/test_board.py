"""
Tests for the board model: queries, parsing, copy-on-write helpers.
"""

import pytest

from connect3.core.board import Board
from connect3.types import Piece, Player, owner_of, is_king


class TestQueries:

    def test_empty_board(self, empty_board):
        assert empty_board.rows == 6
        assert empty_board.cols == 5
        assert [int(c) for c in empty_board.valid_moves()] == [0, 1, 2, 3, 4]
        assert all(empty_board.lowest_empty_row(c) == 5 for c in range(5))
        assert not empty_board.is_full()
        assert empty_board.count_pieces() == 0

    def test_lowest_empty_row_stacks_up(self):
        b = Board.from_rows([".....", ".....", ".....", "..y..", "..r..", "..y.."])
        assert b.lowest_empty_row(2) == 2
        assert b.lowest_empty_row(0) == 5

    def test_full_column(self):
        b = Board.from_rows(["r....", "y....", "r....", "y....", "r....", "y...."])
        assert b.is_column_full(0)
        assert b.lowest_empty_row(0) is None
        assert 0 not in [int(c) for c in b.valid_moves()]
        assert not b.is_full()

    def test_board_full_means_top_row_full(self):
        b = Board.from_rows(["ryryr"] + ["yryry", "ryryr"] * 2 + ["yryry"])
        assert b.is_full()
        assert b.valid_moves() == []

    def test_count_kings(self):
        b = Board.from_rows([".....", ".....", ".....", ".....", "R..Y.", "rRyYy"])
        assert b.count_kings(Player.RED) == 2
        assert b.count_kings(Player.YELLOW) == 2
        assert b.king_counts() == {Player.RED: 2, Player.YELLOW: 2}

    def test_owner_of_collapses_kings(self):
        assert owner_of(None) is None
        assert owner_of(Piece(Player.RED)) is Player.RED
        assert owner_of(Piece(Player.RED, king=True)) is Player.RED
        assert Piece(Player.YELLOW, king=True).owner() is Player.YELLOW
        assert is_king(Piece(Player.YELLOW, king=True))
        assert not is_king(Piece(Player.YELLOW))
        assert not is_king(None)

    def test_is_settled(self):
        assert Board.from_rows([".....", ".....", ".....", ".....", "r....", "y...."]).is_settled()
        assert not Board.from_rows([".....", ".....", ".....", "r....", ".....", "y...."]).is_settled()


class TestParsing:

    def test_round_trip(self):
        rows = [".....", ".....", "..Y..", "..r..", "R.y..", "ryyrY"]
        assert Board.from_rows(rows).to_rows() == rows

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValueError):
            Board.from_rows(["....."] * 5)

    def test_unknown_character_rejected(self):
        with pytest.raises(ValueError, match="Unknown cell"):
            Board.from_rows(["....x"] + ["....."] * 5)


class TestMutation:

    def test_drop_lands_on_stack(self, empty_board):
        assert empty_board.drop(3, Piece(Player.RED)) == 5
        assert empty_board.drop(3, Piece(Player.YELLOW)) == 4
        assert empty_board.grid[4][3] == Piece(Player.YELLOW)

    def test_drop_out_of_range(self, empty_board):
        with pytest.raises(ValueError, match="out of range"):
            empty_board.drop(5, Piece(Player.RED))
        with pytest.raises(ValueError, match="out of range"):
            empty_board.drop(-1, Piece(Player.RED))

    def test_drop_full_column(self):
        b = Board.from_rows(["r....", "y....", "r....", "y....", "r....", "y...."])
        with pytest.raises(ValueError, match="full"):
            b.drop(0, Piece(Player.RED))

    def test_copy_is_independent(self, empty_board):
        b2 = empty_board.copy()
        b2.drop(0, Piece(Player.RED))
        assert empty_board.count_pieces() == 0
        assert b2.count_pieces() == 1
