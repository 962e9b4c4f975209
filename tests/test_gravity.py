from connect3.core.board import Board
from connect3.core.gravity import apply_gravity, settle_column
from connect3.types import Piece, Player

R = Piece(Player.RED)
Y = Piece(Player.YELLOW)
RK = Piece(Player.RED, king=True)


class TestGravity:

    def test_settle_column_keeps_order(self):
        assert settle_column([R, None, Y, None, RK, None]) == [None, None, None, R, Y, RK]

    def test_settled_board_unchanged(self, cascade_board):
        out, changed = apply_gravity(cascade_board)
        assert not changed
        assert out.to_rows() == cascade_board.to_rows()

    def test_floating_pieces_fall(self):
        b = Board.from_rows([".....", "y....", ".....", "R....", ".....", "r...."])
        out, changed = apply_gravity(b)
        assert changed
        assert out.to_rows() == [".....", ".....", ".....", "y....", "R....", "r...."]
        assert out.is_settled()

    def test_input_not_mutated(self):
        b = Board.from_rows([".....", ".....", ".....", "..y..", ".....", "....."])
        apply_gravity(b)
        assert b.to_rows()[3] == "..y.."
