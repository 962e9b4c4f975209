from __future__ import annotations
from typing import List, Tuple

from connect3.core.board import Board
from connect3.types import Cell


def settle_column(column: List[Cell]) -> List[Cell]:
    """
    Stack the pieces of one column (listed top to bottom) on the floor,
    keeping their relative order.
    """
    pieces = [cell for cell in column if cell is not None]
    return [None] * (len(column) - len(pieces)) + pieces


def apply_gravity(board: Board) -> Tuple[Board, bool]:
    """Return a settled copy of ``board`` and whether any piece moved."""
    out = board.copy()
    changed = False

    for c in range(board.cols):
        column = [board.grid[r][c] for r in range(board.rows)]
        settled = settle_column(column)
        if settled != column:
            changed = True
            for r in range(board.rows):
                out.grid[r][c] = settled[r]

    return out, changed
