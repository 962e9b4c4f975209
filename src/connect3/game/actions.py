from __future__ import annotations
from enum import Enum
from typing import Optional

from connect3.core.board import Board
from connect3.types import GameStatus


class MoveRejection(str, Enum):
    INVALID_COLUMN = "Column out of range."
    COLUMN_FULL = "Column is full."
    MOVE_AFTER_TERMINAL = "Game is over."
    REENTRANT_MOVE = "A move is still resolving."
    NOT_YOUR_TURN = "It is the AI's turn."


def validate_move(board: Board, col: int, status: GameStatus, busy: bool) -> Optional[MoveRejection]:
    """Return why ``col`` cannot be played right now, or None if it can."""
    if busy:
        return MoveRejection.REENTRANT_MOVE
    if status is not GameStatus.PLAYING:
        return MoveRejection.MOVE_AFTER_TERMINAL
    if isinstance(col, bool) or not isinstance(col, int) or col < 0 or col >= board.cols:
        return MoveRejection.INVALID_COLUMN
    if board.is_column_full(col):
        return MoveRejection.COLUMN_FULL
    return None
