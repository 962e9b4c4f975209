from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from connect3.core.board import Board
from connect3.core.rules import WinCondition
from connect3.types import GameStatus, GameVariant, Player


@dataclass(frozen=True, slots=True)
class GameState:
    """Read-only snapshot handed to renderers and agents."""
    board: Board
    current: Player
    status: GameStatus = GameStatus.PLAYING
    win: Optional[WinCondition] = None
    variant: GameVariant = GameVariant.CONNECT3
    moves: int = 0
    last_status: str = "Red starts."

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING
