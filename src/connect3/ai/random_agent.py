from __future__ import annotations

import random
from dataclasses import dataclass

from connect3.game.state import GameState
from connect3.types import Move, MoveType


@dataclass
class RandomAgent:
    name: str = "Random AI"
    seed: int = 0

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)
        self.last_info = {}

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.valid_moves()
        if not moves:
            raise ValueError("No valid moves.")
        self.last_info = {"time_ms": 1, "move_type": MoveType.RANDOM.value}
        return self.rng.choice(moves)
