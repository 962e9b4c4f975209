from __future__ import annotations

import random
import time
from dataclasses import dataclass

from connect3.ai.heuristic import choose_ai_move
from connect3.game.state import GameState
from connect3.types import Difficulty, Move


@dataclass
class DifficultyAgent:
    """
    The in-game opponent as an Agent:
      1) take an immediate win
      2) block the opponent's immediate win
      3) otherwise positional score with one ply of lookahead
    then pick from the ranked list according to ``difficulty``.

    Plays whichever side is to move, so it can sit on either seat in a league.
    """
    name: str = "AI"
    difficulty: Difficulty = Difficulty.HARD
    seed: int = 0

    def __post_init__(self) -> None:
        self.difficulty = Difficulty(self.difficulty)
        self.rng = random.Random(self.seed)
        self.last_info = {}

    def choose_move(self, state: GameState) -> Move:
        t0 = time.perf_counter()
        move = choose_ai_move(state.board, self.difficulty, ai_player=state.current, rng=self.rng)
        self.last_info = {
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
            "move_col": move.column + 1,
            "move_type": move.move_type.value,
            "confidence": move.confidence,
            "eval": move.predicted_advantage,
        }
        return Move(move.column)
