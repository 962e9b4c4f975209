from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from connect3.ai.base import AgentFactory

DRAW = "D"


@dataclass(frozen=True)
class Team:
    name: str
    make: AgentFactory  # functools.partial, not a lambda


def wilson_lcb(p: float, n: int, z: float) -> float:
    """Lower bound of the Wilson score interval for a rate ``p`` over ``n`` games."""
    if n <= 0:
        return 0.0
    p = max(0.0, min(1.0, p))
    z2 = z * z
    denom = 1.0 + z2 / n
    center = p + z2 / (2.0 * n)
    spread = z * math.sqrt(max(0.0, (p * (1.0 - p) + z2 / (4.0 * n)) / n))
    return max(0.0, (center - spread) / denom)


@dataclass
class Agg:
    """Running totals for one team across all of its league games."""
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    moves: int = 0
    time_ms: int = 0
    matches: int = 0
    cascades: int = 0
    kings: int = 0
    score: int = 0

    @property
    def ppg(self) -> float:
        return self.points / self.games if self.games else 0.0

    @property
    def ms_per_move(self) -> float:
        return self.time_ms / self.moves if self.moves else 0.0

    @property
    def score_per_game(self) -> float:
        return self.score / self.games if self.games else 0.0

    def strength(self, z: float) -> float:
        return wilson_lcb(self.ppg, self.games, z)

    def record(self, won: bool | None) -> None:
        """None is a draw."""
        self.games += 1
        if won is None:
            self.draws += 1
            self.points += 0.5
        elif won:
            self.wins += 1
            self.points += 1.0
        else:
            self.losses += 1

    def absorb(self, side: Dict[str, int]) -> None:
        self.moves += side.get("moves", 0)
        self.time_ms += side.get("time_ms", 0)
        self.matches += side.get("matches", 0)
        self.cascades += side.get("cascades", 0)
        self.kings += side.get("kings", 0)
        self.score += side.get("score", 0)


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_red: bool) -> None:
    """Book one game between A and B; ``outcome`` is "red", "yellow" or DRAW."""
    if outcome == DRAW:
        agg_a.record(None)
        agg_b.record(None)
        return
    a_won = (outcome == "red") == a_is_red
    agg_a.record(a_won)
    agg_b.record(not a_won)
