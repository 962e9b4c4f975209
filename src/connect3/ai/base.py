from __future__ import annotations
from typing import Any, Callable, Dict, Protocol

from connect3.game.state import GameState
from connect3.types import Move


class Agent(Protocol):
    """
    Anything that can pick a column for the side to move.

    ``last_info`` is filled after each ``choose_move`` call; the league
    reads ``time_ms`` from it, the rest is free-form.
    """
    name: str
    last_info: Dict[str, Any]

    def choose_move(self, state: GameState) -> Move:
        ...


# zero-argument constructor; must pickle for the process pool
AgentFactory = Callable[[], Agent]
