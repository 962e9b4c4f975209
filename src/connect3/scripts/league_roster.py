from __future__ import annotations

import inspect
from functools import partial
from typing import List

from connect3.ai.difficulty_agent import DifficultyAgent
from connect3.ai.random_agent import RandomAgent
from connect3.types import Difficulty

from .league_stats import Team


def _make_agent(cls, kwargs: dict) -> object:
    sig = inspect.signature(cls)
    allowed = set(sig.parameters.keys())
    filtered = {k: v for k, v in kwargs.items() if k in allowed}
    return cls(**filtered)


def _team(cls, *, name: str, **kwargs) -> Team:
    return Team(name, partial(_make_agent, cls, {"name": name, **kwargs}))


def build_roster(seeds: int = 2) -> List[Team]:
    teams: List[Team] = [_team(RandomAgent, name="Random")]

    for difficulty in Difficulty:
        # hard is deterministic, one entry is enough
        for seed in range(seeds if difficulty is not Difficulty.HARD else 1):
            teams.append(
                _team(
                    DifficultyAgent,
                    name=f"{difficulty.value.capitalize()} seed{seed}",
                    difficulty=difficulty,
                    seed=seed,
                )
            )

    return teams
