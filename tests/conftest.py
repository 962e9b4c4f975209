"""
Pytest fixtures for connect3 tests.
"""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from connect3.core.board import Board
from connect3.types import Player


# Fully packed 6x5 board with no three-in-a-row anywhere.
RUN_FREE_FULL = [
    "yryry",
    "ryryr",
    "ryryr",
    "yryry",
    "yryry",
    "ryryr",
]

# Column order that fills RUN_FREE_FULL with strictly alternating turns,
# red first.
RUN_FREE_FILL_ORDER = [
    0, 1, 1, 0, 1, 0, 0, 1, 2, 1, 1, 2, 0, 2, 2, 0, 2, 2,
    4, 3, 3, 4, 3, 4, 4, 3, 4, 3, 3, 4,
]

# Red to move: dropping in column 2 matches the red row at row 4; after
# gravity a yellow diagonal (3,0)-(4,1)-(5,2) forms.
CASCADE_SETUP = [
    ".....",
    ".....",
    ".....",
    "yy...",
    "rr...",
    "yry..",
]


class FixedRng:
    """random.Random stand-in returning a fixed roll."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value

    def seed(self, *_args) -> None:
        pass


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def cascade_board() -> Board:
    return Board.from_rows(CASCADE_SETUP)


@pytest.fixture
def red() -> Player:
    return Player.RED


@pytest.fixture
def yellow() -> Player:
    return Player.YELLOW
