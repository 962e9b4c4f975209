# src/connect3/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NewType, Optional, Tuple

Move = NewType("Move", int)   # column index 0..4
Coord = Tuple[int, int]       # (row, col), row 0 is the top


class Player(str, Enum):
    RED = "red"
    YELLOW = "yellow"

    def other(self) -> "Player":
        return Player.YELLOW if self is Player.RED else Player.RED


@dataclass(frozen=True, slots=True)
class Piece:
    """A disc on the board. ``king`` marks a promoted piece (Classic only)."""
    player: Player
    king: bool = False

    def owner(self) -> Player:
        return self.player


# Empty | Owned(player) | King(player)
Cell = Optional[Piece]


def owner_of(cell: Cell) -> Optional[Player]:
    return cell.player if cell is not None else None


def is_king(cell: Cell) -> bool:
    return cell is not None and cell.king


class GameVariant(str, Enum):
    CONNECT3 = "connect3"
    CLASSIC = "classic"


class GameStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


class WinType(str, Enum):
    REGULAR = "regular"
    KING = "king"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class MoveType(str, Enum):
    WIN = "win"
    BLOCK = "block"
    STRATEGIC = "strategic"
    RANDOM = "random"


@dataclass(frozen=True, slots=True)
class GameMode:
    kind: str = "pvp"  # "pvp" | "ai"
    difficulty: Optional[Difficulty] = None

    @classmethod
    def pvp(cls) -> "GameMode":
        return cls("pvp", None)

    @classmethod
    def ai(cls, difficulty: Difficulty = Difficulty.MEDIUM) -> "GameMode":
        return cls("ai", Difficulty(difficulty))

    @property
    def is_ai(self) -> bool:
        return self.kind == "ai"

    def label(self) -> str:
        if not self.is_ai:
            return "Player vs Player"
        return f"vs AI ({self.difficulty.value})"
