from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from connect3.types import Coord, Player


@dataclass(frozen=True, slots=True)
class MatchEvent:
    positions: Tuple[Coord, ...]
    player: Player
    is_king: bool
    cascade_depth: int  # 0 = the move's own match, 1+ = cascade rounds
    simultaneous: int = 1  # groups resolved in the same round

    @property
    def size(self) -> int:
        return len(self.positions)


@dataclass(frozen=True, slots=True)
class KingConversionEvent:
    """Animation hint only: which cells collapsed into a king for ``player``."""
    positions: Tuple[Coord, ...]
    player: Player
    king_at: Coord
