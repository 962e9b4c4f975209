from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from connect3.core.cascade import CascadeRound
from connect3.core.events import KingConversionEvent, MatchEvent
from connect3.core.rules import WinCondition
from connect3.types import Coord, GameStatus, Player, WinType


@dataclass(frozen=True)
class MoveOutcome:
    """Everything one accepted move produced, for renderers and stats."""
    column: int
    landed_at: Coord
    player: Player
    status: GameStatus
    win: Optional[WinCondition] = None
    matches: List[MatchEvent] = field(default_factory=list)
    conversions: List[KingConversionEvent] = field(default_factory=list)
    rounds: List[CascadeRound] = field(default_factory=list)

    @property
    def max_cascade_depth(self) -> int:
        return max((m.cascade_depth for m in self.matches), default=0)

    def describe(self) -> str:
        if self.status is GameStatus.DRAW:
            return "Draw game."
        if self.win is not None:
            if self.win.win_type is WinType.REGULAR:
                how = "three in a row"
            elif self.win.positions:
                how = "three kings in a row"
            else:
                how = "more kings"
            return f"{self.win.player.value.capitalize()} wins with {how}!"
        if self.matches:
            kings = len(self.conversions)
            return f"{kings} king(s) crowned, cascade depth {self.max_cascade_depth}."
        return ""
