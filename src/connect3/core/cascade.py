from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from connect3.config import MAX_CASCADE_ROUNDS
from connect3.core.board import Board
from connect3.core.events import KingConversionEvent, MatchEvent
from connect3.core.gravity import apply_gravity
from connect3.core.rules import MatchGroup, find_all_matches, find_match_from
from connect3.types import Coord, Piece, Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CascadeRound:
    depth: int
    board: Board  # board after this round's promotions (before the next gravity pass)
    matches: Tuple[MatchEvent, ...]


@dataclass(slots=True)
class CascadeResult:
    board: Board
    matches: List[MatchEvent] = field(default_factory=list)
    conversions: List[KingConversionEvent] = field(default_factory=list)
    rounds: List[CascadeRound] = field(default_factory=list)

    @property
    def max_depth(self) -> int:
        return max((m.cascade_depth for m in self.matches), default=0)

    @property
    def cascade_rounds(self) -> int:
        """Rounds beyond the move's own match."""
        return sum(1 for r in self.rounds if r.depth > 0)


def king_landing(board: Board, positions: Sequence[Coord]) -> Coord:
    """
    Where the king for a just-cleared group goes: the lowest empty cell
    among the group's columns, the deepest one winning; ties go to the
    column that comes first in the run.
    """
    best: Coord | None = None
    seen: set[int] = set()
    for _, c in positions:
        if c in seen:
            continue
        seen.add(c)
        r = board.lowest_empty_row(c)
        if r is None:
            continue
        if best is None or r > best[0]:
            best = (r, c)
    if best is None:
        raise ValueError("No landing cell for king.")
    return best


def promote(
    board: Board,
    player: Player,
    positions: Sequence[Coord],
    *,
    is_king: bool,
    depth: int,
    simultaneous: int = 1,
) -> Tuple[MatchEvent, KingConversionEvent]:
    """Clear a matched group on ``board`` (in place) and drop one king for it."""
    board.clear(positions)
    at = king_landing(board, positions)
    board.place(at, Piece(player, king=True))

    event = MatchEvent(tuple(positions), player, is_king, depth, simultaneous)
    conversion = KingConversionEvent(tuple(positions), player, at)
    return event, conversion


def _resolve_groups(board: Board, groups: List[MatchGroup], depth: int, result: CascadeResult) -> None:
    events: List[MatchEvent] = []
    for g in groups:
        event, conversion = promote(
            board, g.player, g.positions, is_king=g.is_king, depth=depth, simultaneous=len(groups)
        )
        events.append(event)
        result.conversions.append(conversion)
    result.matches.extend(events)
    result.rounds.append(CascadeRound(depth, board.copy(), tuple(events)))


def run_cascade(board: Board, start_depth: int = 1, result: CascadeResult | None = None) -> CascadeResult:
    """
    Settle ``board`` to a fixed point: gravity, full-board rescan, promote
    every group found, repeat until a scan comes back empty.

    Runs made only of kings are left on the board for the win check.
    """
    result = result if result is not None else CascadeResult(board)
    depth = start_depth

    for _ in range(MAX_CASCADE_ROUNDS):
        board, moved = apply_gravity(board)
        groups = find_all_matches(board, skip_king_runs=True)
        if not groups:
            result.board = board
            return result

        logger.debug("cascade depth %d: %d group(s), gravity moved=%s", depth, len(groups), moved)
        _resolve_groups(board, groups, depth, result)
        depth += 1

    raise RuntimeError("Cascade did not settle.")  # unreachable: every round removes pieces


def resolve_move(board: Board, row: int, col: int, player: Player) -> CascadeResult:
    """
    Classic-variant resolution of a piece that just landed at (row, col).

    ``board`` is consumed: callers pass a private copy.
    """
    result = CascadeResult(board)
    run = find_match_from(board, row, col, player)
    if run is None:
        board, _ = apply_gravity(board)
        result.board = board
        return result

    is_king = any(board.grid[r][c].king for r, c in run)
    event, conversion = promote(board, player, run, is_king=is_king, depth=0)
    result.matches.append(event)
    result.conversions.append(conversion)
    result.rounds.append(CascadeRound(0, board.copy(), (event,)))

    return run_cascade(board, start_depth=1, result=result)
