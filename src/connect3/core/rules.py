from __future__ import annotations
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Tuple

from connect3.config import MATCH_LEN
from connect3.core.board import Board
from connect3.types import Coord, Player, WinType

# horizontal, vertical (extending upward first), diagonal \, diagonal /
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (-1, 0), (1, 1), (1, -1))


@dataclass(frozen=True, slots=True)
class MatchGroup:
    player: Player
    positions: Tuple[Coord, ...]
    is_king: bool  # at least one matched cell was already a king
    all_kings: bool

    @property
    def size(self) -> int:
        return len(self.positions)


@dataclass(frozen=True, slots=True)
class WinCondition:
    player: Player
    positions: Tuple[Coord, ...]  # empty for the full-board king tiebreak
    win_type: WinType


def _counts(board: Board, r: int, c: int, player: Player, kings_only: bool, exclude: AbstractSet[Coord]) -> bool:
    if not board.in_bounds(r, c) or (r, c) in exclude:
        return False
    cell = board.grid[r][c]
    if cell is None or cell.player is not player:
        return False
    return cell.king or not kings_only


def find_match_from(
    board: Board,
    row: int,
    col: int,
    player: Player,
    *,
    kings_only: bool = False,
    skip_king_runs: bool = False,
    exclude: AbstractSet[Coord] = frozenset(),
) -> Optional[List[Coord]]:
    """
    Look for a run of ``MATCH_LEN`` same-owner pieces through (row, col).

    Each axis is extended forward (appending) then backward (prepending),
    at most ``MATCH_LEN - 1`` cells each way. Longer runs are cut to the
    first ``MATCH_LEN`` cells of that order; the rest stay on the board.

    ``kings_only`` counts king cells only. ``skip_king_runs`` ignores an
    axis whose run is made only of kings (those are left for the win check).
    """
    for dr, dc in DIRECTIONS:
        positions: List[Coord] = [(row, col)]

        for i in range(1, MATCH_LEN):
            r, c = row + i * dr, col + i * dc
            if not _counts(board, r, c, player, kings_only, exclude):
                break
            positions.append((r, c))

        for i in range(1, MATCH_LEN):
            r, c = row - i * dr, col - i * dc
            if not _counts(board, r, c, player, kings_only, exclude):
                break
            positions.insert(0, (r, c))

        if len(positions) < MATCH_LEN:
            continue
        run = positions[:MATCH_LEN]
        if skip_king_runs and all(board.grid[r][c].king for r, c in run):
            continue
        return run

    return None


def _group(board: Board, player: Player, positions: List[Coord]) -> MatchGroup:
    kings = [board.grid[r][c].king for r, c in positions]
    return MatchGroup(player, tuple(positions), any(kings), all(kings))


def find_all_matches(board: Board, *, skip_king_runs: bool = False) -> List[MatchGroup]:
    """
    Full-board scan, top-left to bottom-right. A cell claimed by an
    earlier group in the same scan is never reused.

    With ``skip_king_runs`` a run made only of kings is not reported.
    """
    claimed: set[Coord] = set()
    groups: List[MatchGroup] = []

    for r in range(board.rows):
        for c in range(board.cols):
            if (r, c) in claimed:
                continue
            cell = board.grid[r][c]
            if cell is None:
                continue
            positions = find_match_from(
                board, r, c, cell.player, skip_king_runs=skip_king_runs, exclude=claimed
            )
            if positions is None:
                continue
            claimed.update(positions)
            groups.append(_group(board, cell.player, positions))

    return groups


def find_king_run(board: Board, player: Player) -> Optional[List[Coord]]:
    for r in range(board.rows):
        for c in range(board.cols):
            cell = board.grid[r][c]
            if cell is None or not cell.king or cell.player is not player:
                continue
            run = find_match_from(board, r, c, player, kings_only=True)
            if run is not None:
                return run
    return None


# ----- terminal checks -----
def connect3_outcome(board: Board, row: int, col: int, player: Player) -> Optional[WinCondition]:
    """Plain variant: a run through the piece just placed wins outright."""
    run = find_match_from(board, row, col, player)
    if run is None:
        return None
    return WinCondition(player, tuple(run), WinType.REGULAR)


def classic_outcome(board: Board, mover: Player) -> Optional[WinCondition]:
    """
    Classic variant, evaluated once cascades have settled.

    Three kings in a row win (the mover's run is checked first). On a
    full board the player with more kings wins; equal counts fall
    through to ``is_draw``.
    """
    for player in (mover, mover.other()):
        run = find_king_run(board, player)
        if run is not None:
            return WinCondition(player, tuple(run), WinType.KING)

    if board.is_full():
        mine = board.count_kings(mover)
        theirs = board.count_kings(mover.other())
        if mine > theirs:
            return WinCondition(mover, (), WinType.KING)
        if theirs > mine:
            return WinCondition(mover.other(), (), WinType.KING)

    return None


def is_draw(board: Board, win: Optional[WinCondition]) -> bool:
    return win is None and board.is_full()
