from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from connect3.config import AI_PLAYER, AI_THINK_DELAY_SEC
from connect3.core.board import Board
from connect3.core.rules import find_match_from
from connect3.types import Difficulty, MoveType, Piece, Player

logger = logging.getLogger(__name__)

WIN_SCORE = 1000
BLOCK_SCORE = 500
GIFT_PENALTY = 200  # our move leaves the opponent a winning reply

# forward/backward scan axes for the positional score
_AXES = ((0, 1), (1, 0), (1, 1), (1, -1))

EASY_WEIGHTS = (0.4, 0.35, 0.25)
EASY_FALLBACK_WEIGHT = 0.1
MEDIUM_BEST_PROB = 0.7


@dataclass(frozen=True, slots=True)
class MoveEvaluation:
    column: int
    score: int
    move_type: MoveType


@dataclass(frozen=True, slots=True)
class AIMove:
    column: int
    confidence: float
    move_type: MoveType
    predicted_advantage: int


def legal_columns(board: Board) -> List[int]:
    return [int(c) for c in board.valid_moves()]


def wins_with(board: Board, col: int, player: Player) -> bool:
    """Would dropping ``player`` into ``col`` complete a run?"""
    row = board.lowest_empty_row(col)
    if row is None:
        return False
    b2 = board.copy()
    b2.grid[row][col] = Piece(player)
    return find_match_from(b2, row, col, player) is not None


def positional_score(board: Board, row: int, col: int, player: Player) -> int:
    score = 0

    for dr, dc in _AXES:
        consecutive = 1
        empty = 0
        blocked = False

        for i in range(1, 3):
            r, c = row + i * dr, col + i * dc
            if not board.in_bounds(r, c):
                blocked = True
                break
            owner = board.owner_at(r, c)
            if owner is player:
                consecutive += 1
            elif owner is None:
                empty += 1
                break
            else:
                blocked = True
                break

        if not blocked:
            for i in range(1, 3):
                r, c = row - i * dr, col - i * dc
                if not board.in_bounds(r, c):
                    break
                owner = board.owner_at(r, c)
                if owner is player:
                    consecutive += 1
                elif owner is None:
                    empty += 1
                    break
                else:
                    break

        if consecutive >= 2 and empty > 0:
            score += consecutive * 10
        elif consecutive >= 1 and empty >= 2:
            score += consecutive * 3

    # center columns
    center = board.cols // 2
    if col == center:
        score += 5
    elif abs(col - center) == 1:
        score += 3

    return score


def evaluate_column(board: Board, col: int, ai_player: Player, opponent: Player) -> Tuple[int, MoveType]:
    if wins_with(board, col, ai_player):
        return WIN_SCORE, MoveType.WIN
    if wins_with(board, col, opponent):
        return BLOCK_SCORE, MoveType.BLOCK

    row = board.lowest_empty_row(col)
    if row is None:
        return 0, MoveType.STRATEGIC

    score = positional_score(board, row, col, ai_player)

    # one ply of lookahead: does this hand the opponent a win?
    b2 = board.copy()
    b2.grid[row][col] = Piece(ai_player)
    if any(wins_with(b2, c, opponent) for c in range(b2.cols)):
        score -= GIFT_PENALTY

    return score, MoveType.STRATEGIC


def evaluate_all_moves(board: Board, ai_player: Player, opponent: Player) -> List[MoveEvaluation]:
    """Every legal column, best first; equal scores keep column order."""
    evals = []
    for col in legal_columns(board):
        score, move_type = evaluate_column(board, col, ai_player, opponent)
        evals.append(MoveEvaluation(col, score, move_type))
    return sorted(evals, key=lambda e: e.score, reverse=True)


def select_move(evals: List[MoveEvaluation], difficulty: Difficulty, rng: random.Random) -> MoveEvaluation:
    if not evals:
        raise ValueError("No legal moves.")

    difficulty = Difficulty(difficulty)

    if difficulty is Difficulty.EASY:
        top = evals[:3]
        roll = rng.random()
        acc = 0.0
        for i, ev in enumerate(top):
            acc += EASY_WEIGHTS[i] if i < len(EASY_WEIGHTS) else EASY_FALLBACK_WEIGHT
            if roll <= acc:
                return ev
        return top[0]

    if difficulty is Difficulty.MEDIUM:
        if rng.random() < MEDIUM_BEST_PROB or len(evals) == 1:
            return evals[0]
        return evals[1]

    return evals[0]


def to_ai_move(ev: MoveEvaluation) -> AIMove:
    return AIMove(
        column=ev.column,
        confidence=min(100.0, ev.score / 10 + 50),
        move_type=ev.move_type,
        predicted_advantage=ev.score,
    )


def choose_ai_move(
    board: Board,
    difficulty: Difficulty,
    *,
    ai_player: Player = Player(AI_PLAYER),
    rng: Optional[random.Random] = None,
) -> AIMove:
    """
    Single-ply pick for ``ai_player``. Kings count as their owner's pieces.
    Raises ValueError on a full board.
    """
    rng = rng or random.Random()
    evals = evaluate_all_moves(board, ai_player, ai_player.other())
    chosen = select_move(evals, difficulty, rng)
    move = to_ai_move(chosen)
    logger.debug("AI (%s) picks column %d: %s score=%d", Difficulty(difficulty).value, move.column,
                 move.move_type.value, move.predicted_advantage)
    return move


async def request_ai_move(
    board: Board,
    difficulty: Difficulty,
    *,
    ai_player: Player = Player(AI_PLAYER),
    rng: Optional[random.Random] = None,
    delay: Optional[float] = None,
) -> AIMove:
    """
    ``choose_ai_move`` after the difficulty's thinking delay. The board is
    copied before waiting, so later changes to it do not leak in.
    """
    snapshot = board.copy()
    wait = AI_THINK_DELAY_SEC[Difficulty(difficulty).value] if delay is None else delay
    if wait > 0:
        await asyncio.sleep(wait)
    return choose_ai_move(snapshot, difficulty, ai_player=ai_player, rng=rng)
