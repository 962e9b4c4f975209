from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional

from connect3.ai.heuristic import AIMove, request_ai_move
from connect3.config import AI_PLAYER, START_PLAYER
from connect3.core.board import Board
from connect3.core.cascade import resolve_move
from connect3.core.events import KingConversionEvent, MatchEvent
from connect3.core.rules import WinCondition, classic_outcome, connect3_outcome, is_draw
from connect3.game.actions import MoveRejection, validate_move
from connect3.game.pacing import Pacer
from connect3.game.results import MoveOutcome
from connect3.game.state import GameState
from connect3.types import GameMode, GameStatus, GameVariant, Piece, Player

logger = logging.getLogger(__name__)

MatchListener = Callable[[MatchEvent], None]
KingListener = Callable[[KingConversionEvent], None]


class GameEngine:
    """
    Owns the board and turn state for one table.

    ``apply_move`` is the only way the board changes. It returns False
    (and sets ``last_rejection``) instead of raising when a move is not
    allowed. Listeners are called synchronously while the move resolves;
    the engine stays busy until they return, so a listener cannot start
    another move.
    """

    def __init__(
        self,
        variant: GameVariant = GameVariant.CONNECT3,
        mode: Optional[GameMode] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.variant = GameVariant(variant)
        self.mode = mode or GameMode.pvp()
        self.ai_player = Player(AI_PLAYER)
        self.rng = rng or random.Random()

        self._match_listeners: List[MatchListener] = []
        self._king_listeners: List[KingListener] = []

        self.generation = 0
        self.pacer = Pacer(lambda: self.generation)
        self.last_ai_move: Optional[AIMove] = None
        self.reset()

    @classmethod
    def from_position(
        cls,
        board: Board,
        current: Player,
        variant: GameVariant = GameVariant.CLASSIC,
        mode: Optional[GameMode] = None,
        **kwargs,
    ) -> "GameEngine":
        """Start from an arbitrary (settled) position, e.g. a puzzle or a test."""
        engine = cls(variant, mode, **kwargs)
        engine._board = board.copy()
        engine._current = Player(current)
        return engine

    # ----- listeners -----
    def on_match_found(self, fn: MatchListener) -> None:
        self._match_listeners.append(fn)

    def on_king_conversion(self, fn: KingListener) -> None:
        self._king_listeners.append(fn)

    # ----- read-only accessors -----
    @property
    def board(self) -> Board:
        """A copy of the current board; mutating it does not touch the game."""
        return self._board.copy()

    @property
    def current(self) -> Player:
        return self._current

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def win(self) -> Optional[WinCondition]:
        return self._win

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def moves_made(self) -> int:
        return self._moves

    def snapshot(self) -> GameState:
        return GameState(
            board=self._board.copy(),
            current=self._current,
            status=self._status,
            win=self._win,
            variant=self.variant,
            moves=self._moves,
            last_status=self.last_status,
        )

    def king_counts(self) -> dict[Player, int]:
        return self._board.king_counts()

    def is_ai_turn(self) -> bool:
        return self.mode.is_ai and self._current is self.ai_player

    # ----- lifecycle -----
    def reset(self) -> None:
        self.generation += 1
        self._board = Board()
        self._current = Player(START_PLAYER)
        self._status = GameStatus.PLAYING
        self._win: Optional[WinCondition] = None
        self._busy = False
        self._moves = 0
        self.last_rejection: Optional[MoveRejection] = None
        self.last_outcome: Optional[MoveOutcome] = None
        self.last_status = f"{self._current.value.capitalize()} starts."
        logger.debug("new game (generation %d, %s, %s)", self.generation, self.variant.value, self.mode.label())

    def set_variant(self, variant: GameVariant) -> None:
        self.variant = GameVariant(variant)
        self.reset()

    def set_mode(self, mode: GameMode) -> None:
        self.mode = mode
        self.reset()

    # ----- moves -----
    def _reject(self, reason: MoveRejection, col: object) -> bool:
        self.last_rejection = reason
        logger.info("move %r rejected: %s", col, reason.value)
        return False

    def apply_move(self, col: int) -> bool:
        """Play ``col`` for the side to move (a human, in AI mode)."""
        if not self._busy and self._status is GameStatus.PLAYING and self.is_ai_turn():
            return self._reject(MoveRejection.NOT_YOUR_TURN, col)
        return self._play(col)

    def _play(self, col: int) -> bool:
        reason = validate_move(self._board, col, self._status, self._busy)
        if reason is not None:
            return self._reject(reason, col)

        self._busy = True
        try:
            outcome = self._resolve(col)
            self.last_rejection = None
            self.last_outcome = outcome
            self._notify(outcome)
        finally:
            self._busy = False
        return True

    def _notify(self, outcome: MoveOutcome) -> None:
        # the move is fully committed here; a failing listener is logged, not raised
        for event in outcome.matches:
            for fn in self._match_listeners:
                try:
                    fn(event)
                except Exception:
                    logger.exception("match listener %r failed", fn)
        for conversion in outcome.conversions:
            for fn in self._king_listeners:
                try:
                    fn(conversion)
                except Exception:
                    logger.exception("king listener %r failed", fn)

    def _resolve(self, col: int) -> MoveOutcome:
        player = self._current
        board = self._board.copy()
        row = board.drop(col, Piece(player))
        self._moves += 1

        if self.variant is GameVariant.CONNECT3:
            win = connect3_outcome(board, row, col, player)
            matches: list = []
            conversions: list = []
            rounds: list = []
        else:
            result = resolve_move(board, row, col, player)
            board = result.board
            matches, conversions, rounds = result.matches, result.conversions, result.rounds
            win = classic_outcome(board, player)

        self._board = board
        if win is not None:
            self._status = GameStatus.WON
            self._win = win
            logger.info("%s wins (%s) after %d moves", win.player.value, win.win_type.value, self._moves)
        elif is_draw(board, win):
            self._status = GameStatus.DRAW
            logger.info("draw after %d moves", self._moves)
        else:
            self._current = player.other()

        outcome = MoveOutcome(
            column=col,
            landed_at=(row, col),
            player=player,
            status=self._status,
            win=win,
            matches=list(matches),
            conversions=list(conversions),
            rounds=list(rounds),
        )
        self.last_status = outcome.describe() or f"{self._current.value.capitalize()}'s turn."
        return outcome

    # ----- AI turn -----
    async def play_ai_turn(self, delay: Optional[float] = None) -> Optional[AIMove]:
        """
        Think for the AI side and play its move.

        Returns None when it is not the AI's turn, or when the game was
        reset while thinking (the stale move is discarded).
        """
        if not self.is_ai_turn() or self._status is not GameStatus.PLAYING or self._busy:
            return None

        token = self.pacer.token()
        self._busy = True
        try:
            move = await request_ai_move(
                self._board,
                self.mode.difficulty,
                ai_player=self.ai_player,
                rng=self.rng,
                delay=delay,
            )
        finally:
            if self.pacer.is_current(token):
                self._busy = False

        if not self.pacer.is_current(token):
            logger.info("discarding AI move from a previous game")
            return None

        self.last_ai_move = move
        self._play(move.column)
        return move
