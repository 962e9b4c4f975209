from __future__ import annotations

import asyncio

from connect3.config import CASCADE_ROUND_DELAY_SEC
from connect3.core.scoring import ScoreKeeper
from connect3.game.engine import GameEngine
from connect3.game.results import MoveOutcome
from connect3.types import GameStatus, GameVariant, Player
from connect3.ui.effects import thinking_spinner
from connect3.ui.prompts import parse_move
from connect3.ui.render import render


def _seat_name(engine: GameEngine, player: Player) -> str:
    if engine.mode.is_ai:
        return "AI" if player is engine.ai_player else "You"
    return player.value.capitalize()


def _header(engine: GameEngine, scores: ScoreKeeper) -> str:
    """
    Persistent first status line: mode, whose turn, running score.
    Passed through the status string so render() stays generic.
    """
    parts = [
        engine.variant.value.capitalize(),
        engine.mode.label(),
        f"Turn: {_seat_name(engine, engine.current)}",
    ]
    if engine.variant is GameVariant.CLASSIC:
        parts.append(f"Score: {scores.score}")
    return " | ".join(parts)


def _show(engine: GameEngine, scores: ScoreKeeper, status: str, highlight=None, board=None) -> None:
    header = _header(engine, scores)
    render(
        board if board is not None else engine.board,
        f"{header}\n{status}" if status else header,
        highlight=highlight,
        title="CONNECT 3" if engine.variant is GameVariant.CONNECT3 else "CONNECT 3 · CLASSIC",
        show_kings=engine.variant is GameVariant.CLASSIC,
    )


async def _replay_cascade(engine: GameEngine, scores: ScoreKeeper, outcome: MoveOutcome) -> None:
    token = engine.pacer.token()
    for rnd in outcome.rounds:
        cells = [pos for m in rnd.matches for pos in m.positions]
        label = "Match!" if rnd.depth == 0 else f"Cascade x{rnd.depth + 1}!"
        _show(engine, scores, label, highlight=cells, board=rnd.board)
        if not await engine.pacer.wait(CASCADE_ROUND_DELAY_SEC, token):
            return


def run_game(engine: GameEngine, show_thinking: bool = True) -> None:
    scores = ScoreKeeper()
    engine.on_match_found(scores.on_match_found)
    engine.on_king_conversion(scores.on_king_conversion)

    status = engine.last_status

    while True:
        highlight = engine.win.positions if engine.win else None
        _show(engine, scores, status, highlight=highlight)

        if engine.status is not GameStatus.PLAYING:
            return

        if engine.is_ai_turn():
            if show_thinking:
                move = asyncio.run(thinking_spinner(engine.play_ai_turn()))
            else:
                move = asyncio.run(engine.play_ai_turn(delay=0))
            if move is None:
                return
            status = f"AI chose {move.column + 1} ({move.move_type.value}, {move.confidence:.0f}% sure)"
        else:
            raw = input(f"{_seat_name(engine, engine.current)} move: ")
            try:
                move = parse_move(raw, engine.board.cols)
            except ValueError as e:
                status = str(e)
                continue
            if move is None:
                _show(engine, scores, "Game quit.")
                return
            if not engine.apply_move(int(move)):
                status = engine.last_rejection.value
                continue
            status = ""

        outcome = engine.last_outcome
        if outcome is not None and outcome.rounds and show_thinking:
            asyncio.run(_replay_cascade(engine, scores, outcome))
        status = " | ".join(s for s in (status, engine.last_status) if s)
