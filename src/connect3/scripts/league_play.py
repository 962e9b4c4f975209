from __future__ import annotations

import random
from typing import Dict, Tuple

from connect3.ai.base import Agent
from connect3.core.scoring import ScoreKeeper
from connect3.game.engine import GameEngine
from connect3.types import GameStatus, GameVariant, Player

from .league_stats import DRAW


def seed_agent(agent: Agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if rng is not None:
        rng.seed(seed)


def play_headless(
    agent_red: Agent,
    agent_yellow: Agent,
    variant: GameVariant = GameVariant.CLASSIC,
    seed_base: int = 0,
    opening_moves: int = 2,
    max_moves: int = 200,
) -> Tuple[str, Dict[str, Dict[str, int]]]:
    """
    Play one silent game. Returns the winner ("red" / "yellow" / "D")
    and per-side stats. A Classic game still going after ``max_moves``
    drops is scored as a draw.
    """
    engine = GameEngine(variant)
    scores = {p: ScoreKeeper() for p in Player}
    engine.on_match_found(lambda e: scores[e.player].on_match_found(e))
    engine.on_king_conversion(lambda e: scores[e.player].on_king_conversion(e))

    stats = {p.value: {"moves": 0, "time_ms": 0} for p in Player}

    seed_agent(agent_red, seed_base + 101)
    seed_agent(agent_yellow, seed_base + 202)

    # a couple of random opening drops so repeated pairings differ
    rng = random.Random(seed_base)
    for _ in range(opening_moves):
        moves = engine.board.valid_moves()
        if not moves or engine.status is not GameStatus.PLAYING:
            break
        engine.apply_move(int(rng.choice(moves)))

    while engine.status is GameStatus.PLAYING and engine.moves_made < max_moves:
        agent = agent_red if engine.current is Player.RED else agent_yellow
        side = engine.current.value
        move = agent.choose_move(engine.snapshot())

        if not engine.apply_move(int(move)):
            raise RuntimeError(f"{getattr(agent, 'name', agent)} played an illegal move: {move}")

        info = getattr(agent, "last_info", None) or {}
        stats[side]["moves"] += 1
        stats[side]["time_ms"] += max(1, int(info.get("time_ms", 0)))

    for p in Player:
        keeper = scores[p]
        stats[p.value].update(
            matches=keeper.matches,
            cascades=keeper.cascades,
            kings=keeper.kings_created,
            score=keeper.score,
        )

    if engine.win is None:
        return DRAW, stats
    return engine.win.player.value, stats


def run_pairings_batch(args):
    """Worker entry point: play every game of a batch of pairings, seats alternating."""
    batch_items, games_per_pair, variant = args
    out = []
    for a_name, b_name, a_make, b_make, base_seed in batch_items:
        for g in range(games_per_pair):
            a_is_red = g % 2 == 0
            red, yellow = (a_make(), b_make()) if a_is_red else (b_make(), a_make())
            outcome, stats = play_headless(red, yellow, variant, seed_base=base_seed + g)
            out.append((a_name, b_name, a_is_red, outcome, stats))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]
