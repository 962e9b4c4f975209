from __future__ import annotations

import argparse
import csv
import logging
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from itertools import combinations
from pathlib import Path
from typing import Dict, List, Optional

from connect3.config import LOG_LEVEL
from connect3.types import GameVariant

from .league_play import chunked, run_pairings_batch
from .league_roster import build_roster
from .league_stats import Agg, Team, add_result

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name", "variant",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms",
    "matches", "cascades", "kings",
    "score", "avg_score",
]


def round_robin(
    teams: List[Team],
    variant: GameVariant = GameVariant.CLASSIC,
    games_per_pair: int = 2,
    seed: int = 1234,
    max_workers: Optional[int] = 1,
    batch_pairings: int = 6,
) -> Dict[str, Agg]:
    """
    Every team meets every other team ``games_per_pair`` times, seats
    alternating. ``max_workers=1`` plays inline; anything else uses a
    process pool (None = cpu cores, capped at 6).
    """
    rng = random.Random(seed)
    agg: Dict[str, Agg] = {t.name: Agg() for t in teams}

    items = [
        (a.name, b.name, a.make, b.make, rng.randrange(1_000_000))
        for a, b in combinations(teams, 2)
    ]
    batches = [(batch, games_per_pair, variant) for batch in chunked(items, max(1, batch_pairings))]

    def apply(results) -> None:
        for a_name, b_name, a_is_red, outcome, stats in results:
            add_result(agg[a_name], agg[b_name], outcome, a_is_red)
            agg[a_name].absorb(stats["red" if a_is_red else "yellow"])
            agg[b_name].absorb(stats["yellow" if a_is_red else "red"])

    if max_workers == 1:
        for batch in batches:
            apply(run_pairings_batch(batch))
        return agg

    workers = max_workers or min(6, os.cpu_count() or 1)
    with ProcessPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(run_pairings_batch, batch) for batch in batches]
        for fut in as_completed(futures):
            apply(fut.result())
    return agg


def _ansi(code: str, s: str) -> str:
    if os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") in (None, "", "dumb"):
        return s
    return f"\x1b[{code}m{s}\x1b[0m"


def print_table(agg: Dict[str, Agg], z: float) -> None:
    ranked = sorted(agg.items(), key=lambda kv: kv[1].strength(z), reverse=True)
    rule = _ansi("2", "─" * 70)
    print(_ansi("1;36", "League table"))
    print(_ansi("2", f"{'rk':>3}  {'agent':<18}  {'strength':>8}  {'ppg':>5}  {'W-D-L':>9}  {'kings':>5}  {'score':>7}"))
    print(rule)
    for i, (name, a) in enumerate(ranked, start=1):
        wdl = f"{a.wins}-{a.draws}-{a.losses}"
        print(f"{i:>3}  {name:<18}  {a.strength(z):>8.4f}  {a.ppg:>5.2f}  {wdl:>9}  {a.kings:>5}  {a.score:>7}")
    print(rule)


def export_csv(agg: Dict[str, Agg], variant: GameVariant, out_dir: Path, z: float) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"league_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, a in agg.items():
            w.writerow([
                name, variant.value,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(a.ppg, 6),
                round(a.strength(z), 6),
                round(a.ms_per_move, 3),
                a.moves, a.time_ms,
                a.matches, a.cascades, a.kings,
                a.score, round(a.score_per_game, 3),
            ])

    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Round-robin league between Connect-3 AI agents.")
    ap.add_argument("--variant", choices=[v.value for v in GameVariant], default=GameVariant.CLASSIC.value)
    ap.add_argument("--games", type=int, default=4, help="Games per pairing (seats alternate)")
    ap.add_argument("--seeds", type=int, default=2, help="Seeds per randomized difficulty")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--workers", type=int, default=1, help="0 = cpu cores (capped at 6)")
    ap.add_argument("--z", type=float, default=1.28, help="Z for Wilson LCB")
    ap.add_argument("--out-dir", type=str, default="data/results")
    ap.add_argument("--no-csv", action="store_true")
    return ap


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = build_argparser().parse_args(argv)
    variant = GameVariant(args.variant)

    roster = build_roster(seeds=args.seeds)
    print(_ansi("1", f"Roster size: {len(roster)} teams, variant {variant.value}"))

    start = time.perf_counter()
    agg = round_robin(
        roster,
        variant=variant,
        games_per_pair=args.games,
        seed=args.seed,
        max_workers=args.workers or None,
    )
    print_table(agg, args.z)

    if not args.no_csv:
        out_path = export_csv(agg, variant, Path(args.out_dir), args.z)
        print(f"Wrote CSV: {out_path}")

    elapsed = time.perf_counter() - start
    logger.info("league finished in %.3fs", elapsed)
    print(_ansi("1", f"Total runtime: {elapsed:.3f}s"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
