from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from ..io.load_results import LoadSpec, load_results, resolve_csv
from ..metrics.summarize import SummaryConfig, family_summary, filter_rows, numeric_summary, top_table
from ..plots.chart import plot_histograms, plot_scatter, plot_top_bar


HIST_COLS = [
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "avg_score",
    "kings_per_game",
    "cascades_per_game",
]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze Connect-3 league CSV results.")
    src = ap.add_argument_group("input")
    src.add_argument("--csv", type=str, default=None, help="Results CSV; defaults to the newest one in --results-dir")
    src.add_argument("--results-dir", type=str, default="data/results")
    src.add_argument("--pattern", type=str, default="league_results_*.csv")
    src.add_argument("--variant", choices=["connect3", "classic"], default=None, help="Only rows from this variant")

    rank = ap.add_argument_group("ranking")
    rank.add_argument("--metric", type=str, default="strength_wilson_lcb",
                      help="ppg, avg_score, kings_per_game, avg_ms_per_move, ...")
    rank.add_argument("--top", type=int, default=20)
    rank.add_argument("--min-games", type=int, default=0)
    rank.add_argument("--max-ms", type=float, default=None, help="Drop agents slower than this avg_ms_per_move")

    out = ap.add_argument_group("output")
    out.add_argument("--outdir", type=str, default="figures")
    out.add_argument("--show", action="store_true", help="Open plot windows instead of saving PNGs")
    out.add_argument("--no-plots", action="store_true", help="Print tables only")
    return ap


def _section(title: str, frame: pd.DataFrame, *, index: bool = False) -> None:
    if frame.empty:
        return
    print(f"\n=== {title} ===")
    print(frame.to_string(index=index))


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = resolve_csv(args.csv, args.results_dir, args.pattern)
    df = load_results(LoadSpec(csv_path=csv_path, variant=args.variant))
    print(f"\nLoaded: {csv_path}  ({len(df):,} agents, {len(df.columns)} columns)")

    cfg = SummaryConfig(
        metric=args.metric,  # type: ignore[arg-type]
        top_n=args.top,
        min_games=args.min_games,
        max_avg_ms_per_move=args.max_ms,
    )

    _section("Top table", top_table(df, cfg))
    _section("By family", family_summary(df))
    _section("Numeric summary", numeric_summary(df), index=True)

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    kept = filter_rows(df, cfg)
    plot_histograms(kept, outdir, HIST_COLS, show=args.show)
    plot_scatter(kept, outdir, x="kings_per_game", y=args.metric, show=args.show)
    plot_top_bar(kept, outdir, metric=args.metric, top_n=args.top, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
