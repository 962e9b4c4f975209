# src/connect3_analysis/cli/make_figures.py
from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_results, resolve_csv
from ..metrics.summarize import family_summary
from ..plots.chart import plot_results_stack, plot_scatter, plot_top_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connect3_analysis figures",
        description="Generate the standard figure set from league_results_*.csv",
    )
    ap.add_argument("--csv", type=str, default=None, help="Path to a specific results CSV.")
    ap.add_argument("--results-dir", type=str, default="data/results")
    ap.add_argument("--pattern", type=str, default="league_results_*.csv")
    ap.add_argument("--variant", choices=["connect3", "classic"], default=None)
    ap.add_argument("--figures-dir", type=str, default="data/figures")
    ap.add_argument("--top", type=int, default=20, help="Top-N for leaderboard-style plots.")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = resolve_csv(args.csv, args.results_dir, args.pattern)
    df = load_results(LoadSpec(csv_path=csv_path, variant=args.variant))
    outdir = Path(args.figures_dir)

    written = [
        plot_results_stack(df, outdir, show=False),
        plot_top_bar(df, outdir, metric="ppg", top_n=args.top, show=False),
        plot_top_bar(df, outdir, metric="avg_score", top_n=args.top, show=False),
        plot_scatter(df, outdir, x="kings_per_game", y="ppg", show=False),
    ]

    fam = family_summary(df)
    outdir.mkdir(parents=True, exist_ok=True)
    fam.to_csv(outdir / "family_summary.csv", index=False)

    for path in written:
        if path is not None:
            print(f"wrote {path}")
    print(f"wrote {outdir / 'family_summary.csv'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
