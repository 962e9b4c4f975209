from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def _numeric(df: pd.DataFrame, col: str) -> bool:
    return col in df.columns and pd.api.types.is_numeric_dtype(df[col])


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> List[Path]:
    written: List[Path] = []
    for c in cols:
        if not _numeric(df, c):
            continue
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=20)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("agents")
        out = _finish(fig, outdir, f"hist_{c}.png", show=show)
        if out is not None:
            written.append(out)
    return written


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> Path | None:
    if not (_numeric(df, x) and _numeric(df, y)):
        return None

    fig = plt.figure()
    plt.scatter(df[x], df[y], alpha=0.7)
    if "name" in df.columns:
        for _, row in df.iterrows():
            plt.annotate(str(row["name"]), (row[x], row[y]), fontsize=7, alpha=0.8)
    plt.title(f"{y} vs {x}")
    plt.xlabel(x)
    plt.ylabel(y)
    return _finish(fig, outdir, f"scatter_{y}_vs_{x}.png", show=show)


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    if "name" not in df.columns or not _numeric(df, metric):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(top["name"].astype(str), top[metric].astype(float))
    plt.title(f"Top {min(top_n, len(top))}: {metric}")
    plt.xlabel("agent")
    plt.ylabel(metric)
    plt.xticks(rotation=45, ha="right")
    return _finish(fig, outdir, f"top_{top_n}_{metric}.png", show=show)


def plot_results_stack(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked wins / draws / losses per agent."""
    needed = ["name", "wins", "draws", "losses"]
    if any(c not in df.columns for c in needed):
        return None

    data = df[needed].fillna(0).sort_values("wins", ascending=False)
    names = data["name"].astype(str)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(names, data["wins"], label="wins")
    plt.bar(names, data["draws"], bottom=data["wins"], label="draws")
    plt.bar(names, data["losses"], bottom=data["wins"] + data["draws"], label="losses")
    plt.title("Results per agent")
    plt.ylabel("games")
    plt.xticks(rotation=45, ha="right")
    plt.legend()
    return _finish(fig, outdir, "results_stack.png", show=show)
