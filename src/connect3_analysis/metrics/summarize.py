from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "avg_score",
    "kings_per_game",
    "cascades_per_game",
    "wins",
    "points",
    "games",
]

TABLE_COLS = [
    "name", "variant",
    "games", "wins", "draws", "losses",
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "kings", "kings_per_game",
    "cascades",
    "avg_score",
    "points",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0
    # If set, filter out agents slower than this (ms per move)
    max_avg_ms_per_move: float | None = None


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()

    if cfg.min_games > 0:
        _require_cols(out, ["games"])
        out = out[out["games"].fillna(0) >= cfg.min_games].copy()

    if cfg.max_avg_ms_per_move is not None:
        _require_cols(out, ["avg_ms_per_move"])
        out = out[out["avg_ms_per_move"].fillna(float("inf")) <= cfg.max_avg_ms_per_move].copy()

    return out


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["name", cfg.metric])

    out = filter_rows(df, cfg)

    # Sort direction: lower is better only for avg_ms_per_move
    ascending = (cfg.metric == "avg_ms_per_move")
    out = out.sort_values(cfg.metric, ascending=ascending, kind="stable")

    keep = [c for c in TABLE_COLS if c in out.columns]

    out = out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T


def family_summary(df: pd.DataFrame) -> pd.DataFrame:
    """
    Collapse seeds: "Easy seed0", "Easy seed1" -> "Easy".
    """
    _require_cols(df, ["name"])
    out = df.copy()
    out["family"] = out["name"].str.split().str[0]
    cols = [c for c in ("games", "wins", "draws", "losses", "points", "kings", "cascades", "score") if c in out.columns]
    grouped = out.groupby("family", sort=True)[cols].sum()
    if "points" in grouped.columns and "games" in grouped.columns:
        grouped["ppg"] = grouped["points"] / grouped["games"].where(grouped["games"] > 0)
    return grouped.reset_index()
