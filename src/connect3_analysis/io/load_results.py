from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd


NUMERIC_COLS = [
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms",
    "matches", "cascades", "kings",
    "score", "avg_score",
]

# derived column -> counter it divides by games
PER_GAME = {
    "kings_per_game": "kings",
    "cascades_per_game": "cascades",
    "win_rate": "wins",
}


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    variant: str | None = None  # "connect3" / "classic"; None keeps every row


def _per_game(df: pd.DataFrame, col: str) -> pd.Series:
    games = df["games"].where(df["games"] > 0)
    return (df[col] / games).fillna(0.0)


def load_results(spec: LoadSpec) -> pd.DataFrame:
    """
    Read one league CSV. Known counters are coerced to numbers (bad cells
    become NaN), nameless rows dropped, per-game rates added.
    """
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path).rename(columns=str.strip)
    if "name" not in df.columns:
        raise ValueError(f"CSV missing required column 'name'. Columns: {list(df.columns)}")

    for col in NUMERIC_COLS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    df["name"] = df["name"].astype(str).str.strip()
    df = df[df["name"] != ""].copy()

    if spec.variant is not None and "variant" in df.columns:
        df = df[df["variant"] == spec.variant].copy()

    if "games" in df.columns:
        for derived, col in PER_GAME.items():
            if col in df.columns:
                df[derived] = _per_game(df, col)

    return df.reset_index(drop=True)


def load_latest_from_dir(results_dir: Path, pattern: str = "league_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    # timestamped names sort chronologically
    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")
    return files[-1]


def resolve_csv(csv: str | None, results_dir: str, pattern: str) -> Path:
    """An explicit ``--csv`` wins; otherwise the newest file in ``results_dir``."""
    return Path(csv) if csv else load_latest_from_dir(Path(results_dir), pattern=pattern)
