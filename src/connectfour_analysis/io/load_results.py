from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


MOVE_COLS = ["game", "ply", "player", "depth", "column", "eval", "nodes", "cutoffs", "time_ms"]
GAME_COLS = ["game", "x_depth", "o_depth", "result", "plies", "opening"]

MOVE_NUMERIC = ["game", "ply", "depth", "column", "eval", "nodes", "cutoffs", "time_ms"]
GAME_NUMERIC = ["game", "x_depth", "o_depth", "plies"]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    required_cols: tuple[str, ...] = ()
    numeric_cols: tuple[str, ...] = ()


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.required_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    return _coerce_numeric(df, spec.numeric_cols)


def load_moves(csv_path: Path) -> pd.DataFrame:
    return load_results(LoadSpec(csv_path, tuple(MOVE_COLS), tuple(MOVE_NUMERIC)))


def load_games(csv_path: Path) -> pd.DataFrame:
    df = load_results(LoadSpec(csv_path, tuple(GAME_COLS[:5]), tuple(GAME_NUMERIC)))
    df["result"] = df["result"].astype(str).str.strip().str.upper()
    return df


def load_latest_from_dir(results_dir: Path, pattern: str) -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
