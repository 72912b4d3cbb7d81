from __future__ import annotations

from pathlib import Path
from typing import Iterable

import matplotlib.pyplot as plt
import pandas as pd


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, name: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / name
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    out: list[Path] = []

    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=30)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")
        p = _finish(fig, outdir, f"hist_{c}.png", show=show)
        if p is not None:
            out.append(p)
    return out


def plot_nodes_by_depth(summary: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if summary.empty or "depth" not in summary.columns:
        return None

    fig = plt.figure()
    plt.plot(summary["depth"], summary["mean_nodes"], marker="o", label="mean")
    plt.plot(summary["depth"], summary["max_nodes"], marker="x", linestyle="--", label="max")
    plt.yscale("log")
    plt.title("Nodes searched per move")
    plt.xlabel("depth (plies)")
    plt.ylabel("nodes (log)")
    plt.legend()
    return _finish(fig, outdir, "nodes_by_depth.png", show=show)


def plot_time_by_ply(moves: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if moves.empty or not {"ply", "time_ms", "depth"} <= set(moves.columns):
        return None

    fig = plt.figure()
    for depth, grp in moves.groupby("depth"):
        plt.scatter(grp["ply"], grp["time_ms"], alpha=0.6, label=f"d{int(depth)}")
    plt.title("Think time over the game")
    plt.xlabel("ply")
    plt.ylabel("time (ms)")
    plt.legend()
    return _finish(fig, outdir, "time_by_ply.png", show=show)


def plot_strength_by_depth(strength: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if strength.empty or "ppg" not in strength.columns:
        return None

    ranked = strength.sort_values("depth")
    fig = plt.figure()
    plt.bar(ranked["depth"].astype(str), ranked["ppg"].astype(float))
    plt.ylim(0, 1)
    plt.title("Points per game by depth")
    plt.xlabel("depth (plies)")
    plt.ylabel("ppg")
    return _finish(fig, outdir, "strength_by_depth.png", show=show)
