# src/connectfour_analysis/cli/make_figures.py
from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import load_games, load_moves
from ..metrics.summarize import depth_strength, depth_summary
from ..plots.chart import plot_nodes_by_depth, plot_strength_by_depth, plot_time_by_ply
from .analyze_csv import resolve_paths


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connectfour_analysis figures",
        description="Write the standard figures for the latest self-play run.",
    )
    ap.add_argument("--moves-csv", type=str, default=None, help="Per-move CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--games-csv", type=str, default=None, help="Per-game CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing selfplay_*.csv")
    ap.add_argument("--figures-dir", type=str, default="data/figures", help="Output directory")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    moves_path, games_path = resolve_paths(args)
    moves = load_moves(moves_path)
    games = load_games(games_path)

    figures_dir = Path(args.figures_dir)
    created = {
        "nodes_by_depth": plot_nodes_by_depth(depth_summary(moves), figures_dir, show=False),
        "time_by_ply": plot_time_by_ply(moves, figures_dir, show=False),
        "strength_by_depth": plot_strength_by_depth(depth_strength(games), figures_dir, show=False),
    }
    created = {k: p for k, p in created.items() if p is not None}

    print(f"Loaded: {moves_path}")
    print(f"Loaded: {games_path}")
    print(f"Wrote {len(created)} outputs under: {figures_dir.resolve()}")
    for k, p in created.items():
        print(f"- {k}: {p}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
