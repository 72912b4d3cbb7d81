from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import load_games, load_latest_from_dir, load_moves
from ..metrics.summarize import depth_strength, depth_summary, matchup_table, numeric_summary
from ..plots.chart import plot_histograms, plot_nodes_by_depth, plot_strength_by_depth, plot_time_by_ply


DEFAULT_NUMERIC_PLOTS = ["nodes", "cutoffs", "time_ms", "eval"]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze Connect-4 self-play CSV results.")
    ap.add_argument("--moves-csv", type=str, default=None, help="Per-move CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--games-csv", type=str, default=None, help="Per-game CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing selfplay_*.csv")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    ap.add_argument("--no-hists", action="store_true", help="Disable histogram generation")
    return ap


def resolve_paths(args: argparse.Namespace) -> tuple[Path, Path]:
    results_dir = Path(args.results_dir)
    moves = Path(args.moves_csv) if args.moves_csv else load_latest_from_dir(results_dir, "selfplay_moves_*.csv")
    games = Path(args.games_csv) if args.games_csv else load_latest_from_dir(results_dir, "selfplay_games_*.csv")
    return moves, games


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    moves_path, games_path = resolve_paths(args)
    moves = load_moves(moves_path)
    games = load_games(games_path)

    print(f"\nLoaded: {moves_path} ({len(moves):,} moves)")
    print(f"Loaded: {games_path} ({len(games):,} games)")

    cost = depth_summary(moves)
    print("\n=== Search cost by depth ===")
    print(cost.to_string(index=False))

    strength = depth_strength(games)
    print("\n=== Strength by depth ===")
    print(strength.to_string(index=False))

    print("\n=== Matchups (X depth vs O depth) ===")
    print(matchup_table(games).to_string(index=False))

    desc = numeric_summary(moves)
    if not desc.empty:
        print("\n=== Numeric summary (moves) ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    if not args.no_hists:
        plot_histograms(moves, outdir, DEFAULT_NUMERIC_PLOTS, show=args.show)
    plot_nodes_by_depth(cost, outdir, show=args.show)
    plot_time_by_ply(moves, outdir, show=args.show)
    plot_strength_by_depth(strength, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
