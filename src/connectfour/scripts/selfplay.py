from __future__ import annotations

import argparse
import csv
import itertools
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from connectfour.ai.search import SearchEngine
from connectfour.config import SELFPLAY_OPENING_PLIES, SELFPLAY_RESULTS_DIR
from connectfour.game.state import GameState

logger = logging.getLogger(__name__)

MOVE_COLUMNS = ["game", "ply", "player", "depth", "column", "eval", "nodes", "cutoffs", "time_ms"]
GAME_COLUMNS = ["game", "x_depth", "o_depth", "result", "plies", "opening"]

_RESULT = {"x_wins": "X", "o_wins": "O", "draw": "D"}


@dataclass
class GameRecord:
    game: int
    x_depth: int
    o_depth: int
    result: str = ""
    plies: int = 0
    opening: str = ""
    moves: List[Dict[str, object]] = field(default_factory=list)


def play_headless(x_depth: int, o_depth: int, *, game: int = 0, opening_plies: int = SELFPLAY_OPENING_PLIES, seed: int = 0) -> GameRecord:
    """
    Engine vs engine. A few random opening plies keep deterministic engines
    from replaying the same game every time.
    """
    state = GameState()
    engines = {
        "X": SearchEngine(name=f"Minimax d{x_depth}", depth=x_depth),
        "O": SearchEngine(name=f"Minimax d{o_depth}", depth=o_depth),
    }
    rec = GameRecord(game=game, x_depth=x_depth, o_depth=o_depth)

    rng = random.Random(seed)
    opening: List[int] = []
    for _ in range(opening_plies):
        moves = state.legal_moves()
        if not moves:
            break
        move = rng.choice(moves)
        state.apply_move(move)
        opening.append(int(move) + 1)

    while not state.is_over:
        player = state.current
        engine = engines[player]
        move = engine.select_move(state)
        info = engine.last_info

        rec.moves.append({
            "game": game,
            "ply": len(state.history) + 1,
            "player": player,
            "depth": engine.depth,
            "column": int(move) + 1,
            "eval": info.get("eval"),
            "nodes": info.get("nodes", 0),
            "cutoffs": info.get("cutoffs", 0),
            "time_ms": info.get("time_ms", 0),
        })
        state.apply_move(move)

    rec.result = _RESULT[state.outcome]
    rec.plies = len(state.history)
    rec.opening = " ".join(str(c) for c in opening)
    return rec


def schedule(depths: Sequence[int], games: int) -> List[Tuple[int, int]]:
    """Every ordered (x_depth, o_depth) pairing, `games` times each."""
    pairs = list(itertools.product(depths, repeat=2))
    return [p for p in pairs for _ in range(games)]


def run_matches(
    depths: Sequence[int],
    games: int,
    *,
    opening_plies: int = SELFPLAY_OPENING_PLIES,
    seed: int = 0,
    workers: int = 1,
) -> List[GameRecord]:
    jobs = schedule(depths, games)
    records: List[GameRecord] = []

    if workers <= 1:
        for gid, (xd, od) in enumerate(jobs):
            rec = play_headless(xd, od, game=gid, opening_plies=opening_plies, seed=seed + gid)
            logger.info("Game %d: d%d vs d%d -> %s in %d plies", gid, xd, od, rec.result, rec.plies)
            records.append(rec)
        return records

    with ProcessPoolExecutor(max_workers=workers) as ex:
        futures = {
            ex.submit(play_headless, xd, od, game=gid, opening_plies=opening_plies, seed=seed + gid): gid
            for gid, (xd, od) in enumerate(jobs)
        }
        for fut in as_completed(futures):
            rec = fut.result()
            logger.info("Game %d: d%d vs d%d -> %s in %d plies", rec.game, rec.x_depth, rec.o_depth, rec.result, rec.plies)
            records.append(rec)

    records.sort(key=lambda r: r.game)
    return records


def write_csv(records: Sequence[GameRecord], outdir: Path) -> Tuple[Path, Path]:
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    moves_path = outdir / f"selfplay_moves_{ts}.csv"
    games_path = outdir / f"selfplay_games_{ts}.csv"

    with open(moves_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=MOVE_COLUMNS)
        w.writeheader()
        for rec in records:
            w.writerows(rec.moves)

    with open(games_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(GAME_COLUMNS)
        for rec in records:
            w.writerow([rec.game, rec.x_depth, rec.o_depth, rec.result, rec.plies, rec.opening])

    return moves_path, games_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play engine-vs-engine games and export search statistics.")
    ap.add_argument("--depths", type=int, nargs="+", default=[2, 4], help="Search depths to pair against each other")
    ap.add_argument("--games", type=int, default=4, help="Games per (X depth, O depth) pairing")
    ap.add_argument("--opening-plies", type=int, default=SELFPLAY_OPENING_PLIES, help="Random plies played before the engines take over")
    ap.add_argument("--seed", type=int, default=0, help="Base seed for the random openings")
    ap.add_argument("--workers", type=int, default=1, help="Worker processes (1 runs in-process)")
    ap.add_argument("--out", type=str, default=SELFPLAY_RESULTS_DIR, help="Directory for the CSV files")
    ap.add_argument("--log-level", type=str, default="INFO")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if any(d < 1 for d in args.depths):
        print("Depths must be at least 1.")
        return 2

    records = run_matches(
        args.depths,
        args.games,
        opening_plies=args.opening_plies,
        seed=args.seed,
        workers=args.workers,
    )
    moves_path, games_path = write_csv(records, Path(args.out))

    results = {"X": 0, "O": 0, "D": 0}
    for rec in records:
        results[rec.result] += 1

    print("\n=== SELF-PLAY RESULTS ===")
    print(f"Games:   {len(records)}")
    print(f"X wins:  {results['X']}")
    print(f"O wins:  {results['O']}")
    print(f"Draws:   {results['D']}")
    print(f"Wrote: {moves_path}")
    print(f"Wrote: {games_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
