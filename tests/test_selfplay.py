import csv
import tempfile
import unittest
from pathlib import Path

from connectfour.game.state import GameState
from connectfour.scripts.selfplay import GAME_COLUMNS, MOVE_COLUMNS, play_headless, run_matches, schedule, write_csv


class TestSelfPlay(unittest.TestCase):
    def test_headless_game_is_complete_and_replayable(self):
        rec = play_headless(1, 2, game=5, opening_plies=2, seed=11)
        self.assertIn(rec.result, {"X", "O", "D"})
        self.assertEqual(rec.game, 5)

        opening = [int(c) - 1 for c in rec.opening.split()]
        self.assertEqual(len(opening), 2)
        self.assertEqual(rec.plies, len(opening) + len(rec.moves))

        columns = opening + [int(m["column"]) - 1 for m in rec.moves]
        final = GameState.from_moves(columns)
        self.assertTrue(final.is_over)
        self.assertEqual({"x_wins": "X", "o_wins": "O", "draw": "D"}[final.outcome], rec.result)

        plies = [m["ply"] for m in rec.moves]
        self.assertEqual(plies, list(range(3, 3 + len(plies))))
        for m in rec.moves:
            self.assertEqual(m["depth"], 1 if m["player"] == "X" else 2)

    def test_same_seed_same_game(self):
        a = play_headless(2, 2, seed=4)
        b = play_headless(2, 2, seed=4)
        self.assertEqual([m["column"] for m in a.moves], [m["column"] for m in b.moves])

    def test_schedule_pairs_every_depth_both_colours(self):
        self.assertEqual(schedule([1, 2], 2), [(1, 1), (1, 1), (1, 2), (1, 2), (2, 1), (2, 1), (2, 2), (2, 2)])

    def test_run_and_write_csv(self):
        records = run_matches([1, 2], 1, seed=3)
        self.assertEqual([r.game for r in records], [0, 1, 2, 3])

        with tempfile.TemporaryDirectory() as tmp:
            moves_path, games_path = write_csv(records, Path(tmp) / "out")

            with open(moves_path, newline="") as f:
                rows = list(csv.DictReader(f))
            self.assertEqual(list(rows[0].keys()), MOVE_COLUMNS)
            self.assertEqual(len(rows), sum(len(r.moves) for r in records))

            with open(games_path, newline="") as f:
                rows = list(csv.reader(f))
            self.assertEqual(rows[0], GAME_COLUMNS)
            self.assertEqual(len(rows), 1 + len(records))


if __name__ == "__main__":
    unittest.main()
