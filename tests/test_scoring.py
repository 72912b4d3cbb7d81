import unittest

from connectfour.core.board import Board
from connectfour.core.scoring import evaluate
from connectfour.types import Move

from helpers import board_from_rows


def _drops(*cols_players):
    b = Board()
    for col, player in cols_players:
        b.drop(Move(col), player)
    return b


class TestEvaluator(unittest.TestCase):
    def test_empty_board_scores_zero(self):
        self.assertEqual(evaluate(Board(), "X"), 0)

    def test_lone_piece_scores_zero(self):
        self.assertEqual(evaluate(_drops((3, "X")), "X"), 0)

    def test_two_in_a_row(self):
        b = _drops((0, "X"), (1, "X"))
        # Only the window over columns 0-3 holds both pieces.
        self.assertEqual(evaluate(b, "X"), 10)
        self.assertEqual(evaluate(b, "O"), -10)

    def test_three_in_a_row_horizontal(self):
        b = _drops((0, "X"), (1, "X"), (2, "X"))
        # cols 0-3 -> 3 pieces (100), cols 1-4 -> 2 pieces (10)
        self.assertEqual(evaluate(b, "X"), 110)

    def test_three_in_a_row_vertical(self):
        b = _drops((0, "X"), (0, "X"), (0, "X"))
        self.assertEqual(evaluate(b, "X"), 110)

    def test_diagonals_are_scored(self):
        b = board_from_rows([
            ".......",
            ".......",
            ".......",
            "..X....",
            ".XO....",
            "XOO....",
        ])
        # X diagonal from (0,0): +100 (three) and +10 (two, from (1,1)).
        # O diagonal from (0,1): -10. O pair on the bottom row: -10.
        self.assertEqual(evaluate(b, "X"), 90)

    def test_mixed_window_is_blocked(self):
        b = _drops((0, "X"), (1, "X"), (2, "X"), (3, "O"))
        self.assertEqual(evaluate(b, "X"), 0)

    def test_opponent_threat_is_negative(self):
        b = _drops((4, "O"), (5, "O"), (6, "O"))
        self.assertEqual(evaluate(b, "X"), -110)

    def test_score_is_antisymmetric(self):
        b = board_from_rows([
            ".......",
            ".......",
            "...O...",
            "..XX...",
            ".OXO...",
            "XOXOX..",
        ])
        self.assertEqual(evaluate(b, "X"), -evaluate(b, "O"))


if __name__ == "__main__":
    unittest.main()
