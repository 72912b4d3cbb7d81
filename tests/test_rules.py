import unittest

from connectfour.core.rules import check_winner, check_winner_with_line, is_draw, outcome_of
from connectfour.core.windows import WINDOWS
from connectfour.game.state import GameState

from helpers import DRAW_ROWS, board_from_rows


class TestTerminalDetector(unittest.TestCase):
    def test_window_count_covers_all_orientations(self):
        self.assertEqual(len(WINDOWS), 69)

    def test_horizontal_win(self):
        b = board_from_rows([
            ".......",
            ".......",
            ".......",
            ".......",
            "OOO....",
            "XXXX...",
        ])
        winner, line = check_winner_with_line(b)
        self.assertEqual(winner, "X")
        self.assertEqual(sorted(line), [(0, 0), (0, 1), (0, 2), (0, 3)])

    def test_vertical_win(self):
        b = board_from_rows([
            ".......",
            ".......",
            "..O....",
            "..O.X..",
            "..O.X..",
            "..O.XX.",
        ])
        winner, line = check_winner_with_line(b)
        self.assertEqual(winner, "O")
        self.assertEqual(sorted(line), [(0, 2), (1, 2), (2, 2), (3, 2)])

    def test_diagonal_up_right_win(self):
        b = board_from_rows([
            ".......",
            ".......",
            "...X...",
            "..XO...",
            ".XOO...",
            "XOOX...",
        ])
        winner, line = check_winner_with_line(b)
        self.assertEqual(winner, "X")
        self.assertEqual(sorted(line), [(0, 0), (1, 1), (2, 2), (3, 3)])

    def test_diagonal_down_right_win(self):
        b = board_from_rows([
            ".......",
            ".......",
            "...X...",
            "...OX..",
            "...OOX.",
            "...XOOX",
        ])
        winner, line = check_winner_with_line(b)
        self.assertEqual(winner, "X")
        self.assertEqual(sorted(line), [(0, 6), (1, 5), (2, 4), (3, 3)])

    def test_three_blocked_on_both_ends_is_not_a_win(self):
        b = board_from_rows([
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "OXXXO..",
        ])
        self.assertIsNone(check_winner(b))
        self.assertEqual(outcome_of(b), "in_progress")

    def test_full_board_without_four_is_a_draw(self):
        b = board_from_rows(DRAW_ROWS)
        self.assertIsNone(check_winner(b))
        self.assertTrue(is_draw(b))
        self.assertEqual(outcome_of(b), "draw")

    def test_full_board_with_four_is_a_win_not_a_draw(self):
        rows = list(DRAW_ROWS)
        rows[5] = "XXXXXOX"
        b = board_from_rows(rows)
        self.assertFalse(is_draw(b))
        self.assertEqual(outcome_of(b), "x_wins")

    def test_result_depends_only_on_grid(self):
        a = GameState.from_moves([0, 1, 2, 1, 3, 6, 4])
        b = GameState.from_moves([4, 1, 2, 6, 3, 1, 0])
        self.assertEqual(a.board.grid, b.board.grid)
        self.assertEqual(outcome_of(a.board), outcome_of(b.board))
        self.assertEqual(check_winner_with_line(a.board), check_winner_with_line(b.board))


if __name__ == "__main__":
    unittest.main()
