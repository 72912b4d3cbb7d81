import unittest

from connectfour.core.board import Board
from connectfour.errors import InvalidMove
from connectfour.types import Move

from helpers import board_from_rows


class TestBoard(unittest.TestCase):
    def test_pieces_stack_from_the_bottom(self):
        b = Board()
        self.assertEqual(b.drop(Move(3), "X"), 0)
        self.assertEqual(b.drop(Move(3), "O"), 1)
        self.assertEqual(b.grid[0][3], "X")
        self.assertEqual(b.grid[1][3], "O")
        self.assertEqual(b.heights[3], 2)
        self.assertEqual(b.piece_count(), 2)

    def test_full_column_is_rejected_without_mutation(self):
        b = Board()
        for i in range(6):
            b.drop(Move(0), "X" if i % 2 == 0 else "O")
        self.assertTrue(b.is_column_full(Move(0)))
        self.assertNotIn(Move(0), b.valid_moves())

        before = b.copy()
        with self.assertRaises(InvalidMove):
            b.drop(Move(0), "X")
        self.assertEqual(b, before)

    def test_out_of_range_column(self):
        b = Board()
        for col in (-1, 7):
            with self.assertRaises(InvalidMove):
                b.drop(Move(col), "X")

    def test_is_column_full_rejects_off_board_columns(self):
        b = Board()
        for _ in range(6):
            b.drop(Move(6), "X")
        for col in (-1, 7):
            with self.subTest(col=col):
                with self.assertRaises(AssertionError):
                    b.is_column_full(Move(col))

    def test_undo_removes_top_piece_and_returns_owner(self):
        b = Board()
        b.drop(Move(5), "X")
        b.drop(Move(5), "O")
        self.assertEqual(b.undo(Move(5)), "O")
        self.assertEqual(b.heights[5], 1)
        self.assertIsNone(b.grid[1][5])

    def test_undo_on_empty_column_is_a_contract_violation(self):
        with self.assertRaises(AssertionError):
            Board().undo(Move(2))

    def test_copy_shares_no_storage(self):
        b = Board()
        b.drop(Move(1), "X")
        c = b.copy()
        c.drop(Move(1), "O")
        self.assertEqual(b.heights[1], 1)
        self.assertIsNone(b.grid[1][1])

    def test_heights_are_derived_from_a_given_grid(self):
        b = board_from_rows([
            ".......",
            ".......",
            ".......",
            "...O...",
            "..XX...",
            "X.OO..O",
        ])
        self.assertEqual(b.heights, [1, 0, 2, 3, 0, 0, 1])

    def test_floating_piece_is_rejected(self):
        with self.assertRaises(AssertionError):
            board_from_rows([
                ".......",
                ".......",
                ".......",
                ".......",
                "X......",
                ".......",
            ])

    def test_full_board(self):
        b = Board()
        self.assertFalse(b.is_full())
        for c in range(7):
            for r in range(6):
                b.drop(Move(c), "X" if (r + c) % 2 else "O")
        self.assertTrue(b.is_full())
        self.assertEqual(b.valid_moves(), [])


if __name__ == "__main__":
    unittest.main()
