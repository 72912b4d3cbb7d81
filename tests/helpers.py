from __future__ import annotations

from typing import List, Sequence

from connectfour.core.board import Board
from connectfour.types import Cell


def grid_from_rows(rows_top_down: Sequence[str]) -> List[List[Cell]]:
    """
    Build a grid from a picture of the board, top row first.
    '.' is empty, 'X' and 'O' are pieces.
    """
    assert len(rows_top_down) == 6
    grid: List[List[Cell]] = []
    for line in reversed(rows_top_down):
        assert len(line) == 7, line
        grid.append([None if ch == "." else ch for ch in line])
    return grid


def board_from_rows(rows_top_down: Sequence[str]) -> Board:
    return Board(grid=grid_from_rows(rows_top_down))


# Full board, no four-in-a-row anywhere.
DRAW_ROWS = [
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
]

# Same picture with the last column left open.
ONE_COLUMN_LEFT_ROWS = [row[:6] + "." for row in DRAW_ROWS]
