# src/connectfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from connectfour.config import ROWS, COLS
from connectfour.errors import InvalidMove, contract
from connectfour.types import Cell, Player, Move


@dataclass(slots=True)
class Board:
    """
    Fixed 6x7 grid, grid[row][col] with row 0 at the bottom.
    heights[col] is the number of pieces in that column, so the next
    piece in a column always lands at row heights[col].
    """

    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)
    heights: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
        contract(
            len(self.grid) == self.rows and all(len(row) == self.cols for row in self.grid),
            f"Board grid must be {self.rows}x{self.cols}.",
        )
        # If a board is created with an existing grid, derive heights once.
        self.heights = [self._column_height(c) for c in range(self.cols)]

    def _column_height(self, c: int) -> int:
        h = 0
        for r in range(self.rows):
            if self.grid[r][c] is None:
                break
            h += 1
        # Gravity: nothing may float above an empty cell.
        contract(
            all(self.grid[r][c] is None for r in range(h, self.rows)),
            f"Floating piece in column {c}.",
        )
        return h

    def copy(self) -> "Board":
        b = Board.__new__(Board)
        b.rows = self.rows
        b.cols = self.cols
        b.grid = [row[:] for row in self.grid]
        b.heights = self.heights[:]
        return b

    def in_range(self, col: int) -> bool:
        return 0 <= col < self.cols

    def is_column_full(self, col: Move) -> bool:
        c = int(col)
        contract(self.in_range(c), f"Column index {c} outside 0..{self.cols - 1}.")
        return self.heights[c] >= self.rows

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.heights[c] < self.rows]

    def is_full(self) -> bool:
        return all(h >= self.rows for h in self.heights)

    def piece_count(self) -> int:
        return sum(self.heights)

    def drop(self, col: Move, player: Player) -> int:
        c = int(col)
        if not self.in_range(c):
            raise InvalidMove(f"Column must be between 1 and {self.cols}.")
        if self.heights[c] >= self.rows:
            raise InvalidMove(f"Column {c + 1} is full.")

        r = self.heights[c]
        self.grid[r][c] = player
        self.heights[c] = r + 1
        return r

    def undo(self, col: Move) -> Player:
        """
        Remove the top-most piece from a column and return its owner.
        """
        c = int(col)
        h = self.heights[c]
        contract(h > 0, f"Cannot undo: column {c + 1} is empty.")
        p = self.grid[h - 1][c]
        contract(p is not None, f"Column {c + 1} height out of sync with grid.")
        self.grid[h - 1][c] = None
        self.heights[c] = h - 1
        return p
