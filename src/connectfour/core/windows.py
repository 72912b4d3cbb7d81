from __future__ import annotations
from typing import List, Tuple

from connectfour.config import ROWS, COLS, CONNECT_N

Coord = Tuple[int, int]  # (row, col), row 0 is the bottom
Window = Tuple[Coord, ...]


def _build(rows: int, cols: int, n: int) -> List[Window]:
    out: List[Window] = []

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            out.append(tuple((r, c + i) for i in range(n)))

    # Vertical
    for r in range(rows - n + 1):
        for c in range(cols):
            out.append(tuple((r + i, c) for i in range(n)))

    # Diagonal up-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            out.append(tuple((r + i, c + i) for i in range(n)))

    # Diagonal down-right
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            out.append(tuple((r - i, c + i) for i in range(n)))

    return out


# 24 horizontal + 21 vertical + 12 + 12 diagonal = 69 windows on 6x7
WINDOWS: Tuple[Window, ...] = tuple(_build(ROWS, COLS, CONNECT_N))
