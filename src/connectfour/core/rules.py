from __future__ import annotations
from typing import Optional, List, Tuple

from connectfour.core.board import Board
from connectfour.core.windows import WINDOWS, Coord
from connectfour.types import Outcome, Player, DRAW, IN_PROGRESS, win_outcome


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    g = board.grid

    # Every window in all four orientations; order only affects which line
    # is reported when several exist, never whether a win is found.
    for window in WINDOWS:
        (r0, c0), (r1, c1), (r2, c2), (r3, c3) = window
        p = g[r0][c0]
        if p and p == g[r1][c1] == g[r2][c2] == g[r3][c3]:
            return p, list(window)

    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None


def outcome_of(board: Board) -> Outcome:
    w = check_winner(board)
    if w is not None:
        return win_outcome(w)
    if board.is_full():
        return DRAW
    return IN_PROGRESS
