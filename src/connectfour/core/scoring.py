from __future__ import annotations

from connectfour.config import WINDOW_WEIGHTS
from connectfour.core.board import Board
from connectfour.core.windows import WINDOWS
from connectfour.types import Player, other


def evaluate(board: Board, player: Player) -> int:
    """
    Static score of a position from `player`'s point of view.

    Every width-4 window (rows, columns and both diagonals) contributes:
    a window holding both colours is blocked and scores 0; otherwise 3 or
    2 pieces of one colour score the weight from WINDOW_WEIGHTS, positive
    for `player` and negative for the opponent.
    """
    g = board.grid
    opp = other(player)
    score = 0

    for window in WINDOWS:
        mine = theirs = 0
        for r, c in window:
            v = g[r][c]
            if v == player:
                mine += 1
            elif v == opp:
                theirs += 1

        if mine and theirs:
            continue
        if mine:
            score += WINDOW_WEIGHTS.get(mine, 0)
        elif theirs:
            score -= WINDOW_WEIGHTS.get(theirs, 0)

    return score
