# src/connectfour/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Player = Literal["X", "O"]
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..6
Outcome = Literal["in_progress", "x_wins", "o_wins", "draw"]

IN_PROGRESS: Outcome = "in_progress"
DRAW: Outcome = "draw"


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"


def win_outcome(player: Player) -> Outcome:
    return "x_wins" if player == "X" else "o_wins"
