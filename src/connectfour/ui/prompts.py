from __future__ import annotations
from typing import Optional, Tuple

from connectfour.errors import InvalidMove
from connectfour.types import Move

# ("drop", col) | ("undo", None) | ("restart", None) | ("quit", None)
Command = Tuple[str, Optional[Move]]


def parse_command(raw: str, cols: int) -> Command:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return "quit", None
    if s in {"u", "undo"}:
        return "undo", None
    if s in {"r", "restart"}:
        return "restart", None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a column number, u, r or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise InvalidMove(f"Column must be between 1 and {cols}.")
    return "drop", Move(col)
