from __future__ import annotations
from typing import Optional, Iterable, Tuple, Set

from connectfour.config import CLEAR_SCREEN
from connectfour.game.state import GameState
from connectfour.types import Cell
from connectfour.ui.colors import c, player_color, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, REVERSE, RESET

Coord = Tuple[int, int]


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    return c(cell, player_color(cell))


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(state: GameState, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    board = state.board
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]

    # Row 0 is the bottom, so print top-down.
    for r in range(board.rows - 1, -1, -1):
        parts = []
        for cidx in range(board.cols):
            p = _piece(board.grid[r][cidx])
            if (r, cidx) in hl:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")

    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(state: GameState, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(state, highlight):
        print(line)

    if state.last_error:
        print(c(f"   Oops! {state.last_error}", FG_RED))
    else:
        print()
    print(c("   1-7 drop · u undo · r restart · q quit", DIM))
