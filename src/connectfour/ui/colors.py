from __future__ import annotations
from connectfour.config import USE_COLOR
from connectfour.types import Player

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # winning line highlight

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

# X plays red, O plays yellow
PLAYER_COLORS = {"X": FG_RED, "O": FG_YELLOW}


def c(s: str, code: str) -> str:
    if not USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def player_color(player: Player) -> str:
    return PLAYER_COLORS[player]
