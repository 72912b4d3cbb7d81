from __future__ import annotations

from connectfour.config import STARTING_PLAYER
from connectfour.game.controller import run_game
from connectfour.game.session import GameSession
from connectfour.types import other


def choose_mode() -> tuple[bool, bool]:
    """Return (bot_mode, bot_first)."""
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs Computer (you move first)")
    print("3) Computer vs Human (computer moves first)")

    choice = input("Choice: ").strip()

    if choice == "2":
        return True, False
    if choice == "3":
        return True, True
    if choice != "1":
        print("\nInvalid choice. Defaulting to Human vs Human.\n")
    return False, False


def run_menu(depth: int) -> None:
    bot_mode, bot_first = choose_mode()
    bot_player = STARTING_PLAYER if bot_first else other(STARTING_PLAYER)

    with GameSession(bot_mode=bot_mode, bot_player=bot_player, depth=depth) as session:
        if session.bot_to_move:
            session.request_bot_move()
        run_game(session)
