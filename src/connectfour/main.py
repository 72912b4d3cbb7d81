from __future__ import annotations

import argparse
import logging

from connectfour.config import SEARCH_DEPTH, STARTING_PLAYER
from connectfour.game.controller import run_game
from connectfour.game.session import GameSession
from connectfour.types import other
from connectfour.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour", description="Play Connect 4 in the terminal.")
    ap.add_argument("--mode", choices=["menu", "pvp", "bot"], default="menu", help="Skip the menu and start a game directly.")
    ap.add_argument("--depth", type=int, default=SEARCH_DEPTH, help="Search depth in plies for the computer player.")
    ap.add_argument("--bot-first", action="store_true", help="In bot mode, let the computer make the first move.")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...).")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.depth < 1:
        print("--depth must be at least 1.")
        return 2

    try:
        if args.mode == "menu":
            run_menu(args.depth)
            return 0

        bot_player = STARTING_PLAYER if args.bot_first else other(STARTING_PLAYER)
        with GameSession(bot_mode=args.mode == "bot", bot_player=bot_player, depth=args.depth) as session:
            if session.bot_to_move:
                session.request_bot_move()
            run_game(session)
    except (KeyboardInterrupt, EOFError):
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
