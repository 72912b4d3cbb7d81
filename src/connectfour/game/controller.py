from __future__ import annotations

from connectfour.core.rules import check_winner_with_line
from connectfour.game.session import GameSession
from connectfour.ui.effects import ai_thinking
from connectfour.ui.prompts import parse_command
from connectfour.ui.render import render


def _header(session: GameSession) -> str:
    if not session.bot_mode:
        return "X: Human | O: Human"
    x_name = session.engine.name if session.bot_player == "X" else "Human"
    o_name = session.engine.name if session.bot_player == "O" else "Human"
    return f"X: {x_name} | O: {o_name} | depth {session.engine.depth}"


def _status(session: GameSession) -> str:
    status = session.state.status_text()
    info = session.engine.last_info
    if session.bot_mode and info:
        status += (
            f"\nBot chose {info.get('move_col')} | "
            f"eval={info.get('eval')} | "
            f"nodes={info.get('nodes')} | "
            f"cut={info.get('cutoffs')} | "
            f"{info.get('time_ms')}ms"
        )
    return f"{_header(session)}\n{status}"


def run_game(session: GameSession) -> None:
    """
    Terminal loop. Keeps running after a win or draw so the game can be
    undone or restarted; only q leaves.
    """
    while True:
        future = session.pending
        if future is not None:
            render(session.state, _status(session))
            ai_thinking(future, session.engine.name)
            future.result()  # surface search bugs instead of hiding them

        w = check_winner_with_line(session.state.board)
        render(session.state, _status(session), highlight=w[1] if w else None)

        raw = input(f"Player {session.state.current} > ")

        try:
            cmd, move = parse_command(raw, session.state.board.cols)
            if cmd == "quit":
                return
            if cmd == "undo":
                session.undo()
            elif cmd == "restart":
                session.restart()
            else:
                session.play(int(move), one_indexed=False)
        except ValueError as e:
            # GameError is a ValueError; the session has already recorded it.
            session.state.last_error = str(e)
