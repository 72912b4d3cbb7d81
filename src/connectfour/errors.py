# src/connectfour/errors.py

from __future__ import annotations


class GameError(ValueError):
    """Expected, recoverable usage error. Never leaves state half-mutated."""


class InvalidMove(GameError):
    pass


class GameAlreadyOver(GameError):
    pass


class EmptyHistory(GameError):
    pass


class NoLegalMoves(GameError):
    pass


class GameOver(NoLegalMoves):
    pass


class BoardFull(NoLegalMoves):
    pass


class BotThinking(GameError):
    pass


class SearchCancelled(RuntimeError):
    pass


def contract(cond: bool, msg: str) -> None:
    # Internal bugs are fatal; do not route them through GameError.
    if not cond:
        raise AssertionError(msg)
