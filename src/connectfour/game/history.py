from __future__ import annotations
from typing import Iterable, Iterator, List, Optional

from connectfour.types import Move


class MoveHistory:
    """Append-only stack of applied columns; popped only by undo."""

    __slots__ = ("_moves",)

    def __init__(self, moves: Iterable[Move] = ()) -> None:
        self._moves: List[Move] = [Move(int(m)) for m in moves]

    def push(self, move: Move) -> None:
        self._moves.append(move)

    def pop(self) -> Move:
        return self._moves.pop()

    def last(self) -> Optional[Move]:
        return self._moves[-1] if self._moves else None

    def clear(self) -> None:
        self._moves.clear()

    def copy(self) -> "MoveHistory":
        h = MoveHistory()
        h._moves = self._moves[:]
        return h

    def as_tuple(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __bool__(self) -> bool:
        return bool(self._moves)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoveHistory):
            return NotImplemented
        return self._moves == other._moves

    def __repr__(self) -> str:
        return f"MoveHistory({[int(m) + 1 for m in self._moves]})"
