from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from connectfour.config import STARTING_PLAYER
from connectfour.core.board import Board
from connectfour.core.rules import outcome_of
from connectfour.errors import EmptyHistory, GameAlreadyOver, GameError, InvalidMove
from connectfour.game.history import MoveHistory
from connectfour.types import Cell, IN_PROGRESS, Move, Outcome, Player, other


@dataclass(slots=True)
class GameState:
    """
    Authoritative game state: board, side to move, outcome and the move
    history that produced them.

    Mutated only through apply_move / undo / restart. A failed call leaves
    everything but `last_error` untouched.
    """

    board: Board = field(default_factory=Board)
    current: Player = STARTING_PLAYER
    outcome: Outcome = IN_PROGRESS
    history: MoveHistory = field(default_factory=MoveHistory)
    last_error: Optional[str] = None

    @classmethod
    def from_moves(cls, moves: Iterable[int]) -> "GameState":
        state = cls()
        for m in moves:
            state.apply_move(Move(int(m)))
        return state

    # ---- Transitions ----

    def apply_move(self, column: int, *, one_indexed: bool = False) -> int:
        c = int(column) - 1 if one_indexed else int(column)
        try:
            if self.outcome != IN_PROGRESS:
                raise GameAlreadyOver("The game is over. Undo or restart to keep playing.")
            if not self.board.in_range(c):
                raise InvalidMove(f"Column must be between 1 and {self.board.cols}.")
            if self.board.is_column_full(Move(c)):
                raise InvalidMove(f"Column {c + 1} is full.")
        except GameError as e:
            self.last_error = str(e)
            raise

        row = self.board.drop(Move(c), self.current)
        self.current = other(self.current)
        self.history.push(Move(c))
        self.outcome = outcome_of(self.board)
        self.last_error = None
        return row

    def undo(self) -> Move:
        if not self.history:
            self.last_error = "Nothing to undo."
            raise EmptyHistory(self.last_error)

        col = self.history.pop()
        self.current = self.board.undo(col)
        self.outcome = IN_PROGRESS
        self.last_error = None
        return col

    def restart(self) -> None:
        self.board = Board()
        self.history = MoveHistory()
        self.current = STARTING_PLAYER
        self.outcome = IN_PROGRESS
        self.last_error = None

    def clone(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            current=self.current,
            outcome=self.outcome,
            history=self.history.copy(),
            last_error=self.last_error,
        )

    # ---- Queries ----

    def is_column_full(self, column: int) -> bool:
        c = int(column)
        if not self.board.in_range(c):
            raise InvalidMove(f"Column must be between 1 and {self.board.cols}.")
        return self.board.is_column_full(Move(c))

    def legal_moves(self) -> List[Move]:
        if self.outcome != IN_PROGRESS:
            return []
        return self.board.valid_moves()

    @property
    def is_over(self) -> bool:
        return self.outcome != IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if self.outcome == "x_wins":
            return "X"
        if self.outcome == "o_wins":
            return "O"
        return None

    @property
    def grid(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.board.grid)

    @property
    def moves(self) -> Tuple[Move, ...]:
        return self.history.as_tuple()

    def status_text(self) -> str:
        w = self.winner
        if w is not None:
            return f"Player {w} wins!"
        if self.outcome == "draw":
            return "It's a tie!"
        return f"Player {self.current}'s turn."
