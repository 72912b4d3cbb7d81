from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import threading
import time
from typing import List, Optional, Tuple

from connectfour.config import COLS, SEARCH_DEPTH, SEARCH_ORDER, WIN_SCORE
from connectfour.core.scoring import evaluate
from connectfour.errors import BoardFull, GameError, GameOver, SearchCancelled, contract
from connectfour.game.state import GameState
from connectfour.types import DRAW, Move, Player, other

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _SearchContext:
    # Owned by one select_move/minimax call; never shared between threads.
    me: Player
    nodes: int = 0
    cutoffs: int = 0


@dataclass(slots=True)
class SearchEngine:
    """
    Fixed-depth minimax with alpha-beta pruning.

    Every hypothetical ply is played on a clone, so the state handed to
    select_move is never mutated. Scores are from the point of view of the
    side to move when select_move was called. Per-search bookkeeping lives
    in a context local to the call, so one engine may serve several threads;
    `last_info` holds the stats of whichever search finished last.
    """

    name: str = "Minimax AI"
    depth: int = SEARCH_DEPTH
    order: Tuple[int, ...] = SEARCH_ORDER
    prune: bool = True
    cancel_event: Optional[threading.Event] = None

    # Stats
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError("Search depth must be at least 1.")
        contract(sorted(self.order) == list(range(COLS)), f"Bad search order: {self.order}")

    def select_move(self, state: GameState) -> Move:
        if state.is_over:
            raise GameOver("No move to propose: the game is over.")

        moves = self._ordered_moves(state)
        if not moves:
            raise BoardFull("No column is playable.")

        ctx = _SearchContext(me=state.current)
        start = time.perf_counter()

        best_move = moves[0]
        best_score: float = -inf

        if len(moves) > 1:
            alpha = -inf
            for m in moves:
                score = self._minimax(ctx, self._child(state, m), self.depth - 1, alpha, inf, False)
                # Strict: ties keep the earlier column in search order.
                if score > best_score:
                    best_score = score
                    best_move = m
                if self.prune:
                    alpha = max(alpha, best_score)

        elapsed = time.perf_counter() - start
        info = {
            "depth": self.depth,
            "nodes": ctx.nodes,
            "cutoffs": ctx.cutoffs,
            "eval": int(best_score) if best_score not in (inf, -inf) else None,
            "move_col": int(best_move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        self.last_info = info
        logger.debug("%s (%s) -> %s", self.name, ctx.me, info)

        return best_move

    def minimax(
        self,
        state: GameState,
        depth: int,
        alpha: float = -inf,
        beta: float = inf,
        maximizing: bool = True,
    ) -> float:
        # Perspective: the maximizing side.
        ctx = _SearchContext(me=state.current if maximizing else other(state.current))
        return self._minimax(ctx, state, depth, alpha, beta, maximizing)

    def _minimax(self, ctx: _SearchContext, state: GameState, depth: int, alpha: float, beta: float, maximizing: bool) -> float:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise SearchCancelled("Search cancelled.")

        ctx.nodes += 1

        if depth == 0 or state.is_over:
            return self._leaf_score(ctx.me, state, depth)

        if maximizing:
            v = -inf
            for m in self._ordered_moves(state):
                v = max(v, self._minimax(ctx, self._child(state, m), depth - 1, alpha, beta, False))
                alpha = max(alpha, v)
                if self.prune and beta <= alpha:
                    ctx.cutoffs += 1
                    break
            return v

        v = inf
        for m in self._ordered_moves(state):
            v = min(v, self._minimax(ctx, self._child(state, m), depth - 1, alpha, beta, True))
            beta = min(beta, v)
            if self.prune and beta <= alpha:
                ctx.cutoffs += 1
                break
        return v

    def _leaf_score(self, me: Player, state: GameState, depth: int) -> int:
        w = state.winner
        if w == me:
            return WIN_SCORE + depth  # faster wins score higher
        if w is not None:
            return -WIN_SCORE - depth  # slower losses score higher
        if state.outcome == DRAW:
            return 0
        return evaluate(state.board, me)

    def _ordered_moves(self, state: GameState) -> List[Move]:
        return [Move(c) for c in self.order if not state.is_column_full(c)]

    def _child(self, state: GameState, move: Move) -> GameState:
        child = state.clone()
        try:
            child.apply_move(move)
        except GameError as e:
            raise AssertionError(f"Search tried an unplayable column {int(move) + 1}: {e}") from e
        return child
