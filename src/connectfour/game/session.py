from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, wait
import logging
import threading
from typing import Optional

from connectfour.ai.search import SearchEngine
from connectfour.config import BOT_PLAYER, SEARCH_DEPTH
from connectfour.errors import BotThinking, GameOver, SearchCancelled
from connectfour.game.state import GameState
from connectfour.types import Move, Player

logger = logging.getLogger(__name__)


class GameSession:
    """
    One live game plus the flags a front end needs around it.

    The live GameState is only touched while holding the session lock.
    Bot moves are searched on a single background worker against a clone
    and applied back through the same lock once the search finishes, so a
    human move, undo, restart and a bot move never interleave.
    """

    def __init__(
        self,
        *,
        bot_mode: bool = False,
        bot_player: Player = BOT_PLAYER,
        depth: int = SEARCH_DEPTH,
        engine: Optional[SearchEngine] = None,
    ) -> None:
        self.state = GameState()
        self.bot_mode = bot_mode
        self.bot_player: Player = bot_player

        self._cancel = threading.Event()
        self.engine = engine if engine is not None else SearchEngine(depth=depth)
        self.engine.cancel_event = self._cancel

        self._lock = threading.RLock()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="connectfour-search")
        self._pending: Optional[Future] = None
        self._generation = 0

    # ---- Flags ----

    @property
    def thinking(self) -> bool:
        f = self._pending
        return f is not None and not f.done()

    @property
    def pending(self) -> Optional[Future]:
        return self._pending if self.thinking else None

    @property
    def bot_to_move(self) -> bool:
        return self.bot_mode and not self.state.is_over and self.state.current == self.bot_player

    @property
    def last_error(self) -> Optional[str]:
        return self.state.last_error

    # ---- Actions ----

    def play(self, column: int, *, one_indexed: bool = True) -> Optional[Future]:
        """
        Apply a human move. In bot mode the reply search starts right away
        and its future is returned.
        """
        with self._lock:
            self._refuse_while_thinking()
            if self.bot_to_move:
                self.state.last_error = "It's the computer's turn."
                raise BotThinking(self.state.last_error)

            self.state.apply_move(column, one_indexed=one_indexed)
            return self._maybe_start_bot()

    def undo(self) -> Optional[Future]:
        with self._lock:
            self._refuse_while_thinking()
            self.state.undo()
            # Take back the bot's reply too, so the human is to move again.
            if self.bot_to_move and self.state.history:
                self.state.undo()
            return self._maybe_start_bot()

    def restart(self) -> Optional[Future]:
        self.cancel()
        with self._lock:
            self._generation += 1
            self.state.restart()
            logger.info("Game restarted (bot_mode=%s, bot_player=%s).", self.bot_mode, self.bot_player)
            return self._maybe_start_bot()

    def request_bot_move(self) -> Future:
        with self._lock:
            self._refuse_while_thinking()
            if self.state.is_over:
                self.state.last_error = "The game is over."
                raise GameOver(self.state.last_error)
            return self._start_search()

    def cancel(self) -> None:
        pending = self._pending
        if pending is None or pending.done():
            return
        logger.info("Cancelling pending search.")
        self._cancel.set()
        wait([pending])

    def wait(self, timeout: Optional[float] = None) -> Optional[Move]:
        pending = self._pending
        if pending is None:
            return None
        return pending.result(timeout=timeout)

    def close(self) -> None:
        self.cancel()
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "GameSession":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- Internals ----

    def _refuse_while_thinking(self) -> None:
        if self.thinking:
            self.state.last_error = "Wait for the computer to finish its move."
            raise BotThinking(self.state.last_error)

    def _maybe_start_bot(self) -> Optional[Future]:
        if self.bot_to_move:
            return self._start_search()
        return None

    def _start_search(self) -> Future:
        snapshot = self.state.clone()
        self._cancel.clear()
        logger.debug("Starting search for %s at depth %d.", snapshot.current, self.engine.depth)
        self._pending = self._executor.submit(self._think, snapshot, self._generation)
        return self._pending

    def _think(self, snapshot: GameState, generation: int) -> Optional[Move]:
        try:
            move = self.engine.select_move(snapshot)
        except SearchCancelled:
            logger.info("Search cancelled before completion.")
            return None

        with self._lock:
            if generation != self._generation:
                logger.info("Discarding search result from a previous game.")
                return None
            self.state.apply_move(move)
            logger.info("Bot %s played column %d.", snapshot.current, int(move) + 1)
        return move
