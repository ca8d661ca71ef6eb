"""Game session controller: play/pause/reset, timer loop, and high score."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable

from snake_sim.config import GameConfig
from snake_sim.controls import ControlAction, direction_for_swipe, key_action
from snake_sim.engine import GamePhase, GameState, TickEngine
from snake_sim.errors import SnakeEngineError
from snake_sim.persistence import HighScoreStore, MemoryHighScoreStore
from snake_sim.timer import AsyncioTimer, Timer

logger = logging.getLogger(__name__)

RenderSink = Callable[[GameState], None]


class GameSession:
    """Drives a :class:`TickEngine` from a timer and fans out snapshots.

    All public operations are safe to call at any time from the thread that
    owns the timer's event loop; they are serialized by a re-entrant lock so
    a direction change never interleaves with a tick. None of them raise for
    gameplay events or malformed input.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        timer: Timer | None = None,
        store: HighScoreStore | None = None,
    ) -> None:
        self.engine = TickEngine(config)
        self.timer: Timer = timer if timer is not None else AsyncioTimer()
        self.store: HighScoreStore = store if store is not None else MemoryHighScoreStore()
        self.high_score = self._read_high_score()
        self._sinks: list[RenderSink] = []
        self._close_listeners: list[Callable[[], None]] = []
        self._closed = False
        self._lock = threading.RLock()

    @property
    def config(self) -> GameConfig:
        return self.engine.config

    @property
    def state(self) -> GameState:
        return self.engine.state

    @property
    def phase(self) -> GamePhase:
        return self.engine.phase

    # --- render sinks ---

    def subscribe(self, sink: RenderSink) -> Callable[[], None]:
        """Register *sink* for state snapshots. Returns an unsubscribe callable."""
        with self._lock:
            self._sinks.append(sink)

        def unsubscribe() -> None:
            with self._lock:
                if sink in self._sinks:
                    self._sinks.remove(sink)

        return unsubscribe

    def _emit(self, state: GameState) -> None:
        for sink in list(self._sinks):
            try:
                sink(state)
            except Exception:
                logger.warning("Render sink %r failed.", sink, exc_info=True)

    # --- control operations ---

    def start(self) -> bool:
        with self._lock:
            if not self.engine.start():
                return False
            try:
                self._arm()
            except RuntimeError:
                logger.warning("Could not arm tick timer; staying paused.", exc_info=True)
                self.engine.pause()
                return False
            self._emit(self.state)
            return True

    def pause(self) -> bool:
        with self._lock:
            if not self.engine.pause():
                return False
            self.timer.cancel()
            self._emit(self.state)
            return True

    def toggle(self) -> bool:
        """Flip between running and paused. A finished game stays finished."""
        with self._lock:
            if self.phase is GamePhase.RUNNING:
                return self.pause()
            return self.start()

    def reset(self) -> GameState:
        with self._lock:
            self.timer.cancel()
            state = self.engine.reset()
            logger.debug("Session reset.")
            self._emit(state)
            return state

    def submit_direction(self, candidate: object) -> bool:
        with self._lock:
            return self.engine.submit_direction(candidate)

    def submit_key(self, key: object) -> bool:
        """Apply a key press. Returns True if it changed anything."""
        action = key_action(key)
        if action is None:
            return False
        if action is ControlAction.TOGGLE:
            return self.toggle()
        return self.submit_direction(action)

    def submit_swipe(self, dx: float, dy: float) -> bool:
        direction = direction_for_swipe(dx, dy)
        if direction is None:
            return False
        return self.submit_direction(direction)

    @property
    def closed(self) -> bool:
        return self._closed

    def on_close(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call *callback* once when the session is closed. Returns a remover."""
        with self._lock:
            self._close_listeners.append(callback)

        def remove() -> None:
            with self._lock:
                if callback in self._close_listeners:
                    self._close_listeners.remove(callback)

        return remove

    def close(self) -> None:
        """Stop the timer, notify close listeners, and drop all sinks."""
        with self._lock:
            self.timer.cancel()
            self._sinks.clear()
            if self._closed:
                return
            self._closed = True
            listeners, self._close_listeners = self._close_listeners, []
            for callback in listeners:
                try:
                    callback()
                except Exception:
                    logger.warning("Close listener %r failed.", callback, exc_info=True)

    # --- timer loop ---

    def _arm(self) -> None:
        self.timer.cancel()
        self.timer.arm(self.state.tick_interval_ms, self._on_timer)

    def _on_timer(self) -> None:
        with self._lock:
            if self.phase is not GamePhase.RUNNING:
                return
            try:
                state = self.engine.tick()
            except SnakeEngineError:
                logger.exception("Engine failure; ending game.")
                state = self.engine.state
            if state.is_game_over:
                self._handle_game_over(state)
            else:
                self._arm()
            self._emit(state)

    # --- high score ---

    def _handle_game_over(self, state: GameState) -> None:
        logger.info("Game over with score %d.", state.score)
        if state.score <= self.high_score:
            return
        self.high_score = state.score
        logger.info("New high score: %d.", state.score)
        self._persist_high_score(state.score)

    def _persist_high_score(self, value: int) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        if loop is None:
            self._write_high_score(value)
        else:
            loop.run_in_executor(None, self._write_high_score, value)

    def _read_high_score(self) -> int:
        try:
            return int(self.store.read_high_score())
        except Exception:
            logger.warning("Failed reading high score; assuming 0.", exc_info=True)
            return 0

    def _write_high_score(self, value: int) -> None:
        try:
            self.store.write_high_score(value)
        except Exception:
            logger.warning("Failed persisting high score %d.", value, exc_info=True)
