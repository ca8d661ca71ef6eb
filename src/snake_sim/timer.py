"""One-shot tick timers."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Protocol


class Timer(Protocol):
    """A single re-armable one-shot timer."""

    def arm(self, period_ms: int, on_fire: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


class AsyncioTimer:
    """Timer backed by ``loop.call_later``.

    Arming always cancels the pending callback first, so at most one is
    scheduled at a time.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None

    @property
    def armed(self) -> bool:
        return self._handle is not None

    def arm(self, period_ms: int, on_fire: Callable[[], None]) -> None:
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(period_ms / 1000.0, self._fire, on_fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, on_fire: Callable[[], None]) -> None:
        self._handle = None
        on_fire()
