"""Shared fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest


class ManualTimer:
    """Timer double that fires only when a test calls :meth:`fire`.

    Arming while a callback is still pending is treated as a bug in the
    caller: two timers would be live at once.
    """

    def __init__(self) -> None:
        self.period_ms: int | None = None
        self.callback: Callable[[], None] | None = None
        self.arm_count = 0
        self.cancel_count = 0

    @property
    def armed(self) -> bool:
        return self.callback is not None

    def arm(self, period_ms: int, on_fire: Callable[[], None]) -> None:
        assert self.callback is None, "timer armed twice without cancel"
        self.period_ms = period_ms
        self.callback = on_fire
        self.arm_count += 1

    def cancel(self) -> None:
        self.callback = None
        self.cancel_count += 1

    def fire(self) -> None:
        callback = self.callback
        assert callback is not None, "fired an unarmed timer"
        self.callback = None
        callback()


@pytest.fixture()
def manual_timer() -> ManualTimer:
    return ManualTimer()
