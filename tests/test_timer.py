"""Tests for the asyncio-backed timer."""

from __future__ import annotations

import asyncio

import pytest

from snake_sim.timer import AsyncioTimer


class TestAsyncioTimer:
    @pytest.mark.asyncio
    async def test_fires_once(self):
        timer = AsyncioTimer()
        fired: list[int] = []
        timer.arm(10, lambda: fired.append(1))
        assert timer.armed
        await asyncio.sleep(0.05)
        assert fired == [1]
        assert not timer.armed

    @pytest.mark.asyncio
    async def test_cancel(self):
        timer = AsyncioTimer()
        fired: list[int] = []
        timer.arm(10, lambda: fired.append(1))
        timer.cancel()
        await asyncio.sleep(0.05)
        assert fired == []

    @pytest.mark.asyncio
    async def test_rearm_replaces_pending(self):
        timer = AsyncioTimer()
        fired: list[str] = []
        timer.arm(10, lambda: fired.append("first"))
        timer.arm(10, lambda: fired.append("second"))
        await asyncio.sleep(0.05)
        assert fired == ["second"]

    def test_requires_loop(self):
        with pytest.raises(RuntimeError):
            AsyncioTimer().arm(10, lambda: None)
