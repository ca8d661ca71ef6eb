"""Exception types raised by the simulation engine."""

from __future__ import annotations


class SnakeEngineError(Exception):
    """An unrecoverable engine invariant was violated."""


class FoodPlacementError(SnakeEngineError):
    """No free cell is left to place food on."""
