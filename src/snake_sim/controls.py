"""Translation of raw keyboard and touch input into game commands."""

from __future__ import annotations

import enum
import math
import numbers

from snake_sim.direction import Direction

SWIPE_THRESHOLD_PX = 30.0


class ControlAction(enum.Enum):
    """Non-directional commands an input source can issue."""

    TOGGLE = "toggle"


KEY_BINDINGS: dict[str, Direction | ControlAction] = {
    "ArrowUp": Direction.UP,
    "w": Direction.UP,
    "W": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "s": Direction.DOWN,
    "S": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "a": Direction.LEFT,
    "A": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "d": Direction.RIGHT,
    "D": Direction.RIGHT,
    " ": ControlAction.TOGGLE,
    "Space": ControlAction.TOGGLE,
}


def key_action(key: object) -> Direction | ControlAction | None:
    """Look up the command bound to a key name, or ``None``."""
    if not isinstance(key, str):
        return None
    return KEY_BINDINGS.get(key)


def _is_finite_real(value: object) -> bool:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def direction_for_swipe(
    dx: float, dy: float, threshold: float = SWIPE_THRESHOLD_PX,
) -> Direction | None:
    """Classify a touch gesture by its dominant axis.

    *dx* and *dy* are the screen-space deltas between touch start and end,
    with ``y`` growing downward. Gestures shorter than *threshold* on both
    axes are taps, not swipes, and yield ``None``. So does anything that
    is not a finite real number.
    """
    if not (_is_finite_real(dx) and _is_finite_real(dy)):
        return None
    if abs(dx) <= threshold and abs(dy) <= threshold:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
