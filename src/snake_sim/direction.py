"""Headings and the reversal-preventing direction filter."""

from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))


class TurnMode(enum.Enum):
    """How direction changes submitted within one tick are combined."""

    LAST_WRITE = "last_write"
    BUFFERED = "buffered"


def propose_direction(current: Direction, candidate: Direction) -> Direction | None:
    """Return *candidate* if it is a legal heading after *current*.

    Perpendicular turns and continuing straight are accepted; a 180°
    reversal returns ``None``.
    """
    if candidate is current.opposite:
        return None
    return candidate


def parse_direction(value: object) -> Direction | None:
    """Coerce untrusted input into a :class:`Direction`.

    Accepts a ``Direction``, a case-insensitive name such as ``"up"``, or a
    ``(dx, dy)`` unit-vector pair. Anything else yields ``None``.
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction[value.strip().upper()]
        except KeyError:
            logger.debug("Unrecognized direction name %r.", value)
            return None
    if isinstance(value, (tuple, list)) and len(value) == 2:
        dx, dy = value
        # bool is an int subclass; reject it explicitly.
        if not all(type(v) is int for v in (dx, dy)):
            return None
        try:
            return Direction((dx, dy))
        except ValueError:
            logger.debug("Direction vector %r is not a unit vector.", value)
            return None
    return None
