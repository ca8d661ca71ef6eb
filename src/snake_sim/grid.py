"""Grid geometry for the snake simulation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

GRID_SIZE = 20


class Position(NamedTuple):
    """Immutable grid coordinate. ``x`` grows rightward, ``y`` downward."""

    x: int
    y: int

    def moved(self, dx: int, dy: int) -> Position:
        """Return the position offset by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)


class Grid:
    """Square coordinate space of ``size`` × ``size`` cells.

    The grid holds no game state of its own; occupancy is always passed in.
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def contains(self, pos: tuple[int, int]) -> bool:
        """Check whether a coordinate lies within the grid."""
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def occupancy_mask(self, occupied: Iterable[tuple[int, int]]) -> np.ndarray:
        """Return a boolean ``(size, size)`` array, True where occupied.

        Indexed ``mask[y, x]``. Out-of-grid positions are ignored.
        """
        mask = np.zeros((self.size, self.size), dtype=bool)
        for x, y in occupied:
            if self.contains((x, y)):
                mask[y, x] = True
        return mask

    def free_cells(self, occupied: Iterable[tuple[int, int]]) -> list[Position]:
        """Return every cell not in *occupied*, in row-major order."""
        ys, xs = np.nonzero(~self.occupancy_mask(occupied))
        return [Position(x, y) for y, x in zip(ys.tolist(), xs.tolist(), strict=True)]
