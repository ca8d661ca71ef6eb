"""Food placement on free grid cells."""

from __future__ import annotations

import logging
from collections.abc import Collection

import numpy as np

from snake_sim.errors import FoodPlacementError
from snake_sim.grid import Grid, Position

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1_000


def place_food(
    occupied: Collection[tuple[int, int]],
    grid: Grid,
    rng: np.random.Generator,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Position:
    """Pick a uniformly random cell of *grid* not in *occupied*.

    Rejection sampling is used while at most half the grid is occupied.
    Past that point, or once *max_attempts* draws have all landed on the
    snake, the cell is drawn directly from the free set instead.

    Raises :class:`FoodPlacementError` when the grid is full.
    """
    taken = {(int(x), int(y)) for x, y in occupied}
    if len(taken) >= grid.cell_count:
        raise FoodPlacementError(
            f"No free cell left on a {grid.size}x{grid.size} grid."
        )

    if len(taken) * 2 <= grid.cell_count:
        for _ in range(max_attempts):
            x, y = rng.integers(0, grid.size, size=2).tolist()
            if (x, y) not in taken:
                return Position(x, y)
        logger.debug(
            "Rejection sampling exhausted %d attempts; sampling free set.",
            max_attempts,
        )

    free = grid.free_cells(taken)
    if not free:
        raise FoodPlacementError(
            f"No free cell left on a {grid.size}x{grid.size} grid."
        )
    return free[int(rng.integers(len(free)))]


class FoodSpawner:
    """Places food for one session using a seeded NumPy RNG."""

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(self, occupied: Collection[tuple[int, int]]) -> Position:
        """Return a new food position avoiding *occupied*."""
        return place_food(occupied, self.grid, self.rng, self.max_attempts)
