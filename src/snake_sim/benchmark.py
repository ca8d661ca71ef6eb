"""Headless simulation throughput benchmark."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from snake_sim.config import GameConfig
from snake_sim.direction import Direction
from snake_sim.engine import GamePhase, TickEngine

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_ticks: int
    best_score: int
    wall_time_seconds: float
    games_per_second: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.ticks_per_second:.1f} ticks/s | "
            f"best score {self.best_score}"
        )


def benchmark_throughput(
    *,
    num_games: int = 100,
    grid_size: int = 20,
    max_ticks: int = 1_000,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw tick throughput with a random-input player.

    Each tick a random direction is submitted; reversals are filtered out
    exactly as for a human player. Games end on collision or after
    *max_ticks* ticks.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    rng = np.random.default_rng(seed)
    config = GameConfig(
        grid_size=grid_size,
        start=(grid_size // 2, grid_size // 2),
        initial_food=None,
    )

    total_ticks = 0
    best_score = 0
    start = time.perf_counter()

    for _ in range(num_games):
        engine = TickEngine(config, rng=np.random.default_rng(int(rng.integers(2**31))))
        engine.start()
        while engine.phase is GamePhase.RUNNING and engine.tick_count < max_ticks:
            engine.submit_direction(_DIRECTIONS[int(rng.integers(4))])
            engine.tick()
        total_ticks += engine.tick_count
        best_score = max(best_score, engine.state.score)

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_ticks=total_ticks,
        best_score=best_score,
        wall_time_seconds=elapsed,
        games_per_second=num_games / elapsed if elapsed > 0 else 0.0,
        ticks_per_second=total_ticks / elapsed if elapsed > 0 else 0.0,
    )
    logger.info(result.summary())
    return result
