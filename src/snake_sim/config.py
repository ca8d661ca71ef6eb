"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_sim.direction import TurnMode
from snake_sim.food import DEFAULT_MAX_ATTEMPTS
from snake_sim.grid import GRID_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunable constants for a game session.

    Defaults reproduce the classic game: a 20×20 grid, a single-segment
    snake at the centre, 150 ms ticks speeding up by 2 ms per food down
    to 50 ms, and 10 points per food.
    """

    grid_size: int = GRID_SIZE
    start: tuple[int, int] = (10, 10)
    initial_food: tuple[int, int] | None = (15, 15)

    initial_tick_interval_ms: int = 150
    min_tick_interval_ms: int = 50
    tick_interval_decrement_ms: int = 2
    score_reward: int = 10

    turn_mode: TurnMode = TurnMode.LAST_WRITE
    max_placement_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        for name in ("start", "initial_food"):
            pos = getattr(self, name)
            if pos is None:
                continue
            x, y = pos
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(f"{name} {pos} lies outside the grid.")
        if self.min_tick_interval_ms < 1:
            raise ValueError("min_tick_interval_ms must be at least 1.")
        if self.initial_tick_interval_ms < self.min_tick_interval_ms:
            raise ValueError(
                "initial_tick_interval_ms must not be below min_tick_interval_ms."
            )
        if self.tick_interval_decrement_ms < 0:
            raise ValueError("tick_interval_decrement_ms must be >= 0.")
        if self.score_reward < 0:
            raise ValueError("score_reward must be >= 0.")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be at least 1.")

    def to_dict(self) -> dict:
        """Serialize to a plain, JSON-compatible dict."""
        d = asdict(self)
        d["start"] = list(self.start)
        d["initial_food"] = (
            list(self.initial_food) if self.initial_food is not None else None
        )
        d["turn_mode"] = self.turn_mode.value
        return d

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        data = dict(raw)
        if "start" in data:
            data["start"] = tuple(data["start"])
        if data.get("initial_food") is not None:
            data["initial_food"] = tuple(data["initial_food"])
        if "turn_mode" in data:
            data["turn_mode"] = TurnMode(data["turn_mode"])
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
