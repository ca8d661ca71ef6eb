"""Snake Sim: grid snake simulation engine."""

from snake_sim.config import GameConfig
from snake_sim.direction import Direction, TurnMode, parse_direction, propose_direction
from snake_sim.engine import GamePhase, GameState, TickEngine
from snake_sim.errors import FoodPlacementError, SnakeEngineError
from snake_sim.food import FoodSpawner, place_food
from snake_sim.grid import GRID_SIZE, Grid, Position
from snake_sim.persistence import (
    HighScoreStore,
    JsonFileHighScoreStore,
    MemoryHighScoreStore,
)
from snake_sim.session import GameSession
from snake_sim.timer import AsyncioTimer, Timer

__all__ = [
    "GRID_SIZE",
    "AsyncioTimer",
    "Direction",
    "FoodPlacementError",
    "FoodSpawner",
    "GameConfig",
    "GamePhase",
    "GameSession",
    "GameState",
    "Grid",
    "HighScoreStore",
    "JsonFileHighScoreStore",
    "MemoryHighScoreStore",
    "Position",
    "SnakeEngineError",
    "TickEngine",
    "Timer",
    "TurnMode",
    "parse_direction",
    "place_food",
    "propose_direction",
]
