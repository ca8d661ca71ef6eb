"""Tick-based simulation engine composing grid, direction, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace

import numpy as np

from snake_sim.config import GameConfig
from snake_sim.direction import Direction, TurnMode, parse_direction, propose_direction
from snake_sim.errors import FoodPlacementError
from snake_sim.food import FoodSpawner
from snake_sim.grid import Grid, Position

logger = logging.getLogger(__name__)


class GamePhase(str, enum.Enum):
    """Lifecycle phases of a single game."""

    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of one game.

    The snake is a tuple of positions, head first. Snapshots are handed to
    render sinks as-is; every transition builds a new one.
    """

    snake: tuple[Position, ...]
    food: Position
    heading: Direction = Direction.RIGHT
    score: int = 0
    is_playing: bool = False
    is_game_over: bool = False
    tick_interval_ms: int = 150

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def phase(self) -> GamePhase:
        if self.is_game_over:
            return GamePhase.OVER
        if self.is_playing:
            return GamePhase.RUNNING
        return GamePhase.IDLE

    def to_dict(self) -> dict:
        """Return the snapshot as a JSON-serializable dict."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food),
            "heading": list(self.heading.value),
            "score": self.score,
            "is_playing": self.is_playing,
            "is_game_over": self.is_game_over,
            "tick_interval_ms": self.tick_interval_ms,
            "phase": self.phase.value,
        }


class TickEngine:
    """Single-snake, tick-based game engine.

    The engine owns the authoritative :class:`GameState` and the pending
    heading. Each call to :meth:`tick` advances a running game by one cell
    and returns the new state. The engine is not thread-safe; callers
    serialize access (see :class:`snake_sim.session.GameSession`).
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.grid = Grid(self.config.grid_size)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.food_spawner = FoodSpawner(
            self.grid, rng=self.rng, max_attempts=self.config.max_placement_attempts,
        )
        self.tick_count = 0
        self._pending_heading: Direction | None = None

        start = Position(*self.config.start)
        first_food = self.config.initial_food
        if first_food is not None and tuple(first_food) != start:
            self._state = self._fresh_state(Position(*first_food))
        else:
            self._state = self._fresh_state()

    def _fresh_state(self, food: Position | None = None) -> GameState:
        snake = (Position(*self.config.start),)
        if food is None:
            food = self.food_spawner.spawn(snake)
        return GameState(
            snake=snake,
            food=food,
            heading=Direction.RIGHT,
            tick_interval_ms=self.config.initial_tick_interval_ms,
        )

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def pending_heading(self) -> Direction | None:
        return self._pending_heading

    # --- control ---

    def start(self) -> bool:
        """Enter the running phase. Returns False if that was not possible."""
        if self.phase is not GamePhase.IDLE:
            return False
        self._state = replace(self._state, is_playing=True)
        return True

    def pause(self) -> bool:
        """Leave the running phase. Returns False if not running."""
        if self.phase is not GamePhase.RUNNING:
            return False
        self._state = replace(self._state, is_playing=False)
        return True

    def reset(self) -> GameState:
        """Discard the current game and start over with fresh food."""
        self._pending_heading = None
        self.tick_count = 0
        self._state = self._fresh_state()
        return self._state

    def submit_direction(self, candidate: object) -> bool:
        """Offer a new heading for the next tick.

        The candidate is checked against the committed heading, not the
        pending one. Returns True if it was accepted as the pending heading.
        """
        direction = parse_direction(candidate)
        if direction is None:
            logger.debug("Ignoring malformed direction %r.", candidate)
            return False
        if self.phase is not GamePhase.RUNNING:
            logger.debug("Ignoring direction %s while %s.", direction.name, self.phase.value)
            return False
        accepted = propose_direction(self._state.heading, direction)
        if accepted is None:
            return False
        if (
            self.config.turn_mode is TurnMode.BUFFERED
            and self._pending_heading is not None
        ):
            return False
        self._pending_heading = accepted
        return True

    # --- simulation ---

    def tick(self) -> GameState:
        """Advance a running game by one cell.

        Returns the state unchanged when the game is not running.
        """
        state = self._state
        if state.phase is not GamePhase.RUNNING:
            return state

        heading = self._pending_heading or state.heading
        self._pending_heading = None
        self.tick_count += 1

        new_head = state.head.moved(heading.dx, heading.dy)

        # --- wall check ---
        if not self.grid.contains(new_head):
            return self._end_game(heading, "wall")

        # --- self check ---
        # The tail has not moved yet, so it still counts as occupied.
        if new_head in state.snake:
            return self._end_game(heading, "self")

        body = (new_head, *state.snake)
        if new_head == state.food:
            grown = replace(
                state,
                snake=body,
                heading=heading,
                score=state.score + self.config.score_reward,
                tick_interval_ms=max(
                    self.config.min_tick_interval_ms,
                    state.tick_interval_ms - self.config.tick_interval_decrement_ms,
                ),
            )
            try:
                food = self.food_spawner.spawn(body)
            except FoodPlacementError:
                self._state = replace(grown, is_playing=False, is_game_over=True)
                raise
            self._state = replace(grown, food=food)
        else:
            self._state = replace(state, snake=body[:-1], heading=heading)
        return self._state

    def _end_game(self, heading: Direction, cause: str) -> GameState:
        """Mark the game over, leaving snake, food, and score as they were."""
        self._state = replace(
            self._state, heading=heading, is_playing=False, is_game_over=True,
        )
        logger.info(
            "Snake hit %s at tick %d with score %d.",
            cause, self.tick_count, self._state.score,
        )
        return self._state
