"""Fixed-tick game engine owning the whole snake simulation state."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from serpentine.config import SCORE_PER_FOOD, EngineConfig
from serpentine.food import FoodSpawner
from serpentine.grid import Cell, in_bounds, render_cells
from serpentine.snake import Direction, Snake

logger = logging.getLogger(__name__)

INITIAL_SNAKE: tuple[Cell, ...] = (Cell(10, 10), Cell(9, 10), Cell(8, 10))
INITIAL_DIRECTION = Direction.RIGHT


class GameStatus(str, enum.Enum):
    """Whole-engine lifecycle states."""

    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Mutable simulation state, written only by :class:`GameEngine`.

    ``direction`` is the last direction accepted by
    :meth:`GameEngine.set_direction`; the next tick moves along it.
    """

    snake: Snake
    food: Cell
    direction: Direction
    interval_ms: int
    score: int = 0
    running: bool = True
    game_over: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Immutable read view of a :class:`GameState` for renderers."""

    snake: tuple[Cell, ...]
    food: Cell
    direction: Direction
    interval_ms: int
    score: int
    running: bool
    game_over: bool

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def status(self) -> GameStatus:
        if self.game_over:
            return GameStatus.GAME_OVER
        if not self.running:
            return GameStatus.PAUSED
        return GameStatus.RUNNING

    def to_grid(self) -> np.ndarray:
        """Return the frame as a ``[y, x]`` array of ``CellType`` codes."""
        return render_cells(self.snake, self.food)

    def to_dict(self) -> dict:
        """Serialize to plain, JSON-compatible values."""
        return {
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food),
            "direction": self.direction.name,
            "interval_ms": self.interval_ms,
            "score": self.score,
            "running": self.running,
            "game_over": self.game_over,
            "status": self.status.value,
        }


class GameEngine:
    """Single-snake, fixed-tick game engine.

    The engine exclusively owns its :class:`GameState`. Every operation
    mutates that state in place and returns a fresh :class:`Snapshot`.
    Collisions and rejected commands are represented as state, never
    raised. Calls must be serialized by the caller; the engine holds no
    lock and never blocks.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        rng: np.random.Generator | None = None,
        state: GameState | None = None,
    ) -> None:
        self.config = config if config is not None else EngineConfig()
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )
        self.food_spawner = FoodSpawner(
            self.rng, max_attempts=self.config.max_food_attempts,
        )
        if state is None:
            state = self._initial_state()
        else:
            self._validate(state)
        self._state = state

    def tick(self) -> Snapshot:
        """Advance the simulation by one frame."""
        state = self._state
        if state.game_over or not state.running:
            return self.current_state()

        # Read the direction now so a change accepted since the last
        # tick is honoured.
        new_head = state.snake.next_head(state.direction)

        if not in_bounds(new_head):
            self._end_game("wall", new_head)
            return self.current_state()

        # The tail has not moved yet, so it still counts as body.
        if state.snake.occupies(new_head):
            self._end_game("self", new_head)
            return self.current_state()

        ate = new_head == state.food
        state.snake.advance(new_head, grow=ate)

        if ate:
            state.score += SCORE_PER_FOOD
            state.interval_ms = self.config.next_interval(state.interval_ms)
            state.food = self.food_spawner.spawn(state.snake)
            logger.debug(
                "Food eaten at %s; score=%d interval=%dms next food at %s.",
                new_head, state.score, state.interval_ms, state.food,
            )

        return self.current_state()

    def set_direction(self, direction: Direction) -> Snapshot:
        """Accept *direction* for the next tick unless it reverses the snake."""
        if not isinstance(direction, Direction):
            raise TypeError(f"Expected a Direction, got {direction!r}.")
        state = self._state
        if direction is not state.direction.opposite:
            state.direction = direction
        return self.current_state()

    def toggle_pause(self) -> Snapshot:
        """Flip between running and paused. Ignored once the game is over."""
        state = self._state
        if not state.game_over:
            state.running = not state.running
            logger.info("Game %s.", "resumed" if state.running else "paused")
        return self.current_state()

    def restart(self) -> Snapshot:
        """Replace the whole state with a fresh initial one."""
        previous = self._state.score
        self._state = self._initial_state()
        logger.info("Game restarted (previous score %d).", previous)
        return self.current_state()

    def current_state(self) -> Snapshot:
        """Return a snapshot without mutating anything."""
        state = self._state
        return Snapshot(
            snake=state.snake.cells(),
            food=state.food,
            direction=state.direction,
            interval_ms=state.interval_ms,
            score=state.score,
            running=state.running,
            game_over=state.game_over,
        )

    def _initial_state(self) -> GameState:
        snake = Snake(INITIAL_SNAKE)
        return GameState(
            snake=snake,
            food=self.food_spawner.spawn(snake),
            direction=INITIAL_DIRECTION,
            interval_ms=self.config.initial_interval_ms,
        )

    def _end_game(self, cause: str, head: Cell) -> None:
        """Freeze the state at its last valid values and stop."""
        state = self._state
        state.game_over = True
        state.running = False
        logger.info(
            "Snake hit %s at %s with score %d.",
            "the wall" if cause == "wall" else "itself", head, state.score,
        )

    def _validate(self, state: GameState) -> None:
        """Reject a staged state that breaks the board invariants."""
        cells = state.snake.cells()
        if not all(in_bounds(cell) for cell in cells):
            raise ValueError("Snake cells must lie within the grid.")
        if state.snake.has_overlap():
            raise ValueError("Snake segments must not overlap.")
        if not in_bounds(state.food):
            raise ValueError("Food must lie within the grid.")
        if state.snake.occupies(state.food):
            raise ValueError("Food must not lie on the snake.")
        if state.score < 0 or state.score % SCORE_PER_FOOD:
            raise ValueError(
                f"Score must be a non-negative multiple of {SCORE_PER_FOOD}.",
            )
        if state.interval_ms < self.config.min_interval_ms:
            raise ValueError("interval_ms is below the configured minimum.")
        state.food = Cell(*state.food)
