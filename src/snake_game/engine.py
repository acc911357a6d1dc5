"""Step-based simulation engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable

import numpy as np

from snake_game.food import FoodSpawner, InitialPlacement
from snake_game.grid import Cell, Grid
from snake_game.snake import Direction, Snake, turn

logger = logging.getLogger(__name__)

DEFAULT_GROWTH = 2


class GameResult(enum.Enum):
    """Outcome of a single engine step."""

    NO_OP = "no_op"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def is_over(self) -> bool:
        """True if the snake hit a wall or itself."""
        return self is GameResult.GAME_OVER

    @property
    def is_terminal(self) -> bool:
        """True if no further steps may be applied."""
        return self is not GameResult.NO_OP


class SnakeLogic:
    """Single-snake, step-based simulation engine.

    The engine owns the grid, the snake body, the food cell, the current
    direction and the direction-change lock. Each call to :meth:`next_step`
    advances the snake by one cell and returns a :class:`GameResult`.
    """

    MIN_WIDTH = 5
    MIN_HEIGHT = 5
    MAX_WIDTH = 150
    MAX_HEIGHT = 150

    def __init__(
        self,
        width: int,
        height: int,
        *,
        growth_per_food: int = DEFAULT_GROWTH,
        placement: InitialPlacement = InitialPlacement.RANDOM,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not self.size_is_valid(width, height):
            raise ValueError(
                f"Grid size must be between {self.MIN_WIDTH}x{self.MIN_HEIGHT} "
                f"and {self.MAX_WIDTH}x{self.MAX_HEIGHT}, got {width}x{height}."
            )
        if growth_per_food < 0:
            raise ValueError("growth_per_food must be non-negative.")

        self.grid = Grid(width=width, height=height)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.growth_per_food = growth_per_food
        self.food_spawner = FoodSpawner(self.grid, rng=self.rng)

        self._snake = Snake([self.food_spawner.initial_cell(placement)])
        self._food: Cell | None = self.food_spawner.spawn(set(self._snake))
        self._direction = Direction.NONE
        self._can_change_direction = True

    @classmethod
    def size_is_valid(cls, width: int, height: int) -> bool:
        return (
            cls.MIN_WIDTH <= width <= cls.MAX_WIDTH
            and cls.MIN_HEIGHT <= height <= cls.MAX_HEIGHT
        )

    @classmethod
    def new(cls, width: int, height: int, **kwargs) -> SnakeLogic | None:
        """Build an engine, or return ``None`` if the size is out of range."""
        if not cls.size_is_valid(width, height):
            return None
        return cls(width, height, **kwargs)

    @classmethod
    def from_state(
        cls,
        width: int,
        height: int,
        snake: Iterable[Cell],
        *,
        food: Cell | None = None,
        direction: Direction = Direction.NONE,
        growth_credit: int = 0,
        growth_per_food: int = DEFAULT_GROWTH,
        seed: int | None = None,
    ) -> SnakeLogic:
        """Build an engine positioned at an explicit state.

        *snake* is listed tail first. When *food* is omitted it is placed
        by the usual random algorithm.
        """
        logic = cls(width, height, growth_per_food=growth_per_food, seed=seed)
        cells = [tuple(cell) for cell in snake]
        outside = [cell for cell in cells if not logic.grid.in_bounds(*cell)]
        if outside:
            raise ValueError(f"Snake cells outside the grid: {outside}.")
        logic._snake = Snake(cells)
        if growth_credit:
            logic._snake.schedule_growth(growth_credit)
        if food is None:
            food = logic.food_spawner.spawn(set(logic._snake))
        elif not logic.grid.in_bounds(*food):
            raise ValueError(f"Food {tuple(food)} is outside the grid.")
        elif logic._snake.occupies(tuple(food)):
            raise ValueError("Food cannot be placed on the snake.")
        logic._food = tuple(food)
        logic._direction = direction
        return logic

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def snake(self) -> tuple[Cell, ...]:
        """Body cells, tail first and head last."""
        return self._snake.cells()

    @property
    def food(self) -> Cell | None:
        """The food cell, or ``None`` once the snake has filled the grid."""
        return self._food

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def growth_credit(self) -> int:
        return self._snake.growth_credit

    @property
    def total_growth_issued(self) -> int:
        return self._snake.total_growth_issued

    @property
    def can_change_direction(self) -> bool:
        return self._can_change_direction

    def is_full(self) -> bool:
        """True once the snake covers every cell of the grid."""
        return len(self._snake) >= self.grid.size

    def change_direction(self, requested: Direction) -> None:
        """Accept at most one quarter turn per step; ignore anything else."""
        if not self._can_change_direction:
            return
        new_direction = turn(self._direction, requested)
        if new_direction is self._direction:
            return
        self._direction = new_direction
        self._can_change_direction = False

    def next_step(self) -> GameResult:
        """Advance the snake by one cell."""
        self._can_change_direction = True

        if self._direction is Direction.NONE:
            return GameResult.NO_OP

        # --- boundary check ---
        new_head = self.grid.neighbor(self._snake.head, self._direction)
        if new_head is None:
            logger.info(
                "Snake hit the wall at %s with length %d.",
                self._snake.head, len(self._snake),
            )
            return GameResult.GAME_OVER

        # --- self-collision check against the pre-move body ---
        if self._snake.occupies(new_head):
            logger.info(
                "Snake ran into itself at %s with length %d.",
                new_head, len(self._snake),
            )
            return GameResult.GAME_OVER

        # --- move ---
        self._snake.advance(new_head)

        if new_head == self._food:
            self._snake.schedule_growth(self.growth_per_food)
            if self.is_full():
                logger.info("Snake filled the %dx%d grid.", self.width, self.height)
                self._food = None
                return GameResult.WON
            self._food = self.food_spawner.spawn(set(self._snake))
            logger.debug("Food eaten; new food at %s.", self._food)

        return GameResult.NO_OP

    def to_dict(self) -> dict:
        """Return the full, serializable engine state."""
        return {
            "grid": self.grid.to_dict(),
            "snake": self._snake.to_dict(),
            "food": list(self._food) if self._food is not None else None,
            "direction": self._direction.name.lower(),
            "can_change_direction": self._can_change_direction,
        }
