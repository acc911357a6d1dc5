"""Wall-clock tick scheduler wrapping one simulation engine."""

from __future__ import annotations

import logging

from snake_game.difficulty import Difficulty, DifficultyProfile, profile_for
from snake_game.engine import DEFAULT_GROWTH, GameResult, SnakeLogic
from snake_game.food import InitialPlacement
from snake_game.grid import Cell
from snake_game.snake import Direction

logger = logging.getLogger(__name__)


class SnakeGame:
    """Gates engine steps behind a fixed timestep.

    Timestamps are caller-supplied seconds from a monotonic clock, so the
    scheduler never sleeps or reads the clock itself. Without a starting
    *now* the first call to :meth:`update` only sets the clock.
    Once a step returns a terminal result no further steps run; start a
    new :class:`SnakeGame` to play again.
    """

    def __init__(
        self,
        difficulty: Difficulty | DifficultyProfile = Difficulty.NORMAL,
        *,
        growth_per_food: int = DEFAULT_GROWTH,
        placement: InitialPlacement = InitialPlacement.RANDOM,
        seed: int | None = None,
        now: float | None = None,
    ) -> None:
        profile = (
            difficulty if isinstance(difficulty, DifficultyProfile)
            else profile_for(difficulty)
        )
        self.profile = profile
        self.timestep = profile.timestep
        self.logic = SnakeLogic(
            profile.width,
            profile.height,
            growth_per_food=growth_per_food,
            placement=placement,
            seed=seed,
        )
        self.paused = False
        self.last_tick_time: float | None = now
        self.last_result = GameResult.NO_OP

    @property
    def width(self) -> int:
        return self.logic.width

    @property
    def height(self) -> int:
        return self.logic.height

    @property
    def snake(self) -> tuple[Cell, ...]:
        return self.logic.snake

    @property
    def food(self) -> Cell | None:
        return self.logic.food

    @property
    def direction(self) -> Direction:
        return self.logic.direction

    def change_direction(self, direction: Direction) -> None:
        self.logic.change_direction(direction)

    def set_paused(self, paused: bool) -> None:
        self.paused = paused

    def toggle_paused(self) -> None:
        self.paused = not self.paused

    def is_paused(self) -> bool:
        return self.paused

    def is_over(self) -> bool:
        """True once the snake has collided."""
        return self.last_result.is_over

    def is_won(self) -> bool:
        """True once the snake has filled the grid."""
        return self.last_result is GameResult.WON

    def score(self) -> int:
        """Current snake length."""
        return len(self.logic.snake)

    def update(self, now: float) -> bool:
        """Advance the simulation if a full timestep has elapsed.

        The tick clock is refreshed whenever a timestep elapses, paused or
        not, so resuming waits for the next full timestep. Returns True if
        the engine stepped.
        """
        if self.last_result.is_terminal:
            return False
        if self.last_tick_time is None:
            self.last_tick_time = now
            return False
        if now - self.last_tick_time <= self.timestep:
            return False

        self.last_tick_time = now
        if self.paused:
            return False

        self.last_result = self.logic.next_step()
        if self.last_result.is_terminal:
            logger.info(
                "Game finished (%s) with score %d.",
                self.last_result.value, self.score(),
            )
        return True

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "score": self.score(),
            "paused": self.paused,
            "game_over": self.is_over(),
            "won": self.is_won(),
            "timestep": self.timestep,
            "engine": self.logic.to_dict(),
        }
