"""Top-level session routing input between the menu and the game."""

from __future__ import annotations

import enum
import logging
import threading

from snake_game.config import SessionConfig
from snake_game.game import SnakeGame
from snake_game.menu import Menu, MenuAction, MenuType, SettingsOption
from snake_game.render import DrawableOn, draw_game, draw_menu
from snake_game.snake import Direction

logger = logging.getLogger(__name__)


class Screen(enum.Enum):
    MENU = "menu"
    GAME = "game"


class GameSession:
    """Owns the active game and menu for one player.

    A frontend constructs one session at startup and feeds it input,
    clock ticks and a drawing surface. Every entry point holds the
    session lock, so input and update calls from different threads never
    interleave. New games start from the latest timestamp the session
    has seen, so a frontend only ever supplies its own clock.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        *,
        now: float | None = None,
    ) -> None:
        self.config = config if config is not None else SessionConfig()
        self.menu = Menu(difficulty=self.config.difficulty)
        self.screen = Screen.MENU
        self.lock = threading.RLock()
        self.last_now = now
        self.game = self._new_game(now)

    def _new_game(self, now: float | None = None) -> SnakeGame:
        if now is not None:
            self.last_now = now
        return SnakeGame(
            self.menu.difficulty,
            growth_per_food=self.config.growth_per_food,
            placement=self.config.initial_placement,
            seed=self.config.seed,
            now=self.last_now,
        )

    def update(self, now: float) -> None:
        with self.lock:
            self.last_now = now
            if self.screen is Screen.GAME:
                self.game.update(now)

    def up_pressed(self) -> None:
        with self.lock:
            if self.screen is Screen.GAME:
                self.game.change_direction(Direction.UP)
            else:
                self.menu.select_previous_option()

    def down_pressed(self) -> None:
        with self.lock:
            if self.screen is Screen.GAME:
                self.game.change_direction(Direction.DOWN)
            else:
                self.menu.select_next_option()

    def left_pressed(self) -> None:
        with self.lock:
            if self.screen is Screen.GAME:
                self.game.change_direction(Direction.LEFT)
            elif self._on_difficulty_setting():
                self.menu.previous_difficulty()

    def right_pressed(self) -> None:
        with self.lock:
            if self.screen is Screen.GAME:
                self.game.change_direction(Direction.RIGHT)
            elif self._on_difficulty_setting():
                self.menu.next_difficulty()

    def enter_or_space_pressed(self, now: float | None = None) -> None:
        """Toggle pause in play, leave a finished game, or confirm a menu entry."""
        with self.lock:
            if self.screen is Screen.GAME:
                if self.game.last_result.is_terminal:
                    logger.info(
                        "Returning to menu after game with score %d.",
                        self.game.score(),
                    )
                    self.screen = Screen.MENU
                    self.game = self._new_game(now)
                else:
                    self.game.toggle_paused()
                return

            if self.menu.enter_or_space_pressed() is MenuAction.NEW_GAME:
                self.game = self._new_game(now)
                self.screen = Screen.GAME
                logger.info(
                    "New %s game on a %dx%d grid.",
                    self.menu.difficulty.value,
                    self.game.width,
                    self.game.height,
                )

    def draw(self, surface: DrawableOn) -> None:
        with self.lock:
            if self.screen is Screen.GAME:
                draw_game(surface, self.game)
            else:
                draw_menu(surface, self.menu)

    def _on_difficulty_setting(self) -> bool:
        return (
            self.menu.menu_type is MenuType.SETTINGS
            and self.menu.settings_option is SettingsOption.DIFFICULTY
        )
