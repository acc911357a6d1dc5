"""Main and settings menu state."""

from __future__ import annotations

import enum

from snake_game.difficulty import Difficulty


class MenuType(enum.Enum):
    MAIN = "main"
    SETTINGS = "settings"


class MainOption(enum.Enum):
    NEW_GAME = "New Game"
    SETTINGS = "Settings"


class SettingsOption(enum.Enum):
    DIFFICULTY = "Difficulty"
    BACK = "Back"


class MenuAction(enum.Enum):
    """What the session should do after a confirm press."""

    NO_OP = "no_op"
    NEW_GAME = "new_game"


def _cycle(options: list, current, step: int):
    return options[(options.index(current) + step) % len(options)]


class Menu:
    """Cursor over the main menu or the settings menu.

    Selection wraps around at both ends of the active menu.
    """

    def __init__(self, difficulty: Difficulty = Difficulty.NORMAL) -> None:
        self.menu_type = MenuType.MAIN
        self.main_option = MainOption.NEW_GAME
        self.settings_option = SettingsOption.DIFFICULTY
        self.difficulty = difficulty

    @property
    def selected_index(self) -> int:
        """Position of the highlighted entry in :meth:`labels`."""
        if self.menu_type is MenuType.MAIN:
            return list(MainOption).index(self.main_option)
        return list(SettingsOption).index(self.settings_option)

    def select_next_option(self) -> None:
        self._move(1)

    def select_previous_option(self) -> None:
        self._move(-1)

    def _move(self, step: int) -> None:
        if self.menu_type is MenuType.MAIN:
            self.main_option = _cycle(list(MainOption), self.main_option, step)
        else:
            self.settings_option = _cycle(
                list(SettingsOption), self.settings_option, step,
            )

    def next_difficulty(self) -> None:
        self.difficulty = self.difficulty.next()

    def previous_difficulty(self) -> None:
        self.difficulty = self.difficulty.previous()

    def enter_or_space_pressed(self) -> MenuAction:
        """Confirm the highlighted entry."""
        if self.menu_type is MenuType.MAIN:
            if self.main_option is MainOption.NEW_GAME:
                return MenuAction.NEW_GAME
            self.menu_type = MenuType.SETTINGS
            return MenuAction.NO_OP

        if self.settings_option is SettingsOption.DIFFICULTY:
            self.next_difficulty()
        else:
            self.menu_type = MenuType.MAIN
        return MenuAction.NO_OP

    def labels(self) -> list[str]:
        """Text for every entry of the active menu."""
        if self.menu_type is MenuType.MAIN:
            return [option.value for option in MainOption]
        return [
            f"Difficulty: {self.difficulty.label}"
            if option is SettingsOption.DIFFICULTY else option.value
            for option in SettingsOption
        ]
