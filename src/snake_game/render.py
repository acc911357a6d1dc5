"""Drawing capability and draw routines for any frontend."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from snake_game.game import SnakeGame
    from snake_game.grid import Cell
    from snake_game.menu import Menu

RGB = tuple[int, int, int]

SNAKE_COLOR: RGB = (0, 255, 0)
FOOD_COLOR: RGB = (255, 0, 0)
TEXT_COLOR: RGB = (255, 255, 255)
GAME_OVER_COLOR: RGB = (255, 0, 0)
SELECTED_COLOR: RGB = (255, 255, 0)

STATUS_TEXT_SIZE = 25.0
MENU_TEXT_SIZE = 50.0
MENU_TEXT_GAP = 65


class DrawableOn(Protocol):
    """A surface that can draw filled rectangles and text, in pixels."""

    def width(self) -> int: ...

    def height(self) -> int: ...

    def fill_rectangle(
        self, size: tuple[int, int], color: RGB, top_left: tuple[int, int],
    ) -> None: ...

    def draw_text(
        self, text: str, color: RGB, x: int, y: int, size: float,
    ) -> None: ...


def draw_cell(
    surface: DrawableOn,
    color: RGB,
    cell: Cell,
    grid_size: tuple[int, int],
) -> None:
    """Fill one grid cell, scaled to the surface by integer division."""
    cell_w = surface.width() // grid_size[0]
    cell_h = surface.height() // grid_size[1]
    x, y = cell
    surface.fill_rectangle((cell_w, cell_h), color, (x * cell_w, y * cell_h))


def draw_game(surface: DrawableOn, game: SnakeGame) -> None:
    """Draw the snake, the food and the status text of a running game."""
    grid_size = (game.width, game.height)
    for cell in game.snake:
        draw_cell(surface, SNAKE_COLOR, cell, grid_size)
    if game.food is not None and not game.is_won():
        draw_cell(surface, FOOD_COLOR, game.food, grid_size)

    center_x = surface.width() // 2
    center_y = surface.height() // 2
    surface.draw_text(
        f"Your score: {game.score()}",
        TEXT_COLOR,
        center_x,
        surface.height() - int(STATUS_TEXT_SIZE),
        STATUS_TEXT_SIZE,
    )
    if game.is_over():
        surface.draw_text(
            "Game Over. Press space to start a new game. "
            f"Your score: {game.score()}",
            GAME_OVER_COLOR, center_x, center_y, STATUS_TEXT_SIZE,
        )
    elif game.is_won():
        surface.draw_text(
            f"You Win! Great job! Your score: {game.score()}",
            TEXT_COLOR, center_x, center_y, STATUS_TEXT_SIZE,
        )
    elif game.is_paused():
        surface.draw_text(
            "Paused", TEXT_COLOR, center_x, center_y, STATUS_TEXT_SIZE,
        )


def draw_menu(surface: DrawableOn, menu: Menu) -> None:
    """Draw the active menu with the selected entry highlighted."""
    center_x = surface.width() // 2
    center_y = surface.height() // 2
    for i, label in enumerate(menu.labels()):
        color = SELECTED_COLOR if i == menu.selected_index else TEXT_COLOR
        surface.draw_text(
            label, color, center_x, center_y + i * MENU_TEXT_GAP, MENU_TEXT_SIZE,
        )


H = TypeVar("H")


class HandleArena(Generic[H]):
    """Slot-indexed pool of reusable draw handles.

    Retained-mode frontends spawn one visual object per snake cell; the
    arena keeps them alive across frames and only creates new ones when
    the snake outgrows the pool. Slots past the requested count are
    passed to *hide* instead of being destroyed.
    """

    def __init__(
        self,
        factory: Callable[[int], H],
        hide: Callable[[H], None] | None = None,
    ) -> None:
        self._factory = factory
        self._hide = hide
        self._slots: list[H] = []
        self._active = 0

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def active(self) -> int:
        return self._active

    def __getitem__(self, slot: int) -> H:
        if not 0 <= slot < self._active:
            raise IndexError(f"Slot {slot} is not active.")
        return self._slots[slot]

    def sync(self, count: int) -> list[H]:
        """Make exactly *count* slots active and return their handles."""
        if count < 0:
            raise ValueError("count must be non-negative.")
        while len(self._slots) < count:
            self._slots.append(self._factory(len(self._slots)))
        if self._hide is not None:
            for handle in self._slots[count:self._active]:
                self._hide(handle)
        self._active = count
        return self._slots[:count]
