"""Grid coordinate model for the snake game."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_game.snake import Direction

Cell = tuple[int, int]


class Grid:
    """Bounded ``width × height`` cell space.

    Coordinates use ``(x, y)`` ordering with ``y`` growing downward.
    Cells map to flat indices column by column (``x * height + y``).
    Occupancy arrays are ``(height, width)`` so they index like NumPy images.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive.")
        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def to_index(self, x: int, y: int) -> int | None:
        """Return the flat index of a cell, or ``None`` if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return x * self.height + y

    def from_index(self, index: int) -> Cell:
        """Inverse of :meth:`to_index`."""
        if not 0 <= index < self.size:
            raise ValueError(f"Index {index} outside grid of {self.size} cells.")
        return divmod(index, self.height)

    def neighbor(self, cell: Cell, direction: Direction) -> Cell | None:
        """Return the adjacent cell in *direction*, or ``None`` past a wall."""
        dx, dy = direction.value
        x, y = cell[0] + dx, cell[1] + dy
        if not self.in_bounds(x, y):
            return None
        return x, y

    def random_cell(self, rng: np.random.Generator) -> Cell:
        """Sample a uniformly random in-bounds cell."""
        return int(rng.integers(self.width)), int(rng.integers(self.height))

    def occupancy(self, cells: Iterable[Cell]) -> np.ndarray:
        """Boolean ``(height, width)`` mask of the given cells."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in cells:
            mask[y, x] = True
        return mask

    def free_cells(self, occupied: Iterable[Cell]) -> list[Cell]:
        """Return every cell not in *occupied*, in index order."""
        ys, xs = np.where(~self.occupancy(occupied))
        return sorted(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
