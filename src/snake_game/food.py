"""Food and initial snake placement."""

from __future__ import annotations

import enum
import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_game.grid import Cell, Grid

logger = logging.getLogger(__name__)


class InitialPlacement(enum.Enum):
    """Where the one-cell snake starts."""

    RANDOM = "random"
    CORNER = "corner"


class FoodSpawner:
    """Places food on cells the snake does not occupy.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def initial_cell(self, placement: InitialPlacement) -> Cell:
        """Pick the starting cell of a new snake."""
        if placement is InitialPlacement.CORNER:
            return 0, 0
        return self.grid.random_cell(self.rng)

    def spawn(self, occupied: Collection[Cell]) -> Cell:
        """Sample random cells until one outside *occupied* is found.

        Raises ``ValueError`` when every cell is occupied, since sampling
        could never terminate.
        """
        taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
        if len(taken) >= self.grid.size:
            logger.warning("No free cells available for food spawning.")
            raise ValueError("Cannot place food on a full grid.")

        while True:
            cell = self.grid.random_cell(self.rng)
            if cell not in taken:
                return cell
