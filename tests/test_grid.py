"""Tests for the Grid module."""

import numpy as np
import pytest

from snake_game.grid import Grid
from snake_game.snake import Direction


class TestGridInit:
    def test_dimensions(self):
        grid = Grid(width=10, height=8)
        assert grid.width == 10
        assert grid.height == 8
        assert grid.size == 80

    def test_non_positive_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            Grid(width=0, height=4)
        with pytest.raises(ValueError, match="positive"):
            Grid(width=4, height=-1)


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid(width=5, height=3)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 2)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(5, 0)
        assert not grid.in_bounds(0, 3)

    def test_neighbor_inside(self):
        grid = Grid(width=5, height=5)
        assert grid.neighbor((2, 2), Direction.UP) == (2, 1)
        assert grid.neighbor((2, 2), Direction.DOWN) == (2, 3)
        assert grid.neighbor((2, 2), Direction.LEFT) == (1, 2)
        assert grid.neighbor((2, 2), Direction.RIGHT) == (3, 2)

    def test_neighbor_past_walls(self):
        grid = Grid(width=5, height=5)
        assert grid.neighbor((0, 3), Direction.LEFT) is None
        assert grid.neighbor((3, 0), Direction.UP) is None
        assert grid.neighbor((4, 3), Direction.RIGHT) is None
        assert grid.neighbor((3, 4), Direction.DOWN) is None


class TestGridIndexing:
    def test_column_major_index(self):
        grid = Grid(width=4, height=2)
        assert grid.to_index(0, 0) == 0
        assert grid.to_index(0, 1) == 1
        assert grid.to_index(2, 1) == 5
        assert grid.to_index(3, 1) == 7

    def test_out_of_bounds_index(self):
        grid = Grid(width=4, height=2)
        assert grid.to_index(4, 0) is None
        assert grid.to_index(0, 2) is None
        assert grid.to_index(2, 5) is None

    def test_from_index_inverts(self):
        grid = Grid(width=4, height=3)
        for index in range(grid.size):
            x, y = grid.from_index(index)
            assert grid.to_index(x, y) == index

    def test_from_index_out_of_range(self):
        grid = Grid(width=4, height=3)
        with pytest.raises(ValueError, match="outside grid"):
            grid.from_index(12)


class TestGridOccupancy:
    def test_occupancy_mask(self):
        grid = Grid(width=4, height=3)
        mask = grid.occupancy([(0, 0), (3, 2)])
        assert mask.shape == (3, 4)
        assert mask[0, 0]
        assert mask[2, 3]
        assert mask.sum() == 2

    def test_free_cells(self):
        grid = Grid(width=3, height=3)
        free = grid.free_cells([(0, 0), (1, 1)])
        assert len(free) == 7
        assert (0, 0) not in free
        assert (1, 1) not in free
        assert free[0] == (0, 1)

    def test_random_cell_in_bounds(self):
        grid = Grid(width=7, height=5)
        rng = np.random.default_rng(0)
        for _ in range(100):
            assert grid.in_bounds(*grid.random_cell(rng))

    def test_to_dict(self):
        assert Grid(width=6, height=5).to_dict() == {"width": 6, "height": 5}
