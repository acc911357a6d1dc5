"""Direction state machine and snake body with deferred growth."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator

from snake_game.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``NONE`` is the resting state before the first input.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    NONE = (0, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_orthogonal(self, other: Direction) -> bool:
        """True if both are moving and lie on different axes."""
        if Direction.NONE in (self, other):
            return False
        (ax, ay), (bx, by) = self.value, other.value
        return ax * bx + ay * by == 0


def turn(current: Direction, requested: Direction) -> Direction:
    """Return the direction after requesting a turn.

    From rest any cardinal direction is accepted. While moving only a
    quarter turn is accepted; repeats, 180° reversals and ``NONE`` leave
    *current* unchanged.
    """
    if requested is Direction.NONE:
        return current
    if current is Direction.NONE or current.is_orthogonal(requested):
        return requested
    return current


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The tail is ``body[0]``; the head is ``body[-1]``.
    """

    def __init__(self, cells: Iterable[Cell]) -> None:
        self.body: deque[Cell] = deque(tuple(c) for c in cells)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")
        if len(set(self.body)) != len(self.body):
            raise ValueError("Snake cells must be unique.")
        self._grow_pending = 0
        self._growth_issued = 0

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[-1]

    @property
    def tail(self) -> Cell:
        """Return the oldest body coordinate."""
        return self.body[0]

    @property
    def growth_credit(self) -> int:
        """Cells of growth still owed to the snake."""
        return self._grow_pending

    @property
    def total_growth_issued(self) -> int:
        return self._growth_issued

    def cells(self) -> tuple[Cell, ...]:
        """Snapshot of the body, tail first."""
        return tuple(self.body)

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def advance(self, new_head: Cell) -> Cell | None:
        """Push *new_head* and settle the tail.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.append(new_head)
        if self._grow_pending > 0:
            self._grow_pending -= 1
            return None
        return self.body.popleft()

    def schedule_growth(self, segments: int) -> None:
        """Queue growth for the next *segments* steps."""
        if segments < 0:
            raise ValueError("Growth segments must be non-negative.")
        self._grow_pending += segments
        self._growth_issued += segments

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "growth_credit": self._grow_pending,
        }
