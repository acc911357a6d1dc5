"""Input translation from keys and pointer gestures to session events."""

from __future__ import annotations

import enum
import logging
import math
from collections import deque
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_game.session import GameSession

logger = logging.getLogger(__name__)


class InputEvent(enum.Enum):
    """Abstract player inputs understood by :class:`GameSession`."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ACTIVATE = "activate"


KEY_BINDINGS: dict[str, InputEvent] = {
    "up": InputEvent.UP,
    "w": InputEvent.UP,
    "down": InputEvent.DOWN,
    "s": InputEvent.DOWN,
    "left": InputEvent.LEFT,
    "a": InputEvent.LEFT,
    "right": InputEvent.RIGHT,
    "d": InputEvent.RIGHT,
    "enter": InputEvent.ACTIVATE,
    "return": InputEvent.ACTIVATE,
    "space": InputEvent.ACTIVATE,
}


def event_for_key(key: str) -> InputEvent | None:
    """Map a key name (case-insensitive) to an event, if bound."""
    return KEY_BINDINGS.get(key.lower())


def dispatch(session: GameSession, event: InputEvent) -> None:
    """Deliver *event* to the matching session entry point."""
    handlers = {
        InputEvent.UP: session.up_pressed,
        InputEvent.DOWN: session.down_pressed,
        InputEvent.LEFT: session.left_pressed,
        InputEvent.RIGHT: session.right_pressed,
        InputEvent.ACTIVATE: session.enter_or_space_pressed,
    }
    handlers[event]()


class GestureClassifier:
    """Turns pointer drags into directions and double taps into activation.

    The press point is kept and the most recent positions are buffered
    until release. A drag whose net displacement from the press point
    exceeds *min_swipe_distance* pixels is classified by the least-squares
    slope of the buffered points: steeper than 45° is vertical, otherwise
    horizontal, with the sign taken from the net displacement. Screen
    coordinates are assumed, so positive ``y`` points down. Two short
    taps within *double_tap_window* seconds produce ``ACTIVATE``.
    """

    def __init__(
        self,
        *,
        buffer_size: int = 32,
        min_swipe_distance: float = 30.0,
        double_tap_window: float = 0.3,
    ) -> None:
        if buffer_size < 2:
            raise ValueError("buffer_size must be at least 2.")
        if min_swipe_distance <= 0:
            raise ValueError("min_swipe_distance must be positive.")
        if double_tap_window <= 0:
            raise ValueError("double_tap_window must be positive.")
        self.min_swipe_distance = min_swipe_distance
        self.double_tap_window = double_tap_window
        self._origin: tuple[float, float] | None = None
        self._points: deque[tuple[float, float]] = deque(maxlen=buffer_size)
        self._last_tap: float | None = None

    def press(self, x: float, y: float) -> None:
        self._origin = (x, y)
        self._points.clear()
        self._points.append((x, y))

    def move(self, x: float, y: float) -> None:
        self._points.append((x, y))

    def release(self, x: float, y: float, now: float) -> InputEvent | None:
        """Finish the gesture and classify it."""
        self._points.append((x, y))
        origin = self._origin if self._origin is not None else self._points[0]
        points = np.array([origin, *self._points], dtype=float)
        self._origin = None
        self._points.clear()

        dx, dy = points[-1] - points[0]
        if math.hypot(dx, dy) < self.min_swipe_distance:
            return self._tap(now)

        self._last_tap = None
        event = self._classify_swipe(points, dx, dy)
        logger.debug("Swipe (%.1f, %.1f) classified as %s.", dx, dy, event.value)
        return event

    def _tap(self, now: float) -> InputEvent | None:
        if self._last_tap is not None and now - self._last_tap <= self.double_tap_window:
            self._last_tap = None
            return InputEvent.ACTIVATE
        self._last_tap = now
        return None

    @staticmethod
    def _classify_swipe(points: np.ndarray, dx: float, dy: float) -> InputEvent:
        xs, ys = points[:, 0], points[:, 1]
        # Regress against the axis with the larger spread so near-vertical
        # drags do not produce an ill-conditioned fit.
        if np.ptp(xs) >= np.ptp(ys):
            vertical = abs(np.polyfit(xs, ys, 1)[0]) > 1.0
        else:
            vertical = abs(np.polyfit(ys, xs, 1)[0]) < 1.0
        if vertical:
            return InputEvent.DOWN if dy > 0 else InputEvent.UP
        return InputEvent.RIGHT if dx > 0 else InputEvent.LEFT
