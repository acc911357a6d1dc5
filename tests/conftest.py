"""Shared fixtures."""

import pytest


class RecordingSurface:
    """In-memory drawing surface that records every draw call."""

    def __init__(self, width: int = 500, height: int = 500) -> None:
        self._width = width
        self._height = height
        self.rectangles: list[tuple] = []
        self.texts: list[tuple] = []

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def fill_rectangle(self, size, color, top_left) -> None:
        self.rectangles.append((size, color, top_left))

    def draw_text(self, text, color, x, y, size) -> None:
        self.texts.append((text, color, x, y, size))

    def text_lines(self) -> list[str]:
        return [t[0] for t in self.texts]


@pytest.fixture()
def surface():
    return RecordingSurface()
