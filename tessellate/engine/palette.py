"""Round-robin color assignment over a fixed palette."""

from __future__ import annotations

from collections.abc import Sequence

from tessellate.scenegraph.color import Color


def color_index(row: int, col: int, across: int, k: int = 3) -> int:
    """Palette index for a grid cell; gives diagonal color bands."""
    return (row * across + col) % k


def color_at(palette: Sequence[Color], i: int) -> Color:
    return palette[i % len(palette)]


class ColorCycle:
    """Cursor over a palette that wraps forever.

    Create one per command invocation; nothing carries over between runs.
    """

    def __init__(self, palette: Sequence[Color]) -> None:
        if not palette:
            raise ValueError("ColorCycle needs at least one color")
        self._palette = list(palette)
        self.position = 0

    def next(self) -> Color:
        color = color_at(self._palette, self.position)
        self.position += 1
        return color

    def __iter__(self):
        return self

    def __next__(self) -> Color:
        return self.next()
