"""Immutable color values, built from hex strings or named constants."""

from __future__ import annotations

from dataclasses import dataclass

from tessellate.scenegraph.errors import SceneGraphError

# Named colors to hex
_NAMED_COLORS = {
    "black": "#000000", "white": "#ffffff", "red": "#ff0000",
    "green": "#008000", "blue": "#0000ff", "yellow": "#ffff00",
    "gray": "#808080", "orange": "#ffa500", "purple": "#800080",
}


def _parse_hex(color: str) -> tuple[int, int, int]:
    """Parse a hex color string (with or without '#') to (r, g, b)."""
    value = color.strip().lower()
    if value in _NAMED_COLORS:
        value = _NAMED_COLORS[value]
    if value.startswith("#"):
        value = value[1:]
    if len(value) == 3:
        value = value[0]*2 + value[1]*2 + value[2]*2
    if len(value) != 6:
        raise SceneGraphError(f"Unrecognized color: {color!r}")
    try:
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
    except ValueError as e:
        raise SceneGraphError(f"Unrecognized color: {color!r}") from e


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: float = 1.0

    @classmethod
    def parse(cls, value: str) -> Color:
        """Build a color from "A09080", "#8090a0", "#abc" or a name like "blue"."""
        r, g, b = _parse_hex(value)
        return cls(r, g, b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return self.to_hex()
