"""Tessellation parameters, one instance per command invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tessellate.engine.errors import InvalidDimension, require_positive
from tessellate.scenegraph.color import Color

if TYPE_CHECKING:
    from tessellate.config import Settings

DEFAULT_PALETTE = ("A09080", "8090A0", "9080A0")


@dataclass
class TessellationConfig:
    """Controls grid size, shape size and overlap."""

    across: int = 8  # shapes per row
    down: int = 12  # rows
    size: float = 125.0  # shape height in document units
    scale: float = 0.90  # 1.0 = exact tessellation; < 1 overlaps, > 1 leaves gaps
    palette: tuple[str, ...] = field(default=DEFAULT_PALETTE)

    def __post_init__(self) -> None:
        self.palette = tuple(self.palette)
        self.validate()

    def validate(self) -> None:
        for name in ("across", "down", "size", "scale"):
            require_positive(name, getattr(self, name))
        if not self.palette:
            raise InvalidDimension("palette length", 0)

    @property
    def cell_count(self) -> int:
        return self.across * self.down

    def colors(self) -> list[Color]:
        return [Color.parse(c) for c in self.palette]

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> TessellationConfig:
        values = {
            "across": settings.default_across,
            "down": settings.default_down,
            "size": settings.default_size,
            "scale": settings.default_scale,
            "palette": settings.default_palette,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
