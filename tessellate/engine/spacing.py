"""Shape dimensions and repeat distances for edge-to-edge tessellation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tessellate.engine.errors import require_positive

# Interior split of a regular hexagon into 30-60-90 triangles.
_HEX_ANGLE = 60 * math.pi / 180


@dataclass(frozen=True)
class ShapeMetrics:
    corner_count: int
    width: float
    height: float
    width_apart: float  # horizontal repeat between adjacent columns
    height_apart: float  # vertical offset of odd columns


def hexagon_line_length(size: float) -> float:
    """Edge length of a flat-topped regular hexagon whose height is `size`."""
    return (size / 2) / math.tan(_HEX_ANGLE) * 2


def diamond_metrics(size: float) -> ShapeMetrics:
    require_positive("size", size)
    return ShapeMetrics(
        corner_count=4,
        width=size,
        height=size,
        width_apart=size / 2,
        height_apart=size / 2,
    )


def hexagon_metrics(size: float) -> ShapeMetrics:
    """Columns repeat at 3/4 of the hexagon's width (1.5 edges), not the full width."""
    require_positive("size", size)
    line_length = hexagon_line_length(size)
    return ShapeMetrics(
        corner_count=6,
        width=line_length * 2,
        height=size,
        width_apart=line_length * 1.5,
        height_apart=size / 2,
    )
