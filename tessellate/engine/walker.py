"""Row-major grid iteration, yielding placement and color per cell."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from tessellate.engine.errors import require_positive
from tessellate.engine.palette import color_index
from tessellate.engine.spacing import ShapeMetrics


@dataclass(frozen=True)
class GridCell:
    row: int
    col: int
    x: float
    y: float
    color_index: int


def cell_position(
    row: int, col: int, metrics: ShapeMetrics, scale: float
) -> tuple[float, float]:
    """Odd columns drop by `height_apart` to interlock with their neighbours."""
    is_col_odd = col % 2
    x = col * metrics.width_apart * scale
    y = (row * metrics.height + is_col_odd * metrics.height_apart) * scale
    return x, y


def walk_grid(
    across: int,
    down: int,
    metrics: ShapeMetrics,
    scale: float = 1.0,
    palette_size: int = 3,
) -> Iterator[GridCell]:
    require_positive("across", across)
    require_positive("down", down)

    for row in range(down):
        for col in range(across):
            x, y = cell_position(row, col, metrics, scale)
            yield GridCell(
                row=row,
                col=col,
                x=x,
                y=y,
                color_index=color_index(row, col, across, palette_size),
            )
