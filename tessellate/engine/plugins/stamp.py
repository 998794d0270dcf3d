"""Stamp plugin — one template hexagon, repositioned and duplicated per cell.

The loop always ends holding one clone too many; it is removed from the
document before the recorded hexagons are grouped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from tessellate.engine.config import TessellationConfig
from tessellate.engine.errors import require_positive
from tessellate.engine.factory import SHAPE_OPACITY
from tessellate.engine.grouping import group_shapes
from tessellate.engine.palette import ColorCycle
from tessellate.engine.registry import CommandResult, command
from tessellate.engine.spacing import hexagon_metrics
from tessellate.scenegraph import Color, Point, Polygon, Selection, duplicate

logger = logging.getLogger(__name__)

SINGLE_HEXAGON_SIZE = 100.0
SINGLE_HEXAGON_FILL = "blue"


@dataclass(frozen=True)
class StampStep:
    index: int
    row: int
    x: float
    y: float
    indent: bool  # row starts offset by width_apart


def stamp_positions(
    across: int, down: int, width_apart: float, height_apart: float
) -> Iterator[StampStep]:
    """Unscaled positions for each stamp, in placement order.

    Within a row the stamp advances by two column spacings; each finished row
    moves down half a shape and flips between flush-left and indented starts.
    """
    require_positive("across", across)
    require_positive("down", down)

    x = 0.0
    y = 0.0
    count = 0
    indent = False
    while count < across * down:
        yield StampStep(index=count, row=count // across, x=x, y=y, indent=indent)
        count += 1
        x += width_apart * 2
        if count % across == 0:
            indent = not indent
            x = width_apart if indent else 0.0
            y += height_apart


def _new_hexagon(size: float) -> Polygon:
    metrics = hexagon_metrics(size)
    return Polygon(
        corner_count=6,
        width=metrics.width,
        height=metrics.height,
        stroke=None,
        opacity=SHAPE_OPACITY,
    )


@command(
    plugin="stamp",
    name="createHexagon",
    description="A single translucent blue hexagon.",
)
def create_hexagon(selection: Selection, config: TessellationConfig | None = None) -> CommandResult:
    """Fixed size and color; tessellation parameters are not used."""
    hexagon = _new_hexagon(SINGLE_HEXAGON_SIZE)
    hexagon.fill = Color.parse(SINGLE_HEXAGON_FILL)
    selection.insertion_parent.add_child(hexagon)
    return CommandResult(command="stamp.createHexagon", shapes=[hexagon])


@command(
    plugin="stamp",
    name="tessellateHexagon",
    description="Hexagon field made by duplicating one template shape.",
)
def tessellate_hexagon(selection: Selection, config: TessellationConfig) -> CommandResult:
    hexagon = _new_hexagon(config.size)
    selection.insertion_parent.add_child(hexagon)

    height_apart = hexagon.height / 2
    width_apart = hexagon.width * 0.75

    colors = ColorCycle(config.colors())
    hexagons: list[Polygon] = []

    for step in stamp_positions(config.across, config.down, width_apart, height_apart):
        hexagon.fill = colors.next()
        hexagon.place_in_parent_coordinates(
            Point(0, 0), Point(step.x * config.scale, step.y * config.scale)
        )
        hexagons.append(hexagon)

        # the clone must be taken after the stamp is positioned and recorded
        selection.items = [hexagon]
        duplicate(selection)
        hexagon = selection.items[0]

    hexagon.remove_from_parent()

    grouped = group_shapes(selection, hexagons)
    logger.info(
        "stamp.tessellateHexagon: %d hexagons grouped into %s, 1 surplus clone removed",
        len(hexagons), grouped.guid,
    )
    return CommandResult(
        command="stamp.tessellateHexagon", shapes=hexagons, group=grouped, discarded=1
    )
