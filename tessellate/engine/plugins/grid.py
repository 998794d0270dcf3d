"""Grid plugin: one independently constructed polygon per grid cell."""

from __future__ import annotations

import logging

from tessellate.engine.config import TessellationConfig
from tessellate.engine.factory import insert_polygon
from tessellate.engine.grouping import group_shapes
from tessellate.engine.registry import CommandResult, command
from tessellate.engine.spacing import ShapeMetrics, diamond_metrics, hexagon_metrics
from tessellate.engine.walker import walk_grid
from tessellate.scenegraph import Selection

logger = logging.getLogger(__name__)


def tessellate_grid(
    selection: Selection,
    config: TessellationConfig,
    metrics: ShapeMetrics,
    command_id: str,
) -> CommandResult:
    """Walk the grid, build a shape per cell, then group all of them."""
    colors = config.colors()
    parent = selection.insertion_parent

    shapes = [
        insert_polygon(parent, metrics, colors[cell.color_index], cell.x, cell.y)
        for cell in walk_grid(config.across, config.down, metrics, config.scale, len(colors))
    ]

    grouped = group_shapes(selection, shapes)
    logger.info(
        "%s: %d x %d grid, %d shapes grouped into %s",
        command_id, config.across, config.down, len(shapes), grouped.guid,
    )
    return CommandResult(command=command_id, shapes=shapes, group=grouped)


@command(
    plugin="grid",
    name="tessellateDiamond",
    description="Interlocking diamonds; odd columns drop by half a row.",
)
def tessellate_diamond(selection: Selection, config: TessellationConfig) -> CommandResult:
    return tessellate_grid(selection, config, diamond_metrics(config.size), "grid.tessellateDiamond")


@command(
    plugin="grid",
    name="tessellateHexagon",
    description="Edge-sharing hexagons built one per cell.",
)
def tessellate_hexagon(selection: Selection, config: TessellationConfig) -> CommandResult:
    return tessellate_grid(selection, config, hexagon_metrics(config.size), "grid.tessellateHexagon")
