"""Build one polygon and insert it at a position."""

from __future__ import annotations

from tessellate.engine.spacing import ShapeMetrics
from tessellate.scenegraph import Color, ContainerNode, Point, Polygon

SHAPE_OPACITY = 0.5


def make_polygon(metrics: ShapeMetrics, fill: Color, opacity: float = SHAPE_OPACITY) -> Polygon:
    return Polygon(
        corner_count=metrics.corner_count,
        width=metrics.width,
        height=metrics.height,
        fill=fill,
        stroke=None,
        opacity=opacity,
    )


def insert_polygon(
    parent: ContainerNode,
    metrics: ShapeMetrics,
    fill: Color,
    x: float,
    y: float,
) -> Polygon:
    """Create a polygon, append it to `parent` and anchor its top-left at (x, y)."""
    shape = make_polygon(metrics, fill)
    parent.add_child(shape)
    shape.place_in_parent_coordinates(Point(0, 0), Point(x, y))
    return shape
