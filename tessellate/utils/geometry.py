"""Leaf-node geometry helpers. No scene graph imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon as ShapelyPolygon


def regular_polygon_vertices(
    corner_count: int, width: float, height: float
) -> NDArray[np.float64]:
    """Vertices of a regular N-gon stretched to fill a width x height box.

    The first vertex sits on the right edge, so 4 corners give a diamond and
    6 corners give a flat-topped hexagon. Coordinates are local: (0, 0) is the
    top-left corner of the bounding box.
    """
    angles = 2 * np.pi * np.arange(corner_count) / corner_count
    unit = np.column_stack([np.cos(angles), np.sin(angles)])
    lo = unit.min(axis=0)
    span = unit.max(axis=0) - lo
    return (unit - lo) / span * np.array([width, height])


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def to_shapely(points: NDArray[np.float64]) -> ShapelyPolygon:
    return ShapelyPolygon([(float(x), float(y)) for x, y in points])


def edge_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Length of each closed-polygon edge, starting at vertex 0."""
    diffs = np.roll(points, -1, axis=0) - points
    return np.sqrt(np.sum(diffs**2, axis=1))
