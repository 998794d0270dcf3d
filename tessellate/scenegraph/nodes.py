"""Scene graph nodes — the document model that plugin commands mutate.

Every node lives in exactly one parent. Positions are the top-left corner of
the node's bounding box in parent coordinates.
"""

from __future__ import annotations

import copy
import itertools
import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from tessellate.scenegraph.color import Color
from tessellate.scenegraph.errors import SceneGraphError
from tessellate.utils.geometry import bbox, regular_polygon_vertices


_ids = itertools.count(1)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


class SceneNode:
    """Base node: identity, parent link and translation."""

    kind = "node"

    def __init__(self) -> None:
        self.guid = f"{self.kind}-{next(_ids)}"
        self.parent: ContainerNode | None = None
        self.x = 0.0
        self.y = 0.0

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.guid} at ({self.x:g}, {self.y:g})>"

    # -- positioning -------------------------------------------------------

    def place_in_parent_coordinates(self, origin: Point | dict, target: Point | dict) -> None:
        """Move the node so its local point `origin` lands on `target` in the parent."""
        origin = _as_point(origin)
        target = _as_point(target)
        self.x = target.x - origin.x
        self.y = target.y - origin.y

    def move_in_parent_coordinates(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    # -- tree --------------------------------------------------------------

    def remove_from_parent(self) -> None:
        if self.parent is None:
            return
        self.parent.remove_child(self)

    def clone(self) -> SceneNode:
        """Detached deep copy with a fresh identity."""
        parent = self.parent
        self.parent = None
        try:
            dup = copy.deepcopy(self)
        finally:
            self.parent = parent
        dup._renew_ids()
        return dup

    def _renew_ids(self) -> None:
        self.guid = f"{self.kind}-{next(_ids)}"

    def local_bounds(self) -> tuple[float, float, float, float]:
        raise NotImplementedError

    def bounds_in_parent(self) -> tuple[float, float, float, float]:
        xmin, ymin, xmax, ymax = self.local_bounds()
        return (xmin + self.x, ymin + self.y, xmax + self.x, ymax + self.y)


class Polygon(SceneNode):
    """Regular polygon fitted to a width x height bounding box."""

    kind = "polygon"

    def __init__(
        self,
        corner_count: int = 3,
        width: float = 100.0,
        height: float = 100.0,
        fill: Color | None = None,
        stroke: Color | None = None,
        opacity: float = 1.0,
    ) -> None:
        super().__init__()
        self.corner_count = corner_count
        self.width = width
        self.height = height
        self.fill = fill
        self.stroke = stroke
        self.opacity = opacity

    @property
    def corner_count(self) -> int:
        return self._corner_count

    @corner_count.setter
    def corner_count(self, value: int) -> None:
        if int(value) != value or value < 3:
            raise SceneGraphError(f"corner_count must be an integer >= 3, got {value!r}")
        self._corner_count = int(value)

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        if not (math.isfinite(value) and value > 0):
            raise SceneGraphError(f"width must be a positive finite number, got {value!r}")
        self._width = float(value)

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        if not (math.isfinite(value) and value > 0):
            raise SceneGraphError(f"height must be a positive finite number, got {value!r}")
        self._height = float(value)

    @property
    def opacity(self) -> float:
        return self._opacity

    @opacity.setter
    def opacity(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            raise SceneGraphError(f"opacity must be within [0, 1], got {value!r}")
        self._opacity = float(value)

    def local_vertices(self) -> NDArray[np.float64]:
        return regular_polygon_vertices(self.corner_count, self.width, self.height)

    def vertices(self) -> NDArray[np.float64]:
        """Vertices in parent coordinates."""
        return self.local_vertices() + np.array([self.x, self.y])

    def local_bounds(self) -> tuple[float, float, float, float]:
        return bbox(self.local_vertices())


class ContainerNode(SceneNode):
    """Node with ordered children (z-order = list order)."""

    kind = "container"

    def __init__(self) -> None:
        super().__init__()
        self.children: list[SceneNode] = []

    def add_child(self, node: SceneNode, index: int | None = None) -> None:
        if node.parent is not None:
            node.parent.remove_child(node)
        if index is None:
            self.children.append(node)
        else:
            self.children.insert(index, node)
        node.parent = self

    def index_of(self, node: SceneNode) -> int:
        """Z-index of a child. Scans down from the top, where new nodes land."""
        for i in range(len(self.children) - 1, -1, -1):
            if self.children[i] is node:
                return i
        raise SceneGraphError(f"{node.guid} is not a child of {self.guid}")

    def remove_child(self, node: SceneNode) -> None:
        try:
            self.children.remove(node)
        except ValueError:
            raise SceneGraphError(f"{node.guid} is not a child of {self.guid}") from None
        node.parent = None

    def _renew_ids(self) -> None:
        super()._renew_ids()
        for child in self.children:
            child.parent = self
            child._renew_ids()

    def local_bounds(self) -> tuple[float, float, float, float]:
        if not self.children:
            return (0.0, 0.0, 0.0, 0.0)
        boxes = np.array([c.bounds_in_parent() for c in self.children])
        return (
            float(boxes[:, 0].min()),
            float(boxes[:, 1].min()),
            float(boxes[:, 2].max()),
            float(boxes[:, 3].max()),
        )


class GroupNode(ContainerNode):
    kind = "group"


class Artboard(ContainerNode):
    """Root of a document; the default insertion parent."""

    kind = "artboard"

    def __init__(self, name: str = "Artboard 1") -> None:
        super().__init__()
        self.name = name


def _as_point(value: Point | dict) -> Point:
    if isinstance(value, Point):
        return value
    return Point(float(value["x"]), float(value["y"]))
