"""Select the accumulated shapes and group them once."""

from __future__ import annotations

from collections.abc import Sequence

from tessellate.scenegraph import GroupNode, SceneNode, Selection, group


def group_shapes(selection: Selection, shapes: Sequence[SceneNode]) -> GroupNode:
    selection.items = list(shapes)
    return group(selection)
