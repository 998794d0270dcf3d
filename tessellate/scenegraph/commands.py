"""Document commands that act on the current selection (duplicate, group)."""

from __future__ import annotations

import logging

from tessellate.scenegraph.errors import SceneGraphError
from tessellate.scenegraph.nodes import GroupNode, SceneNode
from tessellate.scenegraph.selection import Selection

logger = logging.getLogger(__name__)


def duplicate(selection: Selection) -> list[SceneNode]:
    """Clone every selected node in place; the clones become the selection.

    Each clone is inserted directly above its original in the same parent and
    keeps the original's position.
    """
    if selection.is_empty:
        raise SceneGraphError("duplicate: nothing selected")

    clones: list[SceneNode] = []
    for node in selection.items:
        parent = node.parent
        if parent is None:
            raise SceneGraphError(f"duplicate: {node.guid} is not in the document")
        dup = node.clone()
        parent.add_child(dup, index=parent.index_of(node) + 1)
        clones.append(dup)

    selection.items = clones
    return clones


def group(selection: Selection) -> GroupNode:
    """Collapse the selection into one group; the group becomes the selection.

    All selected nodes must share a parent. The group takes the z-position of
    the topmost selected node and children keep their document order.
    """
    if selection.is_empty:
        raise SceneGraphError("group: nothing selected")

    parents = {id(node.parent) for node in selection.items}
    parent = selection.items[0].parent
    if parent is None or len(parents) != 1:
        raise SceneGraphError("group: selected nodes must share one parent")

    # one pass over the siblings: members move into the group in document
    # order and the group takes the slot of the topmost member
    selected = {id(node) for node in selection.items}
    remaining = len(selected)
    container = GroupNode()
    siblings: list[SceneNode] = []
    for child in parent.children:
        if id(child) not in selected:
            siblings.append(child)
            continue
        container.children.append(child)
        child.parent = container
        remaining -= 1
        if remaining == 0:
            siblings.append(container)
    parent.children[:] = siblings
    container.parent = parent

    logger.debug("Grouped %d nodes into %s", len(container.children), container.guid)
    selection.items = [container]
    return container
