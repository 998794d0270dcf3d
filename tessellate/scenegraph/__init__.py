"""In-memory vector document: nodes, selection and document commands."""

from tessellate.scenegraph.color import Color
from tessellate.scenegraph.commands import duplicate, group
from tessellate.scenegraph.errors import SceneGraphError
from tessellate.scenegraph.nodes import Artboard, ContainerNode, GroupNode, Point, Polygon, SceneNode
from tessellate.scenegraph.selection import Document, Selection

__all__ = [
    "Artboard",
    "Color",
    "ContainerNode",
    "Document",
    "GroupNode",
    "Point",
    "Polygon",
    "SceneGraphError",
    "SceneNode",
    "Selection",
    "duplicate",
    "group",
]
