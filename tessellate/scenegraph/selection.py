"""Selection context handed to commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from tessellate.scenegraph.nodes import Artboard, ContainerNode, SceneNode


@dataclass
class Selection:
    """Current editing context: where new nodes go and what is selected."""

    insertion_parent: ContainerNode
    items: list[SceneNode] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass
class Document:
    """A single-artboard document plus its live selection."""

    root: Artboard = field(default_factory=Artboard)
    selection: Selection | None = None

    def __post_init__(self) -> None:
        if self.selection is None:
            self.selection = Selection(insertion_parent=self.root)
