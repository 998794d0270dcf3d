"""Command registry — every plugin command is a plain function registered via decorator.

Usage:
    @command(plugin="grid", name="tessellateDiamond", description="...")
    def tessellate_diamond(selection: Selection, config: TessellationConfig) -> CommandResult:
        ...

Commands are addressed as "<plugin>.<name>", e.g. "grid.tessellateDiamond".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tessellate.engine.config import TessellationConfig
    from tessellate.scenegraph import GroupNode, SceneNode, Selection

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    command: str
    shapes: list["SceneNode"] = field(default_factory=list)
    group: "GroupNode | None" = None
    discarded: int = 0  # surplus shapes removed before grouping

    @property
    def shape_count(self) -> int:
        return len(self.shapes)


CommandFn = Callable[["Selection", "TessellationConfig"], CommandResult]


@dataclass
class CommandSpec:
    plugin: str
    name: str
    fn: CommandFn
    description: str = ""

    @property
    def id(self) -> str:
        return f"{self.plugin}.{self.name}"


class CommandRegistry:
    """Singleton registry of all plugin commands."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        if spec.id in self._commands:
            raise ValueError(f"Duplicate command ID: {spec.id}")
        self._commands[spec.id] = spec
        logger.debug("Registered command %s", spec.id)

    def get(self, command_id: str) -> CommandSpec:
        return self._commands[command_id]

    def get_plugin(self, plugin: str) -> list[CommandSpec]:
        specs = [s for s in self._commands.values() if s.plugin == plugin]
        return sorted(specs, key=lambda s: s.name)

    def all(self) -> list[CommandSpec]:
        return sorted(self._commands.values(), key=lambda s: s.id)

    def __contains__(self, command_id: str) -> bool:
        return command_id in self._commands

    @property
    def count(self) -> int:
        return len(self._commands)


# Module-level singleton
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def command(*, plugin: str, name: str, description: str = ""):
    """Decorator to register a plugin command."""

    def decorator(fn: CommandFn):
        _registry.register(CommandSpec(plugin=plugin, name=name, fn=fn, description=description))
        return fn

    return decorator
