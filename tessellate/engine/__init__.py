"""Tessellation engine: grid walker, shape factory, grouper and plugin commands."""

from tessellate.engine.config import TessellationConfig
from tessellate.engine.errors import InvalidDimension
from tessellate.engine.registry import CommandResult, command, get_registry
from tessellate.engine.runner import register_plugins, run_command

__all__ = [
    "CommandResult",
    "InvalidDimension",
    "TessellationConfig",
    "command",
    "get_registry",
    "register_plugins",
    "run_command",
]
