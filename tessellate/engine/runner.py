"""Plugin loading and command dispatch against a fresh document."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from tessellate.engine.config import TessellationConfig
from tessellate.engine.registry import CommandResult, CommandRegistry, get_registry
from tessellate.scenegraph import Document

logger = logging.getLogger(__name__)

_PLUGIN_PACKAGE = "tessellate.engine.plugins"


def register_plugins() -> int:
    """Import every plugin module so @command decorators fire. Safe to call twice."""
    package = importlib.import_module(_PLUGIN_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_PLUGIN_PACKAGE}.{module_name}")
    return get_registry().count


def run_command(
    command_id: str,
    config: TessellationConfig | None = None,
    document: Document | None = None,
    registry: CommandRegistry | None = None,
) -> tuple[Document, CommandResult]:
    """Run one command against `document` (a new one if omitted).

    Raises KeyError for unknown commands; engine and document errors propagate.
    """
    registry = registry or get_registry()
    spec = registry.get(command_id)
    config = config or TessellationConfig()
    document = document or Document()

    t0 = time.perf_counter()
    result = spec.fn(document.selection, config)
    elapsed = (time.perf_counter() - t0) * 1000
    logger.debug("%s completed in %.1fms (%d shapes)", command_id, elapsed, result.shape_count)
    return document, result
