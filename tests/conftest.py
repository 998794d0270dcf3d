"""Shared test fixtures."""

from __future__ import annotations

import pytest

from tessellate.engine import TessellationConfig, register_plugins
from tessellate.scenegraph import Color, Document

# The plugin's original constants
DEFAULT_PALETTE = ("A09080", "8090A0", "9080A0")
PALETTE_COLORS = [Color.parse(c) for c in DEFAULT_PALETTE]

register_plugins()


@pytest.fixture
def document() -> Document:
    return Document()


@pytest.fixture
def selection(document):
    return document.selection


@pytest.fixture
def default_config() -> TessellationConfig:
    return TessellationConfig()


@pytest.fixture
def unscaled_config() -> TessellationConfig:
    """Small grid at scale 1.0, so neighbours share edges exactly."""
    return TessellationConfig(across=4, down=3, size=100.0, scale=1.0)
