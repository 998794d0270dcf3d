"""Scene graph errors."""

from __future__ import annotations


class SceneGraphError(ValueError):
    """Raised when a document operation is given values the document cannot hold."""
