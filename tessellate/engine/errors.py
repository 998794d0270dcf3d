"""Engine errors."""

from __future__ import annotations

import math


class InvalidDimension(ValueError):
    """Grid or shape dimensions that cannot produce a tessellation."""

    def __init__(self, name: str, value: float) -> None:
        super().__init__(f"{name} must be a positive finite number, got {value!r}")
        self.name = name
        self.value = value


def require_positive(name: str, value: float) -> None:
    """Raise InvalidDimension unless value is finite and greater than zero."""
    if not (math.isfinite(value) and value > 0):
        raise InvalidDimension(name, value)
