"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Upper bound on shapes per row and rows per request.
MAX_GRID_DIMENSION = 100


class TessellateRequest(BaseModel):
    """Optional overrides; omitted fields fall back to configured defaults."""

    across: int | None = Field(default=None, gt=0, le=MAX_GRID_DIMENSION, description="Shapes per row")
    down: int | None = Field(default=None, gt=0, le=MAX_GRID_DIMENSION, description="Number of rows")
    size: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Shape height in document units",
    )
    scale: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="1.0 tessellates exactly; smaller overlaps, larger leaves gaps",
    )
    palette: list[str] | None = Field(default=None, description="Hex colors cycled over the shapes")
