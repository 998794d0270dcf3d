"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from tessellate import __version__
from tessellate.engine.registry import get_registry
from tessellate.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        commands_registered=get_registry().count,
    )
