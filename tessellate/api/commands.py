"""GET /api/commands, POST /api/commands/{command_id}: run a plugin command."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException

from tessellate.config import Settings
from tessellate.dependencies import get_settings
from tessellate.engine import InvalidDimension, TessellationConfig, get_registry, run_command
from tessellate.models.requests import TessellateRequest
from tessellate.models.responses import CommandInfo, CommandListResponse, CommandResponse
from tessellate.scenegraph import SceneGraphError
from tessellate.svg.serializer import document_to_svg

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/commands", response_model=CommandListResponse)
async def list_commands() -> CommandListResponse:
    return CommandListResponse(
        commands=[
            CommandInfo(id=s.id, plugin=s.plugin, name=s.name, description=s.description)
            for s in get_registry().all()
        ]
    )


@router.post("/commands/{command_id}", response_model=CommandResponse)
async def execute(
    command_id: str,
    req: TessellateRequest | None = None,
    settings: Settings = Depends(get_settings),
) -> CommandResponse:
    if command_id not in get_registry():
        raise HTTPException(status_code=404, detail=f"Unknown command: {command_id}")

    req = req or TessellateRequest()

    def _run() -> CommandResponse:
        """Build the document and its SVG off the event loop."""
        config = TessellationConfig.from_settings(settings, **req.model_dump())
        document, result = run_command(command_id, config)
        return CommandResponse(
            command=result.command,
            svg=document_to_svg(document, title=command_id),
            shape_count=result.shape_count,
            discarded=result.discarded,
            group_id=result.group.guid if result.group is not None else None,
        )

    try:
        return await asyncio.get_running_loop().run_in_executor(None, _run)
    except (InvalidDimension, SceneGraphError) as e:
        logger.info("%s rejected: %s", command_id, e)
        raise HTTPException(status_code=422, detail=str(e)) from e
