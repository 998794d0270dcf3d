"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    commands_registered: int = 0


class CommandInfo(BaseModel):
    id: str
    plugin: str
    name: str
    description: str = ""


class CommandListResponse(BaseModel):
    commands: list[CommandInfo] = Field(default_factory=list)


class CommandResponse(BaseModel):
    command: str
    svg: str
    shape_count: int = 0
    discarded: int = 0
    group_id: str | None = None
