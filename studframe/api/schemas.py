"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from studframe.models import (
    WallDescriptor, OpeningDescriptor, FramingParams, GenerationConfig, FramingLayout,
)
from studframe.services.sinks import EmitReport


class FrameRequest(BaseModel):
    """Request body for the /frame endpoint."""
    wall: WallDescriptor
    openings: list[OpeningDescriptor] = []
    params: FramingParams = FramingParams()
    config: GenerationConfig = GenerationConfig()


class FrameResponse(BaseModel):
    """Response from the /frame endpoint."""
    layout: FramingLayout
    report: EmitReport
    rule_count: int


class RuleInfo(BaseModel):
    id: str
    name: str
