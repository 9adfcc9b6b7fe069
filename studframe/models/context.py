"""Framing context — the state of a single wall's framing pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import WallDescriptor, OpeningDescriptor
from .framing import FramingMember
from .parameters import FramingParams, GenerationConfig


class FramingContext(BaseModel):
    """
    Holds all state during a single framing pass over one wall.

    The analyzer fills in the resolved openings.
    Rules add generated members.
    The generator orchestrates the flow.
    """
    # Input
    wall: WallDescriptor
    params: FramingParams
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results (populated by the analyzer)
    openings: list[OpeningDescriptor] = []
    skipped_openings: list[str] = []

    # Output (populated by rules)
    members: list[FramingMember] = []

    def add_members(self, members: list[FramingMember]) -> None:
        self.members.extend(members)
