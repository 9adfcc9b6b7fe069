"""Framing parameters and generation configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field


class FramingParams(BaseModel):
    """Layout constants, fixed for the lifetime of a generator run.

    All lengths share the unit system of the wall and opening descriptors;
    the defaults are the reference values in feet.
    """
    stud_spacing: float = Field(2.0, gt=0)                  # On-center spacing of field studs
    member_offset: float = Field(0.2, gt=0)                 # Nominal member thickness, half per side
    opening_proximity_tolerance: float = Field(0.5, ge=0)   # Clearance added to an opening's plan radius
    min_segment_length: float = Field(0.1, ge=0)            # Shorter stud pieces are dropped
    end_epsilon: float = Field(0.01, ge=0)                  # Field stud this close to the wall end is skipped

    @property
    def half_offset(self) -> float:
        return self.member_offset * 0.5


class GenerationConfig(BaseModel):
    """Controls which rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
