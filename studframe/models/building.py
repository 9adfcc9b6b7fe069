"""Building element models — the wall being framed and its openings.

These are snapshots handed to the engine by the host; nothing here talks
to a live model.
"""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict

from .geometry import BoundingBox, Line3D, Vector3D, UNIT_Z


class OpeningKind(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class WallDescriptor(BaseModel):
    """A straight wall segment: centerline, thickness, height and base level."""
    model_config = ConfigDict(frozen=True)

    id: str
    centerline: Line3D
    width: float           # Wall thickness
    height: float
    base_elevation: float = 0.0

    @property
    def length(self) -> float:
        return self.centerline.length

    @property
    def direction(self) -> Vector3D:
        return self.centerline.direction

    @property
    def normal(self) -> Vector3D:
        """Horizontal normal, direction x world-vertical."""
        return self.direction.cross(UNIT_Z).normalized()

    def problems(self) -> list[str]:
        """Return every violated wall invariant (empty when the wall is usable)."""
        found: list[str] = []
        if self.length < 1e-9:
            found.append("centerline has zero length")
        elif abs(self.direction.z) > 1e-6 or self.normal.is_zero():
            found.append("centerline is not horizontal")
        if self.width <= 0:
            found.append(f"width must be positive, got {self.width}")
        if self.height <= 0:
            found.append(f"height must be positive, got {self.height}")
        return found


class OpeningDescriptor(BaseModel):
    """A door or window hosted on a wall, reduced to its bounding box."""
    model_config = ConfigDict(frozen=True)

    id: str
    kind: OpeningKind
    bounding_box: BoundingBox | None = None
    host_wall_id: str = ""

    def has_usable_geometry(self) -> bool:
        """A box with real height; enough to cut studs around the opening."""
        box = self.bounding_box
        return box is not None and box.is_usable()

    def can_be_framed(self) -> bool:
        """Jacks and header need a horizontal opening direction (non-zero X extent)."""
        return self.has_usable_geometry() and self.bounding_box.size_x > 1e-9
