"""Top and bottom plates.

Plates run the full centerline at the wall base and at the wall top and
are never cut by openings.
"""

from __future__ import annotations

from studframe.rules.base import FramingRule
from studframe.core.offset import paired_member
from studframe.models import (
    FramingContext, FramingMember, MemberKind, WallDescriptor, Line3D, UNIT_Z,
)


def plate_baselines(wall: WallDescriptor) -> dict[str, Line3D]:
    """Bottom and top plate baselines, centered on the framing face."""
    face = wall.normal * (wall.width * 0.5)
    elevations = {
        "bottom": wall.base_elevation,
        "top": wall.base_elevation + wall.height,
    }
    return {
        position: wall.centerline.translated(face + UNIT_Z * elevation)
        for position, elevation in elevations.items()
    }


class WallPlateRule(FramingRule):
    """Bottom plate + top plate per wall."""

    rule_id = "wall.plates"
    name = "Wall Plates"
    priority = 20

    def generate(self, context: FramingContext) -> list[FramingMember]:
        offset = UNIT_Z * context.params.half_offset
        return [
            paired_member(MemberKind.PLATE, baseline, offset, context.wall,
                          tags={"position": position})
            for position, baseline in plate_baselines(context.wall).items()
        ]
