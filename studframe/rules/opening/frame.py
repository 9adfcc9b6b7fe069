"""Opening framing — jacks, header and (windows only) sill.

The frame is traced on the opening's bounding box, on the face of the
wall half a wall width along the normal. Doors never get a sill.
"""

from __future__ import annotations

from studframe.rules.base import FramingRule
from studframe.core.offset import paired_member
from studframe.models import (
    FramingContext, FramingMember, MemberKind, OpeningDescriptor, OpeningKind,
    WallDescriptor, Point3D, Vector3D, Line3D, UNIT_Z,
)


# Which baselines each opening kind receives, in emission order.
FRAME_PARTS: dict[OpeningKind, tuple[str, ...]] = {
    OpeningKind.DOOR: ("left", "right", "header"),
    OpeningKind.WINDOW: ("left", "right", "header", "sill"),
}

PART_KINDS: dict[str, MemberKind] = {
    "left": MemberKind.JACK,
    "right": MemberKind.JACK,
    "header": MemberKind.HEADER,
    "sill": MemberKind.SILL,
}


def opening_corners(
    opening: OpeningDescriptor, wall: WallDescriptor,
) -> tuple[Point3D, Point3D, Point3D, Point3D]:
    """Bottom-left, top-left, top-right, bottom-right on the framing face."""
    box = opening.bounding_box
    face = wall.normal * (wall.width * 0.5)
    y = box.min.y
    return (
        Point3D(x=box.min.x, y=y, z=box.min.z) + face,
        Point3D(x=box.min.x, y=y, z=box.max.z) + face,
        Point3D(x=box.max.x, y=y, z=box.max.z) + face,
        Point3D(x=box.max.x, y=y, z=box.min.z) + face,
    )


def opening_baselines(
    opening: OpeningDescriptor, wall: WallDescriptor,
) -> dict[str, Line3D]:
    bottom_left, top_left, top_right, bottom_right = opening_corners(opening, wall)
    lines = {
        "left": Line3D(start=bottom_left, end=top_left),
        "right": Line3D(start=bottom_right, end=top_right),
        "header": Line3D(start=top_left, end=top_right),
        "sill": Line3D(start=bottom_left, end=bottom_right),
    }
    return {part: lines[part] for part in FRAME_PARTS[opening.kind]}


def jack_offset_direction(opening: OpeningDescriptor, wall: WallDescriptor) -> Vector3D:
    """Horizontal opening direction crossed with the wall normal."""
    _, top_left, top_right, _ = opening_corners(opening, wall)
    direction = (top_right - top_left).normalized()
    return direction.cross(wall.normal).normalized()


class OpeningFramingRule(FramingRule):
    """Jack studs, header and sill around every opening on the wall."""

    rule_id = "opening.frame"
    name = "Opening Framing"
    priority = 30
    dependencies = ("wall.studs", "wall.plates")

    def applies(self, context: FramingContext) -> bool:
        return len(context.openings) > 0

    def generate(self, context: FramingContext) -> list[FramingMember]:
        members: list[FramingMember] = []
        # Flat openings cut studs but have no direction to frame along
        for opening in context.openings:
            if opening.can_be_framed():
                members.extend(self._frame_opening(opening, context))
        return members

    def _frame_opening(
        self, opening: OpeningDescriptor, context: FramingContext,
    ) -> list[FramingMember]:
        wall = context.wall
        half = context.params.half_offset
        offsets = {
            MemberKind.JACK: jack_offset_direction(opening, wall) * half,
            MemberKind.HEADER: UNIT_Z * half,
            MemberKind.SILL: UNIT_Z * half,
        }

        members: list[FramingMember] = []
        for part, baseline in opening_baselines(opening, wall).items():
            kind = PART_KINDS[part]
            tags = {"side": part} if kind == MemberKind.JACK else {}
            members.append(paired_member(
                kind, baseline, offsets[kind], wall,
                opening_id=opening.id, tags=tags,
            ))
        return members
