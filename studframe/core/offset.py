"""Paired-offset generation.

Every framing member is emitted as two copies of its baseline, shifted by
+offset and -offset, standing for the two faces of the piece of lumber.
This is the only place geometry gets duplicated.
"""

from __future__ import annotations

from studframe.models import (
    FramingMember, MemberKind, Line3D, Vector3D, WallDescriptor,
)


def pair(baseline: Line3D, offset: Vector3D) -> tuple[Line3D, Line3D]:
    return baseline.translated(offset), baseline.translated(-offset)


def paired_member(
    kind: MemberKind,
    baseline: Line3D,
    offset: Vector3D,
    wall: WallDescriptor,
    opening_id: str | None = None,
    tags: dict[str, str] | None = None,
) -> FramingMember:
    primary, secondary = pair(baseline, offset)
    return FramingMember(
        kind=kind,
        primary=primary,
        secondary=secondary,
        plane_normal=wall.normal,
        wall_id=wall.id,
        opening_id=opening_id,
        tags=tags or {},
    )
