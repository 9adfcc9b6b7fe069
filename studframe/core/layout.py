"""Stud layout — where field and corner studs stand along a wall."""

from __future__ import annotations
import math

from studframe.models import WallDescriptor, FramingParams, Point3D, Line3D, UNIT_Z


def field_stud_offsets(length: float, spacing: float, end_epsilon: float) -> list[float]:
    """Distances along the centerline of the regularly spaced field studs.

    Studs start one spacing in from the wall start; a stud landing on the
    wall end (within `end_epsilon`) is left to the corner stud.
    """
    count = math.floor(length / spacing)
    offsets: list[float] = []
    for i in range(1, count + 1):
        d = i * spacing
        if abs(d - length) < end_epsilon:
            continue
        offsets.append(d)
    return offsets


def field_stud_points(wall: WallDescriptor, params: FramingParams) -> list[Point3D]:
    length = wall.length
    return [
        wall.centerline.point_at(d / length)
        for d in field_stud_offsets(length, params.stud_spacing, params.end_epsilon)
    ]


def corner_points(wall: WallDescriptor) -> tuple[Point3D, Point3D]:
    return wall.centerline.start, wall.centerline.end


def stud_baseline(point: Point3D, wall: WallDescriptor) -> Line3D:
    """Full-height vertical baseline for a stud at a centerline point.

    The base is pushed half the wall width onto the framing face and raised
    by the wall's base elevation.
    """
    base = point + wall.normal * (wall.width * 0.5) + UNIT_Z * wall.base_elevation
    return Line3D(start=base, end=base + UNIT_Z * wall.height)
