"""Maps openings onto the vertical axis of a stud.

An opening's plan footprint is approximated by a circle of radius half its
larger plan extent. A stud whose plan position falls inside that circle
(grown by a clearance tolerance) is obstructed over the opening's full
height.
"""

from __future__ import annotations
from typing import Iterable

from studframe.core.intervals import Interval
from studframe.models import OpeningDescriptor, Point3D


def intersects_stud(
    stud_point: Point3D,
    opening: OpeningDescriptor,
    tolerance: float,
) -> bool:
    """True if the opening horizontally overlaps a stud standing at `stud_point`."""
    box = opening.bounding_box
    if box is None or not box.is_usable():
        return False
    distance = stud_point.horizontal_distance_to(box.center)
    return distance < box.horizontal_radius + tolerance


def obstruction_intervals(
    stud_point: Point3D,
    openings: Iterable[OpeningDescriptor],
    tolerance: float,
) -> list[Interval]:
    """Vertical ranges blocked for a stud at `stud_point`, in opening order (unmerged)."""
    intervals: list[Interval] = []
    for opening in openings:
        if intersects_stud(stud_point, opening, tolerance):
            box = opening.bounding_box
            intervals.append(Interval(box.min.z, box.max.z))
    return intervals
