"""Field and corner studs, cut around the wall's openings.

Field studs stand at every stud spacing along the centerline; corner
studs stand at both centerline endpoints. A stud crossing an opening is
split into the pieces above and below it.
"""

from __future__ import annotations

from studframe.rules.base import FramingRule
from studframe.core.intervals import merge, cut
from studframe.core.layout import field_stud_points, corner_points, stud_baseline
from studframe.core.obstruction import obstruction_intervals
from studframe.core.offset import paired_member
from studframe.models import (
    FramingContext, FramingMember, MemberKind, Point3D, Line3D,
)


class WallStudRule(FramingRule):
    """Vertical studs: field studs at regular spacing, then the two corners."""

    rule_id = "wall.studs"
    name = "Wall Studs"
    priority = 10

    def generate(self, context: FramingContext) -> list[FramingMember]:
        members: list[FramingMember] = []
        for point in field_stud_points(context.wall, context.params):
            members.extend(self._stud_with_cuts(point, MemberKind.VERTICAL_STUD, context))

        start, end = corner_points(context.wall)
        members.extend(self._stud_with_cuts(start, MemberKind.CORNER_STUD, context, "start"))
        members.extend(self._stud_with_cuts(end, MemberKind.CORNER_STUD, context, "end"))
        return members

    def _stud_with_cuts(
        self,
        point: Point3D,
        kind: MemberKind,
        context: FramingContext,
        corner: str | None = None,
    ) -> list[FramingMember]:
        wall = context.wall
        params = context.params
        baseline = stud_baseline(point, wall)

        intervals = obstruction_intervals(
            baseline.start, context.openings, params.opening_proximity_tolerance,
        )
        segments = cut(
            baseline.start.z, baseline.end.z, merge(intervals), params.min_segment_length,
        )

        offset = wall.direction * params.half_offset
        members: list[FramingMember] = []
        for index, (z0, z1) in enumerate(segments):
            tags = {"segment": str(index)}
            if corner is not None:
                tags["corner"] = corner
            piece = Line3D(start=baseline.start.with_z(z0), end=baseline.start.with_z(z1))
            members.append(paired_member(kind, piece, offset, wall, tags=tags))
        return members
