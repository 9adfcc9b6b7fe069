"""Stud layout planner and opening obstruction mapping."""

import pytest

from studframe.core.intervals import Interval
from studframe.core.layout import (
    field_stud_offsets, field_stud_points, corner_points, stud_baseline,
)
from studframe.core.obstruction import intersects_stud, obstruction_intervals
from studframe.models import (
    FramingParams, OpeningDescriptor, OpeningKind, Point3D,
)


def test_field_stud_offsets_skip_wall_end():
    assert field_stud_offsets(10.0, 2.0, 0.01) == [2.0, 4.0, 6.0, 8.0]


def test_field_stud_offsets_keep_near_end_stud():
    # 10.0 is 0.05 short of the end, outside end_epsilon
    assert field_stud_offsets(10.05, 2.0, 0.01) == [2.0, 4.0, 6.0, 8.0, 10.0]


def test_field_stud_offsets_short_wall():
    assert field_stud_offsets(1.5, 2.0, 0.01) == []


def test_field_stud_points_follow_centerline(make_wall):
    wall = make_wall(base_elevation=3.0)
    points = field_stud_points(wall, FramingParams())
    assert [p.x for p in points] == pytest.approx([2, 4, 6, 8])
    assert all(p.y == 0 and p.z == 0 for p in points)


def test_corner_points_are_centerline_ends(wall):
    start, end = corner_points(wall)
    assert (start.x, end.x) == (0, 10)


def test_stud_baseline_on_framing_face_and_raised(make_wall):
    wall = make_wall(base_elevation=3.0)
    line = stud_baseline(Point3D(x=2, y=0, z=0), wall)
    # normal of a +X wall is -Y
    assert line.start.y == pytest.approx(-0.5)
    assert line.start.z == pytest.approx(3.0)
    assert line.end.z == pytest.approx(11.0)
    assert line.start.x == line.end.x == pytest.approx(2)


def test_opening_near_stud_obstructs_its_height(window):
    # window spans x 4.5..7.5, radius 1.5, center x 6
    assert intersects_stud(Point3D(x=6, y=-0.5, z=0), window, 0.5)
    assert intersects_stud(Point3D(x=4.2, y=-0.5, z=0), window, 0.5)
    assert not intersects_stud(Point3D(x=2, y=-0.5, z=0), window, 0.5)


def test_obstruction_intervals_in_opening_order(make_opening):
    high = make_opening(OpeningKind.WINDOW, 1, 3, 6, 7, opening_id="high")
    low = make_opening(OpeningKind.DOOR, 1, 3, 0, 5, opening_id="low")
    far = make_opening(OpeningKind.WINDOW, 8, 9, 2, 4, opening_id="far")
    stud = Point3D(x=2, y=0, z=0)
    assert obstruction_intervals(stud, [high, low, far], 0.5) == [
        Interval(6, 7), Interval(0, 5),
    ]


def test_opening_without_box_never_obstructs():
    opening = OpeningDescriptor(id="x", kind=OpeningKind.DOOR, host_wall_id="W1")
    assert obstruction_intervals(Point3D(x=0, y=0, z=0), [opening], 0.5) == []


@pytest.mark.parametrize("stud_x, expected", [
    (2.5, False),   # exactly radius 1 + tolerance 0.5 away
    (2.25, True),
])
def test_intersection_distance_is_exclusive(make_opening, stud_x, expected):
    opening = make_opening(OpeningKind.WINDOW, 0.0, 2.0, 3.0, 5.0)
    assert intersects_stud(Point3D(x=stud_x, y=0.0, z=0.0), opening, 0.5) is expected
