"""Shared fixtures: a 10 ft test wall along X, a few openings, and factories."""

import pytest

from studframe.models import (
    WallDescriptor, OpeningDescriptor, OpeningKind, BoundingBox, Point3D, Line3D,
    FramingParams,
)


@pytest.fixture
def make_wall():
    """Factory for walls; straight along +X unless `end` is given."""
    def _make(length=10.0, width=1.0, height=8.0, base_elevation=0.0,
              wall_id="W1", start=(0, 0, 0), end=None):
        if end is None:
            end = (start[0] + length, start[1], start[2])
        return WallDescriptor(
            id=wall_id,
            centerline=Line3D(
                start=Point3D(x=start[0], y=start[1], z=start[2]),
                end=Point3D(x=end[0], y=end[1], z=end[2]),
            ),
            width=width,
            height=height,
            base_elevation=base_elevation,
        )
    return _make


@pytest.fixture
def make_opening():
    """Factory for openings spanning y -0.5..0.5 unless a y range is given."""
    def _make(kind, x_min, x_max, z_min, z_max, opening_id="O1", host="W1",
              y_min=-0.5, y_max=0.5):
        return OpeningDescriptor(
            id=opening_id,
            kind=kind,
            bounding_box=BoundingBox(
                min=Point3D(x=x_min, y=y_min, z=z_min),
                max=Point3D(x=x_max, y=y_max, z=z_max),
            ),
            host_wall_id=host,
        )
    return _make


@pytest.fixture
def wall(make_wall):
    return make_wall()


@pytest.fixture
def params():
    return FramingParams()


@pytest.fixture
def window(make_opening):
    return make_opening(OpeningKind.WINDOW, 4.5, 7.5, 3.0, 5.0, opening_id="win")


@pytest.fixture
def door(make_opening):
    return make_opening(OpeningKind.DOOR, 4.5, 7.5, 3.0, 5.0, opening_id="door")
