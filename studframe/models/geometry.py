"""Geometric primitives used throughout the framer.

World-vertical is +Z.
"""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Vector3D(BaseModel):
    """Free 3D vector for directions and offsets."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        ln = self.length()
        if ln < 1e-10:
            return Vector3D(x=0.0, y=0.0, z=0.0)
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    def is_zero(self) -> bool:
        return self.length() < 1e-10

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __neg__(self) -> Vector3D:
        return Vector3D(x=-self.x, y=-self.y, z=-self.z)


UNIT_Z = Vector3D(x=0.0, y=0.0, z=1.0)


class Point3D(BaseModel):
    """Point in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def horizontal_distance_to(self, other: Point3D) -> float:
        """Distance measured on the XY plane, ignoring elevation."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def lerp(self, other: Point3D, t: float) -> Point3D:
        return Point3D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
            z=self.z + (other.z - self.z) * t,
        )

    def with_z(self, z: float) -> Point3D:
        return Point3D(x=self.x, y=self.y, z=z)

    def __add__(self, other: Vector3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Point3D) -> Vector3D:
        return Vector3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)


class Line3D(BaseModel):
    """Bounded straight curve between two points."""
    model_config = ConfigDict(frozen=True)

    start: Point3D
    end: Point3D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def direction(self) -> Vector3D:
        return (self.end - self.start).normalized()

    def point_at(self, t: float) -> Point3D:
        """Point at normalized parameter t (0 = start, 1 = end)."""
        return self.start.lerp(self.end, t)

    def translated(self, offset: Vector3D) -> Line3D:
        return Line3D(start=self.start + offset, end=self.end + offset)

    def distance_to_point(self, point: Point3D) -> float:
        """Perpendicular distance from a point to the infinite supporting line."""
        axis = self.end - self.start
        ln = axis.length()
        if ln < 1e-10:
            return self.start.distance_to(point)
        return (point - self.start).cross(axis).length() / ln


class BoundingBox(BaseModel):
    """Axis-aligned box given by its min and max corners."""
    model_config = ConfigDict(frozen=True)

    min: Point3D
    max: Point3D

    @property
    def center(self) -> Point3D:
        return self.min.lerp(self.max, 0.5)

    @property
    def size_x(self) -> float:
        return abs(self.max.x - self.min.x)

    @property
    def size_y(self) -> float:
        return abs(self.max.y - self.min.y)

    @property
    def horizontal_radius(self) -> float:
        """Half the larger plan extent; a circle standing in for the footprint."""
        return max(self.size_x, self.size_y) / 2

    def is_usable(self) -> bool:
        return self.max.z > self.min.z
