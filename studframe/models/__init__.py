from .geometry import Point3D, Vector3D, Line3D, BoundingBox, UNIT_Z
from .building import WallDescriptor, OpeningDescriptor, OpeningKind
from .framing import FramingMember, FramingLayout, MemberKind, FrameStats
from .parameters import FramingParams, GenerationConfig
from .context import FramingContext

__all__ = [
    "Point3D", "Vector3D", "Line3D", "BoundingBox", "UNIT_Z",
    "WallDescriptor", "OpeningDescriptor", "OpeningKind",
    "FramingMember", "FramingLayout", "MemberKind", "FrameStats",
    "FramingParams", "GenerationConfig",
    "FramingContext",
]
