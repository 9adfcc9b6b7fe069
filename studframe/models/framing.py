"""Framing output models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .geometry import Line3D, Vector3D


class MemberKind(str, Enum):
    VERTICAL_STUD = "vertical_stud"
    CORNER_STUD = "corner_stud"
    PLATE = "plate"
    JACK = "jack"
    HEADER = "header"
    SILL = "sill"


class FramingMember(BaseModel):
    """
    One nominal piece of framing, drawn as two parallel curves.

    `primary` and `secondary` are the baseline shifted by +offset and
    -offset respectively; the host draws both on a sketch plane whose
    normal is `plane_normal`.
    """
    kind: MemberKind
    primary: Line3D
    secondary: Line3D
    plane_normal: Vector3D
    wall_id: str = ""
    opening_id: str | None = None
    tags: dict[str, str] = {}  # Extensible metadata (plate position, jack side, ...)

    def curves(self) -> tuple[Line3D, Line3D]:
        return self.primary, self.secondary


class FramingLayout(BaseModel):
    """The complete framing generated for one wall."""
    wall_id: str
    members: list[FramingMember]
    skipped_openings: list[str] = []
    stats: FrameStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = FrameStats.from_members(self.members)

    def of_kind(self, kind: MemberKind) -> list[FramingMember]:
        return [m for m in self.members if m.kind == kind]


class FrameStats(BaseModel):
    """Summary statistics for a generated layout."""
    total_members: int = 0
    total_curves: int = 0
    vertical_studs: int = 0
    corner_studs: int = 0
    plates: int = 0
    jacks: int = 0
    headers: int = 0
    sills: int = 0

    @classmethod
    def from_members(cls, members: list[FramingMember]) -> FrameStats:
        counts = {kind: 0 for kind in MemberKind}
        for m in members:
            counts[m.kind] += 1
        return cls(
            total_members=len(members),
            total_curves=2 * len(members),
            vertical_studs=counts[MemberKind.VERTICAL_STUD],
            corner_studs=counts[MemberKind.CORNER_STUD],
            plates=counts[MemberKind.PLATE],
            jacks=counts[MemberKind.JACK],
            headers=counts[MemberKind.HEADER],
            sills=counts[MemberKind.SILL],
        )
