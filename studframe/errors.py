"""Exceptions raised by the framer and its sinks."""

from __future__ import annotations

from studframe.models.framing import FramingMember


class FramingError(Exception):
    """Base class for all framing errors."""


class InvalidWallError(FramingError):
    """The wall descriptor violates its invariants; nothing can be framed."""

    def __init__(self, wall_id: str, problems: list[str]) -> None:
        self.wall_id = wall_id
        self.problems = problems
        super().__init__(f"Wall {wall_id!r} cannot be framed: {'; '.join(problems)}")


class SinkRejectionError(FramingError):
    """A persistence sink refused a single member."""

    def __init__(self, member: FramingMember, reason: str) -> None:
        self.member = member
        self.reason = reason
        super().__init__(f"{member.kind.value} rejected: {reason}")
