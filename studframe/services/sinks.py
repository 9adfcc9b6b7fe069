"""Persistence boundary — hand generated members to whatever draws them.

The engine itself performs no I/O. A sink accepts members one at a time;
all-or-nothing behaviour (a host transaction) is the sink's business.
"""

from __future__ import annotations
import logging
from typing import Protocol

from pydantic import BaseModel

from studframe.errors import SinkRejectionError
from studframe.models import FramingLayout, FramingMember, MemberKind

logger = logging.getLogger(__name__)


class MemberSink(Protocol):
    """Anything that can persist a member. Return False to reject it."""

    def emit(self, member: FramingMember) -> bool:
        ...


class ListSink:
    """In-memory sink; keeps every member it accepts."""

    def __init__(self) -> None:
        self.members: list[FramingMember] = []

    def emit(self, member: FramingMember) -> bool:
        self.members.append(member)
        return True


class MemberFailure(BaseModel):
    index: int
    kind: MemberKind
    reason: str


class EmitReport(BaseModel):
    """Outcome of pushing one wall's layout into a sink."""
    wall_id: str
    created: int = 0
    failures: list[MemberFailure] = []
    skipped_openings: list[str] = []

    @property
    def ok(self) -> bool:
        return not self.failures

    def summary(self) -> str:
        text = f"Wall {self.wall_id}: {self.created} framing members created"
        if self.failures:
            text += f", {len(self.failures)} rejected"
        if self.skipped_openings:
            text += f", {len(self.skipped_openings)} openings skipped"
        return text


def emit_layout(layout: FramingLayout, sink: MemberSink) -> EmitReport:
    """
    Emit every member of `layout` in order.

    A rejected member is recorded and emission carries on; nothing is
    retried and earlier members are not rolled back.
    """
    report = EmitReport(wall_id=layout.wall_id, skipped_openings=layout.skipped_openings)

    for index, member in enumerate(layout.members):
        try:
            accepted = sink.emit(member)
            reason = "sink returned failure"
        except SinkRejectionError as exc:
            accepted = False
            reason = exc.reason

        if accepted:
            report.created += 1
        else:
            logger.warning("Wall %s: member %d (%s) rejected: %s",
                           layout.wall_id, index, member.kind.value, reason)
            report.failures.append(MemberFailure(index=index, kind=member.kind, reason=reason))

    logger.info(report.summary())
    return report
