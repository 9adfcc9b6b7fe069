"""Opening analysis — decide which openings take part in framing a wall."""

from __future__ import annotations
from typing import Iterable

from studframe.models import FramingContext, OpeningDescriptor


class OpeningAnalyzer:
    """Resolves the openings hosted on the context's wall."""

    def analyze(self, context: FramingContext, openings: Iterable[OpeningDescriptor]) -> None:
        """Populate the context's usable and skipped openings, preserving order.

        An opening that still cuts studs but cannot be framed (flat in X) stays
        in `openings` and is also listed in `skipped_openings`.
        """
        usable: list[OpeningDescriptor] = []
        skipped: list[str] = []

        for opening in self._hosted_on(context.wall.id, openings):
            if opening.has_usable_geometry():
                usable.append(opening)
            if not opening.can_be_framed():
                skipped.append(opening.id)

        context.openings = usable
        context.skipped_openings = skipped

    def _hosted_on(
        self, wall_id: str, openings: Iterable[OpeningDescriptor],
    ) -> list[OpeningDescriptor]:
        """Openings without a host id are taken to belong to the wall."""
        return [
            o for o in openings
            if not o.host_wall_id or o.host_wall_id == wall_id
        ]
