"""1-D interval algebra used to cut studs around openings."""

from __future__ import annotations
from typing import Iterable, NamedTuple


class Interval(NamedTuple):
    """Closed range of elevations blocked by an opening."""
    min: float
    max: float


def merge(intervals: Iterable[Interval]) -> list[Interval]:
    """
    Merge overlapping intervals into a sorted, non-overlapping cover.

    Touching intervals (current.min == last.max) are merged too.
    """
    merged: list[Interval] = []
    for current in sorted(intervals, key=lambda i: i.min):
        if merged and current.min <= merged[-1].max:
            last = merged[-1]
            merged[-1] = Interval(last.min, max(last.max, current.max))
        else:
            merged.append(Interval(current.min, current.max))
    return merged


def cut(
    line_start: float,
    line_end: float,
    obstructions: list[Interval],
    min_segment_length: float,
) -> list[tuple[float, float]]:
    """
    Split [line_start, line_end] into the pieces lying outside `obstructions`.

    `obstructions` must be sorted ascending (the output of `merge`). Pieces
    not longer than `min_segment_length` are dropped. Segments never leave
    the line, even when an obstruction reaches past either end.
    """
    if not obstructions:
        return [(line_start, line_end)]

    segments: list[tuple[float, float]] = []
    cursor = line_start
    for obstruction in obstructions:
        stop = min(obstruction.min, line_end)
        if cursor < stop - min_segment_length:
            segments.append((cursor, stop))
        cursor = max(cursor, obstruction.max)

    if cursor < line_end - min_segment_length:
        segments.append((cursor, line_end))

    return segments
