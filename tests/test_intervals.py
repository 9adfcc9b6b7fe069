"""Interval merge and cut."""

import pytest

from studframe.core.intervals import Interval, merge, cut


def covered(intervals, z):
    return any(i.min <= z <= i.max for i in intervals)


def test_merge_empty():
    assert merge([]) == []


def test_merge_sorts_and_joins_overlaps():
    result = merge([Interval(5, 7), Interval(1, 3), Interval(2, 4)])
    assert result == [Interval(1, 4), Interval(5, 7)]


def test_merge_touching_intervals():
    assert merge([Interval(0, 2), Interval(2, 3)]) == [Interval(0, 3)]


def test_merge_contained_interval_keeps_outer_max():
    assert merge([Interval(0, 10), Interval(2, 3)]) == [Interval(0, 10)]


@pytest.mark.parametrize("intervals", [
    [Interval(3, 5)],
    [Interval(0, 1), Interval(0.5, 2), Interval(4, 6), Interval(5.5, 5.8)],
    [Interval(-1, 0), Interval(7, 9), Interval(1, 2), Interval(1.5, 7)],
])
def test_merge_is_idempotent_and_preserves_coverage(intervals):
    once = merge(intervals)
    assert merge(once) == once
    for a, b in zip(once, once[1:]):
        assert a.max < b.min
    samples = [x / 10 for x in range(-20, 101)]
    for z in samples:
        assert covered(once, z) == covered(intervals, z)


def test_cut_without_obstructions_returns_whole_line():
    assert cut(0.0, 8.0, [], 0.1) == [(0.0, 8.0)]


def test_cut_around_single_obstruction():
    assert cut(0.0, 8.0, [Interval(3, 5)], 0.1) == [(0.0, 3), (5, 8.0)]


def test_cut_drops_short_slivers():
    # 0.05 below the opening and 0.08 above are under the minimum
    assert cut(0.0, 8.0, [Interval(0.05, 7.92)], 0.1) == []


def test_cut_obstruction_covering_line():
    assert cut(0.0, 8.0, [Interval(-1, 9)], 0.1) == []


def test_cut_obstruction_below_line_does_not_extend_segment():
    assert cut(2.0, 8.0, [Interval(-3, -1)], 0.1) == [(2.0, 8.0)]


def test_cut_obstruction_past_top_is_clamped():
    assert cut(0.0, 8.0, [Interval(6, 12)], 0.1) == [(0.0, 6)]


def test_cut_segments_avoid_merged_obstructions():
    obstructions = merge([Interval(1, 2), Interval(1.5, 3), Interval(5, 6)])
    segments = cut(0.0, 8.0, obstructions, 0.1)
    assert segments == [(0.0, 1), (3, 5), (6, 8.0)]
    for lo, hi in segments:
        for o in obstructions:
            assert min(hi, o.max) - max(lo, o.min) <= 1e-9


@pytest.mark.parametrize("obstruction, expected", [
    # pieces exactly min_segment_length long are dropped
    (Interval(0.5, 7.5), []),
    (Interval(0.75, 7.25), [(0.0, 0.75), (7.25, 8.0)]),
])
def test_cut_minimum_length_is_exclusive(obstruction, expected):
    assert cut(0.0, 8.0, [obstruction], 0.5) == expected
