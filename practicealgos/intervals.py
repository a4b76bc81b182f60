"""Interval problems: a stream summarised as disjoint ranges, and merging."""

from __future__ import annotations

from bisect import bisect_left
from typing import List, Sequence


class SummaryRanges:
    """Collects integers and reports them as disjoint closed intervals."""

    def __init__(self) -> None:
        self._values: List[int] = []

    def add_num(self, val: int) -> None:
        """Record a value; repeats are ignored."""
        pos = bisect_left(self._values, val)
        if pos == len(self._values) or self._values[pos] != val:
            self._values.insert(pos, val)

    def get_intervals(self) -> List[List[int]]:
        """The recorded values as sorted ``[start, end]`` intervals."""
        intervals: List[List[int]] = []
        for value in self._values:
            if intervals and value == intervals[-1][1] + 1:
                intervals[-1][1] = value
            else:
                intervals.append([value, value])
        return intervals


def merge_intervals(intervals: Sequence[Sequence[int]]) -> List[List[int]]:
    """Merge overlapping or touching intervals, sorted by start."""
    if len(intervals) <= 1:
        return [list(iv) for iv in intervals]
    merged: List[List[int]] = []
    for start, end in sorted(list(iv) for iv in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged