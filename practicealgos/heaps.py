"""Heap-based problems: running k-th largest, stone smashing, top-k queries."""

from __future__ import annotations

import heapq
from collections import Counter
from typing import Iterable, List, Sequence


class KthLargest:
    """Tracks the k-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self._k = k
        self._heap: List[int] = []
        for value in nums:
            self._push(value)

    def _push(self, val: int) -> None:
        if len(self._heap) < self._k:
            heapq.heappush(self._heap, val)
        else:
            heapq.heappushpop(self._heap, val)

    def add(self, val: int) -> int:
        """Add a value and return the current k-th largest."""
        self._push(val)
        return self._heap[0]


def last_stone_weight(stones: Sequence[int]) -> int:
    """Weight left after repeatedly smashing the two heaviest stones (0 if none)."""
    heap = [-s for s in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, second - heaviest)
    return -heap[0] if heap else 0


def _squared_distance(point: Sequence[int]) -> int:
    return point[0] * point[0] + point[1] * point[1]


def k_closest(points: Sequence[Sequence[int]], k: int) -> List[List[int]]:
    """The k points nearest the origin, farthest of them first."""
    if k <= 0:
        return []
    nearest = heapq.nsmallest(k, points, key=_squared_distance)
    return [list(p) for p in sorted(nearest, key=_squared_distance, reverse=True)]


def top_k_frequent(nums: Iterable[int], k: int) -> List[int]:
    """The k most frequent values, least frequent of them first."""
    if k <= 0:
        return []
    counts = Counter(nums)
    chosen = heapq.nlargest(k, counts.items(), key=lambda item: item[1])
    return [value for value, _ in reversed(chosen)]