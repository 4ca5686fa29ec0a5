"""Smallest span needed to choose k colour groups fully inside it."""

import heapq
from collections.abc import Iterable


def min_span(groups: Iterable[Iterable[int]], k: int) -> int:
    """Return the minimal ``R - L`` over choices of ``k`` groups.

    Each group is reduced to the interval between its smallest and largest
    value; the result is the smallest width of a range [L, R] containing
    ``k`` of these intervals.
    """
    intervals = []
    for group in groups:
        points = list(group)
        if not points:
            raise ValueError("every group must contain at least one value")
        intervals.append((min(points), max(points)))
    if not 1 <= k <= len(intervals):
        raise ValueError(f"k must be between 1 and {len(intervals)}, got {k}")
    intervals.sort()

    largest_kept: list[int] = []  # max-heap of the k smallest right ends
    best: int | None = None
    for low, high in reversed(intervals):
        heapq.heappush(largest_kept, -high)
        if len(largest_kept) > k:
            heapq.heappop(largest_kept)
        if len(largest_kept) == k:
            span = -largest_kept[0] - low
            best = span if best is None else min(best, span)
    assert best is not None
    return best