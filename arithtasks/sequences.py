"""Longest contiguous run containing exactly two distinct values."""

from collections import Counter
from collections.abc import Iterable


def longest_two_kind_run(values: Iterable[int]) -> int:
    """Return the length of the longest window with exactly two distinct values.

    Returns 0 when no such window exists.
    """
    items = list(values)
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    for right, value in enumerate(items):
        counts[value] += 1
        while len(counts) > 2:
            dropped = items[left]
            counts[dropped] -= 1
            if counts[dropped] == 0:
                del counts[dropped]
            left += 1
        if len(counts) == 2:
            best = max(best, right - left + 1)
    return best