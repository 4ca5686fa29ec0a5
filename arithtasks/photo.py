"""Luck of photographs of consecutive trees."""

from bisect import bisect_left, bisect_right
from collections import defaultdict
from collections.abc import Iterable


class PhotoSession:
    """Answers luck queries over a fixed row of tree heights (1-based)."""

    def __init__(self, heights: Iterable[int]) -> None:
        positions: defaultdict[int, list[int]] = defaultdict(list)
        for index, height in enumerate(heights, start=1):
            positions[height - index].append(index)
        self._positions = dict(positions)

    def luck(self, left: int, right: int, aperture: int) -> int:
        """Count trees in [left, right] whose height matches the ideal photo."""
        indices = self._positions.get(aperture - left)
        if not indices:
            return 0
        return max(0, bisect_right(indices, right) - bisect_left(indices, left))