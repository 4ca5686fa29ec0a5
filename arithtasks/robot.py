"""Maximum boxes a warehouse robot can shelve in one working day."""

from bisect import bisect_left
from collections.abc import Sequence


def max_boxes(shelves: Sequence[int], passes: int) -> int:
    """Return the most boxes placeable walking the track ``passes`` times.

    Odd passes go along the track, even passes come back; the boxes form a
    strictly increasing sequence over the concatenated walk.
    """
    tails: list[int] = []
    for walk in range(1, passes + 1):
        order = shelves if walk % 2 else reversed(shelves)
        for shelf in order:
            pos = bisect_left(tails, shelf)
            if pos == len(tails):
                tails.append(shelf)
            else:
                tails[pos] = shelf
    return len(tails)