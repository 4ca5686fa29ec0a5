"""Choosing the cyclic fragment of a ring of letters by suffix ranks."""

from itertools import pairwise


def _rotation_order(text: str) -> list[int]:
    """Start positions of ``text`` ordered by the suffixes of ``text * 2``."""
    doubled = text * 2
    size = len(doubled)
    rank = [ord(ch) for ch in doubled]
    order = list(range(size))
    step = 1
    while step < size:
        keys = [
            (rank[i], rank[i + step] if i + step < size else -1)
            for i in range(size)
        ]
        order.sort(key=keys.__getitem__)
        new_rank = [0] * size
        for prev, cur in pairwise(order):
            new_rank[cur] = new_rank[prev] + (keys[prev] != keys[cur])
        rank = new_rank
        step <<= 1
    return [i for i in order if i < len(text)]


def _covers(ranks: list[int], threshold: int, k: int) -> bool:
    """Tell whether windows of length ``k`` from well-ranked starts cover the ring."""
    n = len(ranks)
    segments: list[tuple[int, int]] = []
    for start, rank in enumerate(ranks):
        if rank < threshold:
            continue
        end = start + k - 1
        if end < n:
            segments.append((start, end))
        else:
            segments.append((start, n - 1))
            segments.append((0, end % n))
    if not segments:
        return False
    segments.sort()

    idx = 0
    best = -1
    while idx < len(segments) and segments[idx][0] <= 0:
        best = max(best, segments[idx][1])
        idx += 1
    if best < 0:
        return False
    covered = best
    while covered < n - 1:
        reach = covered
        while idx < len(segments) and segments[idx][0] <= covered + 1:
            reach = max(reach, segments[idx][1])
            idx += 1
        if reach == covered:
            return False
        covered = reach
    return True


def best_fragment(text: str, k: int) -> str:
    """Return the ``k``-letter cyclic fragment chosen from ``text``.

    The highest rank threshold is found such that windows of ``k`` letters
    starting at positions of at least that rank still cover the whole ring;
    the fragment starts at the position holding that rank.
    """
    n = len(text)
    if n == 0:
        raise ValueError("text must not be empty")
    order = _rotation_order(text)
    ranks = [0] * n
    for rank, position in enumerate(order):
        ranks[position] = rank

    low, high, answer = 0, n - 1, 0
    while low <= high:
        mid = (low + high) // 2
        if _covers(ranks, mid, k):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1

    start = order[answer]
    return "".join(text[(start + i) % n] for i in range(k))