"""Counting candies eaten from three vases visited left, middle, right, middle."""


def candies_eaten(left: int, middle: int, right: int) -> int:
    """Return how many candies are eaten before an empty vase is reached.

    The vases are visited in the repeating order left, middle, right, middle.
    """
    cycles = min(left, middle // 2, right)
    eaten = cycles * 4
    remaining = [left - cycles, middle - 2 * cycles, right - cycles]
    for vase in (0, 1, 2, 1):
        if remaining[vase] <= 0:
            break
        remaining[vase] -= 1
        eaten += 1
    return eaten