"""Best-valued boat shape in a grid of lettered cells."""

from collections.abc import Iterable, Sequence


def _running_best(column: Sequence[int]) -> list[int]:
    """Best sum of a contiguous run ending at each position."""
    result = []
    current = 0
    for cell in column:
        current = cell + max(current, 0)
        result.append(current)
    return result


def best_boat(values: Sequence[int], rows: Iterable[str]) -> int:
    """Return the best boat value for a grid given top row first.

    ``values[i]`` is the worth of letter ``chr(ord('a') + i)``.
    """
    rows = list(rows)
    if not rows:
        raise ValueError("grid must have at least one row")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    if width < 2:
        raise ValueError("grid must be at least two columns wide")

    def worth(letter: str) -> int:
        index = ord(letter) - ord("a")
        if not 0 <= index < len(values):
            raise ValueError(f"no value given for letter {letter!r}")
        return values[index]

    grid = [[worth(ch) for ch in row] for row in reversed(rows)]
    columns = list(zip(*grid))
    below = [_running_best(col) for col in columns]
    above = [_running_best(col[::-1])[::-1] for col in columns]

    answer: int | None = None
    for r, row in enumerate(grid):
        prefix = 0
        min_prefix = 0
        best_tower: int | None = None
        previous = None
        for j, cell in enumerate(row):
            if previous is not None:
                tower = above[j - 1][r] - previous - min_prefix
                best_tower = tower if best_tower is None else max(best_tower, tower)
            prefix += cell
            min_prefix = min(min_prefix, prefix)
            if best_tower is not None:
                tail = above[j][r] + below[j][r] - cell
                total = best_tower + prefix + tail
                answer = total if answer is None else max(answer, total)
            previous = cell
    assert answer is not None
    return answer