import pytest

from arithtasks.boat import best_boat

GRID = ["abca", "cbab", "aacb"]
VALUES = [3, -2, 5]


def test_all_zero_values():
    assert best_boat([0, 0], ["ab", "ba"]) == 0


def test_smallest_positive_grid():
    assert best_boat([1], ["aa"]) == 3


@pytest.mark.parametrize("factor", [2, 3, 10])
def test_scaling_values_scales_answer(factor):
    scaled = [v * factor for v in VALUES]
    assert best_boat(scaled, GRID) == factor * best_boat(VALUES, GRID)


def test_raising_a_value_never_lowers_answer():
    raised = [VALUES[0], VALUES[1] + 4, VALUES[2]]
    assert best_boat(raised, GRID) >= best_boat(VALUES, GRID)


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        best_boat([1], [])


def test_narrow_grid_raises():
    with pytest.raises(ValueError):
        best_boat([1], ["a", "a"])


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        best_boat([1], ["aa", "a"])


def test_unknown_letter_raises():
    with pytest.raises(ValueError):
        best_boat([1], ["az"])