import pytest

from arithtasks.basics import highest_power_of_two, middle_value


@pytest.mark.parametrize(
    "a, b, c",
    [(1, 2, 3), (3, 2, 1), (2, 1, 3), (2, 3, 1), (1, 3, 2), (3, 1, 2)],
)
def test_middle_value_any_order(a, b, c):
    assert middle_value(a, b, c) == 2


def test_middle_value_large_magnitudes():
    assert middle_value(-10**9, 10**9, 0) == 0


def test_middle_value_falls_back_to_last_when_equal():
    assert middle_value(5, 5, 7) == 7


@pytest.mark.parametrize("n", [1, 2, 64, 1024])
def test_power_of_two_is_itself(n):
    assert highest_power_of_two(n) == n


@pytest.mark.parametrize("n", [3, 5, 100, 999_999, 10**18 + 7])
def test_power_of_two_bounds(n):
    result = highest_power_of_two(n)
    assert result & (result - 1) == 0
    assert result <= n < 2 * result


@pytest.mark.parametrize("n", [0, -5])
def test_power_of_two_small_inputs(n):
    assert highest_power_of_two(n) == 1