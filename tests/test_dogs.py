import pytest

from arithtasks.dogs import dogs_attacking, is_aggressive


def test_first_minute_aggressive():
    assert is_aggressive(1, 2, 3) is True


def test_last_aggressive_minute():
    assert is_aggressive(2, 2, 3) is True


def test_first_calm_minute():
    assert is_aggressive(3, 2, 3) is False


def test_end_of_period_is_calm():
    assert is_aggressive(5, 2, 3) is False


def test_period_repeats():
    for minute in range(1, 20):
        assert is_aggressive(minute, 2, 3) == is_aggressive(minute + 5, 2, 3)


def test_zero_period_raises():
    with pytest.raises(ZeroDivisionError):
        is_aggressive(1, 0, 0)


def test_both_dogs_attack():
    assert dogs_attacking(1, (2, 2), (3, 1)) == 2


def test_no_dog_attacks():
    assert dogs_attacking(4, (2, 2), (3, 1)) == 0


def test_count_matches_individual_flags():
    first, second = (2, 2), (3, 4)
    for minute in range(1, 30):
        expected = int(is_aggressive(minute, *first)) + int(
            is_aggressive(minute, *second)
        )
        assert dogs_attacking(minute, first, second) == expected