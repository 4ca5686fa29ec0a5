"""Weekly class dates until the end of a non-leap year."""

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def class_dates(month: int, day: int) -> list[tuple[int, int]]:
    """Return every (month, day) of a weekly class from the given date to year end."""
    if month < 1:
        raise ValueError(f"month must be at least 1, got {month}")
    dates: list[tuple[int, int]] = []
    while month <= 12:
        dates.append((month, day))
        day += 7
        while month <= 12 and day > _DAYS_IN_MONTH[month - 1]:
            day -= _DAYS_IN_MONTH[month - 1]
            month += 1
    return dates