"""Small arithmetic helpers: the middle of three numbers and powers of two."""


def middle_value(a: int, b: int, c: int) -> int:
    """Return the number that is neither the smallest nor the largest.

    Meant for three distinct numbers; when no value lies strictly between
    the other two, ``c`` is returned.
    """
    if b < a < c or c < a < b:
        return a
    if a < b < c or c < b < a:
        return b
    return c


def highest_power_of_two(n: int) -> int:
    """Return the largest power of two not exceeding ``n`` (1 for n < 2)."""
    if n < 2:
        return 1
    return 1 << (n.bit_length() - 1)