"""Wizard currency arithmetic and minimum-coin payments."""

from collections.abc import Iterable

KNUTS_PER_SICKLE = 29
SICKLES_PER_GALLEON = 17
KNUTS_PER_GALLEON = KNUTS_PER_SICKLE * SICKLES_PER_GALLEON

_DENOMINATIONS = (50, 20, 10, 5)


def _to_knuts(amount: tuple[int, int, int]) -> int:
    galleons, sickles, knuts = amount
    return galleons * KNUTS_PER_GALLEON + sickles * KNUTS_PER_SICKLE + knuts


def _from_knuts(total: int) -> tuple[int, int, int]:
    galleons, rest = divmod(total, KNUTS_PER_GALLEON)
    sickles, knuts = divmod(rest, KNUTS_PER_SICKLE)
    return galleons, sickles, knuts


def remaining_money(
    purse: tuple[int, int, int],
    purchases: Iterable[tuple[int, int, int]],
) -> tuple[int, int, int] | None:
    """Return (galleons, sickles, knuts) left after all purchases.

    Returns None when the purchases cost more than the purse holds.
    """
    total = _to_knuts(purse) - sum(_to_knuts(cost) for cost in purchases)
    if total < 0:
        return None
    return _from_knuts(total)


def pay_minimum_coins(
    c5: int, c10: int, c20: int, c50: int, amount: int
) -> tuple[int, int, int, int, int] | None:
    """Pay ``amount`` kopecks greedily from the largest coin down.

    Returns (fives, tens, twenties, fifties, total coins) or None when the
    amount cannot be paid this way.
    """
    if amount < 0:
        return None
    available = dict(zip(_DENOMINATIONS, (c50, c20, c10, c5)))
    used: dict[int, int] = {}
    for value in _DENOMINATIONS:
        take = min(amount // value, available[value])
        used[value] = take
        amount -= take * value
    if amount != 0:
        return None
    return used[5], used[10], used[20], used[50], sum(used.values())