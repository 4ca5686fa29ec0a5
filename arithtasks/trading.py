"""Best profit from buying cheap computers and selling them dear."""

from collections.abc import Iterable
from itertools import accumulate


def max_profit(sell_prices: Iterable[int], buy_offers: Iterable[int]) -> int:
    """Return the greatest profit from pairing sellers with buyers."""
    costs = accumulate(sorted(sell_prices))
    revenues = accumulate(sorted(buy_offers, reverse=True))
    return max((r - c for c, r in zip(costs, revenues)), default=0)