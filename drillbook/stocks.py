"""Maximum stock trading profit with a limited number of transactions."""

from __future__ import annotations

import math
from typing import List, Sequence


def max_profit_two(prices: Sequence[int]) -> int:
    """Return the best profit from at most two buy-then-sell transactions.

    An empty price list gives 0.
    """
    if not prices:
        return 0
    first_buy = second_buy = -math.inf
    first_sell = second_sell = 0
    for price in prices:
        first_buy = max(first_buy, -price)
        first_sell = max(first_sell, first_buy + price)
        second_buy = max(second_buy, first_sell - price)
        second_sell = max(second_sell, second_buy + price)
    return second_sell


def max_profit_k(prices: Sequence[int], k: int) -> int:
    """Return the value of the last of ``k`` chained buy/sell states.

    The first buy state costs the day's price; each later buy state is seeded
    with the previous sell state plus the day's price. With ``k == 1`` this is
    the best single-transaction profit. An empty price list gives 0; otherwise
    ``k`` must be at least 1.
    """
    if not prices:
        return 0
    if k < 1:
        raise ValueError("k must be at least 1")
    buys: List[float] = [-math.inf] * k
    sells: List[int] = [0] * k
    for price in prices:
        seed = -price
        for stage in range(k):
            buys[stage] = max(buys[stage], seed)
            sells[stage] = max(sells[stage], buys[stage] + price)
            seed = sells[stage] + price
    return sells[-1]