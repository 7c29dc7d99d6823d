"""Window sums over prefix sums, the grumpy bookstore owner, and trapped rain water."""

from __future__ import annotations

from itertools import accumulate
from typing import List, Sequence


def window_sums(prefix: Sequence[int], size: int) -> List[int]:
    """Return the sums of every ``size``-long window, given prefix sums starting at 0.

    ``prefix`` holds one more entry than the numbers it was built from, so
    the result has ``len(prefix) - size`` entries.
    """
    if size < 0 or size > len(prefix):
        raise ValueError(f"window size {size} does not fit {len(prefix)} prefix sums")
    return [high - low for low, high in zip(prefix, prefix[size:])]


def _check_shop(customers: Sequence[int], grumpy: Sequence[int], minutes: int) -> None:
    if len(customers) != len(grumpy):
        raise ValueError("customers and grumpy must have the same length")
    if not 0 <= minutes <= len(customers):
        raise ValueError(f"minutes {minutes} does not fit {len(customers)} minutes of trading")


def max_satisfied_brute(
    customers: Sequence[int], grumpy: Sequence[int], minutes: int
) -> int:
    """Return the most satisfied customers when the owner keeps calm for ``minutes``.

    Tries every calm window and recounts the customers outside it.
    """
    _check_shop(customers, grumpy, minutes)
    prefix = [0, *accumulate(customers)]
    best = 0
    for start, calm in enumerate(window_sums(prefix, minutes)):
        outside = sum(
            count
            for minute, (count, cross) in enumerate(zip(customers, grumpy))
            if not cross and not start <= minute < start + minutes
        )
        best = max(best, calm + outside)
    return best


def max_satisfied(customers: Sequence[int], grumpy: Sequence[int], minutes: int) -> int:
    """Return the most satisfied customers when the owner keeps calm for ``minutes``.

    Adds the customers always satisfied to the best window of those lost to
    grumpiness.
    """
    _check_shop(customers, grumpy, minutes)
    always = sum(count for count, cross in zip(customers, grumpy) if not cross)
    lost = [0, *accumulate(count if cross else 0 for count, cross in zip(customers, grumpy))]
    return always + max(window_sums(lost, minutes))


def trap(height: Sequence[int]) -> int:
    """Return how much water the bars of ``height`` hold after rain."""
    if not height:
        return 0
    left = accumulate(height, max)
    right = list(accumulate(reversed(height), max))[::-1]
    return sum(min(lo, hi) - bar for lo, hi, bar in zip(left, right, height))