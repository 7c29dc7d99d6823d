"""Best subarray sums and products by running maximum and minimum tracking."""

from __future__ import annotations

import operator
from itertools import accumulate, chain
from typing import Sequence

from drillbook.enumeration import suffixes


def max_absolute_sum(nums: Sequence[int]) -> int:
    """Return the largest absolute value of any subarray sum; empty input gives 0."""
    if not nums:
        return 0
    high = low = nums[0]
    best = abs(nums[0])
    for value in nums[1:]:
        high, low = (
            max(high + value, value, low + value),
            min(low + value, value, high + value),
        )
        best = max(abs(high), best, abs(low))
    return best


def max_circular_sum(nums: Sequence[int]) -> int:
    """Return the largest subarray sum when the array wraps around; empty gives 0."""
    if not nums:
        return 0
    total = sum(nums)
    high = low = best_high = best_low = nums[0]
    for value in nums[1:]:
        high = max(high + value, value)
        low = min(low + value, value)
        best_high = max(best_high, high)
        best_low = min(best_low, low)
    return max(best_high, total - best_low) if best_high > 0 else best_high


def longest_positive_product(nums: Sequence[int]) -> int:
    """Return the length of the longest run whose product is positive."""
    positive = negative = best = 0
    for value in nums:
        if value == 0:
            positive = negative = 0
        elif value > 0:
            positive += 1
            negative = negative + 1 if negative > 0 else 0
        else:
            positive, negative = (negative + 1 if negative > 0 else 0), positive + 1
        best = max(best, positive)
    return best


def max_subarray_brute(nums: Sequence[int]) -> int:
    """Return the best subarray sum by trying every run, never less than 0."""
    return max(
        chain((0,), (total for suffix in suffixes(nums) for total in accumulate(suffix)))
    )


def max_subarray(nums: Sequence[int]) -> int:
    """Return the best sum of a non-empty subarray (Kadane's algorithm)."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = running = nums[0]
    for value in nums[1:]:
        running = max(value + running, value)
        best = max(best, running)
    return best


def max_product_brute(nums: Sequence[int]) -> int:
    """Return the best subarray product by trying every run, never less than 1."""
    return max(
        chain(
            (1,),
            (
                product
                for suffix in suffixes(nums)
                for product in accumulate(suffix, operator.mul)
            ),
        )
    )


def max_product(nums: Sequence[int]) -> int:
    """Return the best product of a non-empty subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = high = low = nums[0]
    for value in nums[1:]:
        high, low = (
            max(value * high, value, value * low),
            min(value * low, value, value * high),
        )
        best = max(best, high)
    return best