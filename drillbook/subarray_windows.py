"""Sliding windows over integer arrays: shortest sum reaching a target, k-distinct counts."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate
from typing import Sequence


def min_subarray_len_brute(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run whose sum reaches ``target``, or 0.

    Tries every window size with prefix sums.
    """
    if not nums:
        return 0
    prefix = [0, *accumulate(nums)]
    for size in range(1, len(nums) + 1):
        if any(
            prefix[start + size] - prefix[start] >= target
            for start in range(len(nums) - size + 1)
        ):
            return size
    return 0


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run whose sum reaches ``target``, or 0.

    Uses a shrinking window, so the numbers are expected to be non-negative.
    Raises ValueError for a target that is not positive.
    """
    if not nums:
        return 0
    if target <= 0:
        raise ValueError("target must be positive")
    total = 0
    left = 0
    best = None
    for right, value in enumerate(nums):
        total += value
        while total >= target:
            total -= nums[left]
            length = right - left + 1
            best = length if best is None else min(best, length)
            left += 1
    return 0 if best is None else best


def _at_most_distinct(nums: Sequence[int], k: int) -> int:
    if k < 0:
        return 0
    counts: Counter = Counter()
    left = 0
    total = 0
    for right, value in enumerate(nums):
        counts[value] += 1
        while len(counts) > k:
            leaving = nums[left]
            counts[leaving] -= 1
            if counts[leaving] == 0:
                del counts[leaving]
            left += 1
        total += right - left + 1
    return total


def subarrays_with_k_distinct(nums: Sequence[int], k: int) -> int:
    """Count the runs of ``nums`` holding exactly ``k`` distinct values.

    An empty sequence or a negative ``k`` gives 0.
    """
    if not nums or k < 0:
        return 0
    return _at_most_distinct(nums, k) - _at_most_distinct(nums, k - 1)