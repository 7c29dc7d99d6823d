"""Counting and measuring subarrays by their sums, using prefix sums."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate
from typing import Dict, List, Sequence

from drillbook.enumeration import subarrays, suffixes


def prefix_sums(nums: Sequence[int]) -> List[int]:
    """Return the running totals of ``nums``, one per element."""
    return list(accumulate(nums))


def nice_subarrays_brute(nums: Sequence[int], k: int) -> int:
    """Count the runs holding exactly ``k`` odd numbers, by listing every run."""
    return sum(
        1 for run in subarrays(nums) if sum(value % 2 != 0 for value in run) == k
    )


def nice_subarrays(nums: Sequence[int], k: int) -> int:
    """Count the runs holding exactly ``k`` odd numbers, with prefix counts."""
    seen: Counter = Counter({0: 1})
    count = 0
    for odd_total in accumulate(value % 2 for value in nums):
        count += seen[odd_total - k]
        seen[odd_total] += 1
    return count


def longest_subarray_sum_brute(nums: Sequence[int], k: int) -> int:
    """Return the length of the longest run summing to ``k``, or 0, by trying all runs."""
    best = 0
    for suffix in suffixes(nums):
        for length, total in enumerate(accumulate(suffix), start=1):
            if total == k:
                best = max(best, length)
    return best


def longest_subarray_sum(nums: Sequence[int], k: int) -> int:
    """Return the length of the longest run summing to ``k``, or 0."""
    first_seen: Dict[int, int] = {0: -1}
    best = 0
    for index, total in enumerate(accumulate(nums)):
        if total - k in first_seen:
            best = max(best, index - first_seen[total - k])
        first_seen.setdefault(total, index)
    return best


def subarray_sum_count_brute(nums: Sequence[int], k: int) -> int:
    """Count the runs summing to ``k`` by trying all runs."""
    return sum(
        total == k for suffix in suffixes(nums) for total in accumulate(suffix)
    )


def subarray_sum_count(nums: Sequence[int], k: int) -> int:
    """Count the runs summing to ``k`` with prefix sums; empty input gives 0."""
    if not nums:
        return 0
    seen: Counter = Counter({0: 1})
    count = 0
    for total in prefix_sums(nums):
        count += seen[total - k]
        seen[total] += 1
    return count