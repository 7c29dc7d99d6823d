"""Three non-overlapping subarrays with the largest total."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from itertools import accumulate
from typing import List, Sequence, Tuple

from drillbook.arrays import window_sums


@dataclass(frozen=True)
class Span:
    """A contiguous run of values and its inclusive start and end positions."""

    values: Tuple[int, ...]
    start: int
    end: int

    def overlaps(self, other: "Span") -> bool:
        """Tell whether the two runs share a position."""
        return not (self.end < other.start or other.end < self.start)


def spans(nums: Sequence[int]) -> List[Span]:
    """Return every contiguous run of ``nums``, grouped by end position, longest first."""
    values = tuple(nums)
    return [
        Span(values[start:end + 1], start, end)
        for end in range(len(values))
        for start in range(end + 1)
    ]


def max_three_sum_brute(nums: Sequence[int], k: int) -> int:
    """Return the largest total of three pairwise disjoint runs of any length.

    ``k`` is accepted but the runs are not limited to it. The result is never
    less than the first number. An empty sequence gives 0; a single number
    raises ValueError.
    """
    if not nums:
        return 0
    runs = spans(nums)
    if len(runs) < 3:
        raise ValueError("need at least two numbers")
    best = nums[0]
    for first, second, third in itertools.combinations(runs, 3):
        if first.overlaps(second) or first.overlaps(third) or second.overlaps(third):
            continue
        best = max(best, sum(first.values) + sum(second.values) + sum(third.values))
    return best


def max_three_subarrays(nums: Sequence[int], k: int) -> List[int]:
    """Return the starts of three disjoint ``k``-long runs with the largest total.

    Ties go to the lexicographically smallest starts. Raises ValueError unless
    ``k`` is at least 1 and three runs fit in ``nums``.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if 3 * k > len(nums):
        raise ValueError("three runs of length k do not fit")
    windows = window_sums([0, *accumulate(nums)], k)

    best_left: List[int] = []
    leader = 0
    for index, total in enumerate(windows):
        if total > windows[leader]:
            leader = index
        best_left.append(leader)

    best_right = [0] * len(windows)
    leader = len(windows) - 1
    for index in reversed(range(len(windows))):
        if windows[index] >= windows[leader]:
            leader = index
        best_right[index] = leader

    best_total = None
    result: List[int] = []
    for middle in range(k, len(windows) - k):
        left = best_left[middle - k]
        right = best_right[middle + k]
        total = windows[left] + windows[middle] + windows[right]
        if best_total is None or total > best_total:
            best_total = total
            result = [left, middle, right]
    return result