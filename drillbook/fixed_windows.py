"""Fixed-size sliding windows over numbers and strings."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence

_VOWELS = frozenset("aeiou")


def _check_window(size: int, k: int) -> None:
    if not 1 <= k <= size:
        raise ValueError(f"window size {k} does not fit a sequence of length {size}")


def max_average_prefix(nums: Sequence[int], k: int) -> float:
    """Return the largest average of ``k`` consecutive numbers, using prefix sums."""
    _check_window(len(nums), k)
    prefix = [0, *accumulate(nums)]
    return max((prefix[i + k] - prefix[i]) / k for i in range(len(nums) - k + 1))


def max_average_window(nums: Sequence[int], k: int) -> float:
    """Return the largest average of ``k`` consecutive numbers with a sliding sum.

    An empty sequence gives 0.0.
    """
    if not nums:
        return 0.0
    _check_window(len(nums), k)
    total = float(sum(nums[:k]))
    best = total
    for leaving, entering in zip(nums, nums[k:]):
        total += entering - leaving
        best = max(best, total)
    return best / k


def max_vowels(s: str, k: int) -> int:
    """Return the most vowels found in any ``k`` consecutive characters of ``s``.

    An empty string gives 0.
    """
    if not s:
        return 0
    _check_window(len(s), k)
    count = sum(ch in _VOWELS for ch in s[:k])
    best = count
    for leaving, entering in zip(s, s[k:]):
        count += (entering in _VOWELS) - (leaving in _VOWELS)
        best = max(best, count)
    return best