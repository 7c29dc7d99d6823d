"""Sliding windows over strings: anagrams, permutations, distinct runs and word blocks."""

from __future__ import annotations

from collections import Counter
from typing import Hashable, Iterable, Iterator, List, Sequence


class _Tally:
    """Counts a window's items against the counts a target requires.

    ``complete`` is true while every required item appears at least as often
    as required; for a window as long as the target that means an exact match.
    """

    def __init__(self, target: Iterable[Hashable]) -> None:
        self._need = Counter(target)
        self._window: Counter = Counter()
        self._satisfied = 0

    def add(self, item: Hashable) -> None:
        self._window[item] += 1
        if item in self._need and self._window[item] == self._need[item]:
            self._satisfied += 1

    def remove(self, item: Hashable) -> None:
        self._window[item] -= 1
        if item in self._need and self._window[item] == self._need[item] - 1:
            self._satisfied -= 1

    @property
    def complete(self) -> bool:
        return self._satisfied == len(self._need)


def _anagram_starts(s: str, p: str) -> Iterator[int]:
    width = len(p)
    tally = _Tally(p)
    for ch in s[:width]:
        tally.add(ch)
    if tally.complete:
        yield 0
    for start, (leaving, entering) in enumerate(zip(s, s[width:]), start=1):
        tally.remove(leaving)
        tally.add(entering)
        if tally.complete:
            yield start


def find_anagrams(s: str, p: str) -> List[int]:
    """Return the start of every substring of ``s`` that is an anagram of ``p``.

    Empty inputs, or ``p`` longer than ``s``, give an empty list.
    """
    if not s or not p or len(p) > len(s):
        return []
    return list(_anagram_starts(s, p))


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of ``s1`` is a substring of ``s2``.

    Empty inputs, or ``s1`` longer than ``s2``, give False.
    """
    if not s1 or not s2 or len(s1) > len(s2):
        return False
    return any(True for _ in _anagram_starts(s2, s1))


def longest_unique_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    seen = set()
    left = 0
    best = 0
    for right, ch in enumerate(s):
        while ch in seen:
            seen.discard(s[left])
            left += 1
        seen.add(ch)
        best = max(best, right - left + 1)
    return best


def concatenated_word_windows(s: str, words: Sequence[str]) -> List[int]:
    """Return starts of windows of ``s`` made of exactly the given words, in any order.

    All words are taken to share the length of the first. Only windows that
    start at a multiple of that length are examined, and the last such window
    (the one ending at the very end of ``s``) is never examined.
    """
    if not words or not s:
        return []
    width = len(words[0])
    if width == 0:
        raise ValueError("words must not be empty strings")
    span = width * len(words)
    if width > len(s) or len(s) < span:
        return []

    tally = _Tally(words)
    for start in range(0, span, width):
        tally.add(s[start:start + width])
    result = [0] if tally.complete else []

    left = 0
    for right in range(span, len(s) - width, width):
        tally.remove(s[left:left + width])
        tally.add(s[right:right + width])
        left += width
        if tally.complete:
            result.append(left)
    return result