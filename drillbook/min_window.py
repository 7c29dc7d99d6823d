"""Shortest substring holding every character of a pattern, three ways."""

from __future__ import annotations

from collections import Counter
from typing import Dict


def _trivially_empty(s: str, t: str) -> bool:
    return not s or not t or len(t) > len(s)


def min_window_brute(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` containing ``t``'s characters with counts.

    Rechecks the whole pattern after every step; returns "" if there is none.
    """
    if _trivially_empty(s, t):
        return ""
    need = Counter(t)
    window: Counter = Counter()

    def covers() -> bool:
        return all(window[ch] >= count for ch, count in need.items())

    best = ""
    left = 0
    for right, ch in enumerate(s):
        window[ch] += 1
        while covers():
            window[s[left]] -= 1
            if not best or right - left + 1 < len(best):
                best = s[left:right + 1]
            left += 1
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` containing ``t``'s characters with counts.

    The leftmost of equally short windows wins; returns "" if there is none.
    """
    if _trivially_empty(s, t):
        return ""
    need = Counter(t)
    window: Dict[str, int] = {}
    satisfied = 0
    best = ""
    left = 0
    for right, ch in enumerate(s):
        window[ch] = window.get(ch, 0) + 1
        if ch in need and window[ch] == need[ch]:
            satisfied += 1
        while satisfied == len(need):
            if not best or right - left + 1 < len(best):
                best = s[left:right + 1]
            leaving = s[left]
            window[leaving] -= 1
            if leaving in need and window[leaving] < need[leaving]:
                satisfied -= 1
            left += 1
    return best


def min_window_ascii(s: str, t: str) -> str:
    """Like :func:`min_window`, counting in fixed tables for ASCII text.

    The substring is cut only once, at the end. Raises ValueError for
    characters outside ASCII.
    """
    if _trivially_empty(s, t):
        return ""
    if not (s.isascii() and t.isascii()):
        raise ValueError("only ASCII text is supported")

    need = [0] * 128
    window = [0] * 128
    required = 0
    for code in map(ord, t):
        if need[code] == 0:
            required += 1
        need[code] += 1

    satisfied = 0
    best_start, best_len = 0, None
    left = 0
    for right, code in enumerate(map(ord, s)):
        window[code] += 1
        if need[code] and need[code] == window[code]:
            satisfied += 1
        while satisfied == required:
            if best_len is None or right - left + 1 < best_len:
                best_start, best_len = left, right - left + 1
            leaving = ord(s[left])
            window[leaving] -= 1
            if need[leaving] and window[leaving] < need[leaving]:
                satisfied -= 1
            left += 1

    return "" if best_len is None else s[best_start:best_start + best_len]