"""Enumerating combinations, permutations, subarrays and suffixes of a sequence."""

from __future__ import annotations

from typing import Iterator, List, Sequence, TypeVar

T = TypeVar("T")


def combinations(items: Sequence[T]) -> Iterator[List[T]]:
    """Yield every non-empty combination, keeping the items' order.

    Each combination is followed by its extensions before the next one, so
    ``[1, 2, 3]`` gives [1], [1, 2], [1, 2, 3], [1, 3], [2], [2, 3], [3].
    """
    pool = list(items)

    def extend(chosen: List[T], start: int) -> Iterator[List[T]]:
        for index in range(start, len(pool)):
            combo = chosen + [pool[index]]
            yield combo
            yield from extend(combo, index + 1)

    yield from extend([], 0)


def permutations(items: Sequence[T]) -> Iterator[List[T]]:
    """Yield every arrangement of the items, in swap order.

    The item at each position is swapped in turn with every later one; an
    empty sequence yields one empty arrangement.
    """
    current = list(items)

    def arrange(start: int) -> Iterator[List[T]]:
        if start == len(current):
            yield list(current)
            return
        for index in range(start, len(current)):
            current[start], current[index] = current[index], current[start]
            yield from arrange(start + 1)
            current[start], current[index] = current[index], current[start]

    yield from arrange(0)


def subarrays(items: Sequence[T]) -> Iterator[List[T]]:
    """Yield every contiguous run, grouped by end position, longest first."""
    pool = list(items)
    for end in range(1, len(pool) + 1):
        for start in range(end):
            yield pool[start:end]


def suffixes(items: Sequence[T]) -> Iterator[List[T]]:
    """Yield every non-empty suffix, longest first."""
    pool = list(items)
    for start in range(len(pool)):
        yield pool[start:]