import itertools
import math

from drillbook.enumeration import combinations, permutations, subarrays, suffixes


def test_combinations_order():
    assert list(combinations([1, 2, 3])) == [
        [1],
        [1, 2],
        [1, 2, 3],
        [1, 3],
        [2],
        [2, 3],
        [3],
    ]


def test_combinations_count_and_distinct():
    items = [1, 2, 4, 5, 6]
    combos = list(combinations(items))
    assert len(combos) == 2 ** len(items) - 1
    assert len({tuple(c) for c in combos}) == len(combos)
    assert all(c == sorted(c) for c in combos)


def test_combinations_empty():
    assert list(combinations([])) == []


def test_permutations_swap_order():
    assert list(permutations([1, 2, 3])) == [
        [1, 2, 3],
        [1, 3, 2],
        [2, 1, 3],
        [2, 3, 1],
        [3, 2, 1],
        [3, 1, 2],
    ]


def test_permutations_cover_all_arrangements():
    items = [1, 2, 4, 5, 6]
    perms = list(permutations(items))
    assert len(perms) == math.factorial(len(items))
    assert {tuple(p) for p in perms} == set(itertools.permutations(items))
    assert perms[0] == items


def test_permutations_leave_input_untouched():
    items = [3, 1, 2]
    list(permutations(items))
    assert items == [3, 1, 2]


def test_subarrays_order():
    assert list(subarrays([1, 2, 3])) == [[1], [1, 2], [2], [1, 2, 3], [2, 3], [3]]


def test_subarrays_count_and_contiguity():
    items = [1, 2, 3, 5]
    runs = list(subarrays(items))
    n = len(items)
    assert len(runs) == n * (n + 1) // 2
    text = ",".join(map(str, items))
    assert all(",".join(map(str, run)) in text for run in runs)


def test_suffixes():
    assert list(suffixes([1, 2, 3, 5])) == [[1, 2, 3, 5], [2, 3, 5], [3, 5], [5]]


def test_suffixes_end_with_last_item():
    items = ["a", "b", "c"]
    result = list(suffixes(items))
    assert len(result) == len(items)
    assert all(s[-1] == items[-1] for s in result)
    assert list(suffixes([])) == []