import pytest

from drillbook.arrays import max_satisfied, max_satisfied_brute, trap, window_sums

SHOPS = [
    ([1, 0, 1, 2, 1, 1, 7, 5], [0, 1, 0, 1, 0, 1, 0, 1], 3),
    ([1], [0], 1),
    ([4, 10, 10], [1, 1, 0], 2),
    ([2, 6, 6, 9], [0, 0, 1, 1], 1),
    ([3, 1, 4, 1, 5, 9, 2, 6], [1, 0, 1, 1, 0, 1, 0, 1], 2),
]


def test_window_sums_zero_size_gives_zeros():
    prefix = [0, 4, 9, 11]
    assert window_sums(prefix, 0) == [0, 0, 0, 0]


def test_window_sums_full_span():
    prefix = [0, 4, 9, 11]
    assert window_sums(prefix, 3) == [prefix[-1] - prefix[0]]


def test_window_sums_length():
    prefix = [0, 1, 3, 6, 10]
    assert len(window_sums(prefix, 2)) == len(prefix) - 2


def test_window_sums_rejects_bad_size():
    with pytest.raises(ValueError):
        window_sums([0, 1], 3)
    with pytest.raises(ValueError):
        window_sums([0, 1], -1)


def test_max_satisfied_example():
    customers, grumpy, minutes = SHOPS[0]
    assert max_satisfied(customers, grumpy, minutes) == 16
    assert max_satisfied_brute(customers, grumpy, minutes) == 16


@pytest.mark.parametrize("customers,grumpy,minutes", SHOPS)
def test_brute_and_fast_agree(customers, grumpy, minutes):
    assert max_satisfied_brute(customers, grumpy, minutes) == max_satisfied(
        customers, grumpy, minutes
    )


@pytest.mark.parametrize("customers,grumpy,minutes", SHOPS)
def test_zero_minutes_counts_only_calm_customers(customers, grumpy, minutes):
    calm = sum(c for c, g in zip(customers, grumpy) if not g)
    assert max_satisfied(customers, grumpy, 0) == calm
    assert max_satisfied_brute(customers, grumpy, 0) == calm


@pytest.mark.parametrize("customers,grumpy,minutes", SHOPS)
def test_whole_day_calm_satisfies_everyone(customers, grumpy, minutes):
    assert max_satisfied(customers, grumpy, len(customers)) == sum(customers)


def test_never_grumpy_satisfies_everyone():
    customers = [5, 3, 8, 1]
    assert max_satisfied(customers, [0, 0, 0, 0], 1) == sum(customers)


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        max_satisfied([1, 2], [0], 1)
    with pytest.raises(ValueError):
        max_satisfied_brute([1, 2], [0], 1)


def test_minutes_too_long_rejected():
    with pytest.raises(ValueError):
        max_satisfied([1, 2], [0, 1], 3)


def test_trap_examples():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6
    assert trap([4, 2, 0, 3, 2, 5]) == 9


def test_trap_empty():
    assert trap([]) == 0


@pytest.mark.parametrize("height", [[1, 2, 3, 4], [5, 4, 3], [2, 2, 2], [7]])
def test_trap_holds_nothing_without_a_dip(height):
    assert trap(height) == 0


def test_trap_is_mirror_symmetric():
    height = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    assert trap(height) == trap(height[::-1])