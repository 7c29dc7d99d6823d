import pytest

from drillbook.stocks import max_profit_k, max_profit_two


def test_two_transactions_sample():
    assert max_profit_two([3, 3, 5, 0, 0, 3, 1, 4]) == 6


def test_two_transactions_rising_prices():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_two(prices) == prices[-1] - prices[0]


def test_two_transactions_falling_prices():
    assert max_profit_two([7, 6, 4, 3, 1]) == 0


def test_empty_prices():
    assert max_profit_two([]) == 0
    assert max_profit_k([], 3) == max_profit_two([])


def test_single_transaction_rising():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_k(prices, 1) == prices[-1] - prices[0]


def test_single_transaction_with_dip():
    prices = [7, 1, 5, 3, 6, 4]
    assert max_profit_k(prices, 1) == prices[4] - prices[1]


@pytest.mark.parametrize(
    "prices",
    [
        [3, 3, 5, 0, 0, 3, 1, 4],
        [1, 2, 3, 4, 5],
        [7, 6, 4, 3, 1],
        [2, 8, 1, 9, 3, 7],
        [5],
    ],
)
def test_two_transactions_at_least_one(prices):
    two = max_profit_two(prices)
    assert two >= max_profit_k(prices, 1)
    assert two >= 0


@pytest.mark.parametrize("k", [0, -1])
def test_k_must_be_positive(k):
    with pytest.raises(ValueError):
        max_profit_k([1, 2, 3], k)