import statistics

import pytest

from algokit.answers import (
    aggressive_cows,
    allocate_books,
    kth_element,
    median_of_two,
    min_eating_rate,
    smallest_divisor,
)

PAIRS = [
    ([1, 2, 4, 7, 9], [3, 5, 6, 8]),
    ([1, 3], [2]),
    ([], [4]),
    ([1, 2], [3, 4]),
    ([5], []),
    ([-5, 0], [1, 2, 10]),
    ([2, 2, 2], [2, 3]),
]


def test_aggressive_cows_worked_example():
    assert aggressive_cows([0, 3, 4, 7, 10, 9], 4) == 3


def test_aggressive_cows_two_cows_take_the_ends():
    stalls = [8, 1, 4, 20]
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


def test_aggressive_cows_leaves_input_alone():
    stalls = [0, 3, 4, 7, 10, 9]
    aggressive_cows(stalls, 3)
    assert stalls == [0, 3, 4, 7, 10, 9]


def test_aggressive_cows_order_independent():
    assert aggressive_cows([10, 9, 7, 4, 3, 0], 3) == aggressive_cows([0, 3, 4, 7, 9, 10], 3)


def test_aggressive_cows_more_cows_never_spread_further():
    stalls = [1, 2, 4, 8, 9, 15, 22]
    results = [aggressive_cows(stalls, cows) for cows in range(2, len(stalls) + 1)]
    assert results == sorted(results, reverse=True)


def test_aggressive_cows_empty_raises():
    with pytest.raises(ValueError):
        aggressive_cows([], 2)


def test_min_eating_rate_worked_example():
    assert min_eating_rate([25, 46, 28, 49, 24], 18) == 12


def test_min_eating_rate_one_hour_per_pile_needs_largest():
    piles = [3, 6, 7, 11]
    assert min_eating_rate(piles, len(piles)) == max(piles)


def test_min_eating_rate_more_hours_never_faster():
    piles = [30, 11, 23, 4, 20]
    rates = [min_eating_rate(piles, h) for h in range(len(piles), sum(piles) + 1)]
    assert rates == sorted(rates, reverse=True)


@pytest.mark.parametrize("first, second", PAIRS)
def test_median_matches_combined_median(first, second):
    assert median_of_two(first, second) == statistics.median(sorted(first + second))


@pytest.mark.parametrize("first, second", PAIRS)
def test_median_symmetric(first, second):
    assert median_of_two(first, second) == median_of_two(second, first)


def test_median_both_empty_raises():
    with pytest.raises(ValueError):
        median_of_two([], [])


def test_allocate_books_worked_example():
    assert allocate_books([25, 46, 28, 49, 24], 4) == 71


def test_allocate_books_one_student_reads_everything():
    books = [12, 34, 67, 90]
    assert allocate_books(books, 1) == sum(books)


def test_allocate_books_one_book_each():
    books = [12, 34, 67, 90]
    assert allocate_books(books, len(books)) == max(books)


def test_allocate_books_too_many_students():
    assert allocate_books([12, 34], 3) == -1


def test_allocate_books_empty_raises():
    with pytest.raises(ValueError):
        allocate_books([], 1)


@pytest.mark.parametrize("first, second", PAIRS)
def test_kth_element_matches_merged(first, second):
    merged = sorted(first + second)
    for k in range(1, len(merged) + 1):
        assert kth_element(first, second, k) == merged[k - 1]


@pytest.mark.parametrize("k", [0, 10])
def test_kth_element_out_of_range(k):
    with pytest.raises(IndexError):
        kth_element([1, 2, 4, 7, 9], [3, 5, 6, 8], k)


def test_smallest_divisor_limit_equal_to_length():
    items = [1, 2, 3, 4, 5]
    assert smallest_divisor(items, len(items)) == max(items)


def test_smallest_divisor_meets_limit_and_is_minimal():
    items = [1, 2, 5, 9]
    limit = 6
    result = smallest_divisor(items, limit)
    assert sum(-(-x // result) for x in items) <= limit
    assert sum(-(-x // (result - 1)) for x in items) > limit


def test_smallest_divisor_larger_limit_never_larger():
    items = [44, 22, 33, 11, 1]
    results = [smallest_divisor(items, limit) for limit in range(len(items), sum(items) + 1)]
    assert results == sorted(results, reverse=True)