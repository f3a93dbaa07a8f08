import random

import pytest

from algokit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    recursive_bubble_sort,
    recursive_insertion_sort,
    selection_sort,
)

_rng = random.Random(1234)

SAMPLES = [
    [],
    [1],
    [2, 1],
    [2, 4, 5, 1, 3],
    [2, 4, 3, 1, 4, 5, 1, 3],
    [2, 4, 1, 5, 3],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [7, 7, 7, 7],
    [-3, 10, 0, -3, 8, -1],
    [_rng.randint(-50, 50) for _ in range(60)],
    [_rng.randint(0, 5) for _ in range(40)],
    list(range(200, 0, -1)),
]


@pytest.mark.parametrize("sample", SAMPLES)
def test_matches_builtin_sorted(sample):
    expected = sorted(sample)
    assert bubble_sort(sample) == expected
    assert recursive_bubble_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert recursive_insertion_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert quick_sort(sample) == expected


def test_input_not_mutated():
    sample = [3, 1, 2, 5, 4]
    original = list(sample)
    assert bubble_sort(sample) == [1, 2, 3, 4, 5]
    assert recursive_bubble_sort(sample) == [1, 2, 3, 4, 5]
    assert insertion_sort(sample) == [1, 2, 3, 4, 5]
    assert recursive_insertion_sort(sample) == [1, 2, 3, 4, 5]
    assert selection_sort(sample) == [1, 2, 3, 4, 5]
    assert merge_sort(sample) == [1, 2, 3, 4, 5]
    assert quick_sort(sample) == [1, 2, 3, 4, 5]
    assert sample == original


def test_accepts_any_iterable():
    sample = (9, 2, 6, 1)
    expected = [1, 2, 6, 9]
    assert bubble_sort(iter(sample)) == expected
    assert recursive_bubble_sort(iter(sample)) == expected
    assert insertion_sort(iter(sample)) == expected
    assert recursive_insertion_sort(iter(sample)) == expected
    assert selection_sort(iter(sample)) == expected
    assert merge_sort(iter(sample)) == expected
    assert quick_sort(iter(sample)) == expected


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana", "apple"]
    expected = ["apple", "apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert recursive_bubble_sort(words) == expected
    assert insertion_sort(words) == expected
    assert recursive_insertion_sort(words) == expected
    assert selection_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected


def test_idempotent():
    sample = [_rng.randint(0, 100) for _ in range(30)]
    once = bubble_sort(sample)
    assert bubble_sort(once) == once
    once = recursive_bubble_sort(sample)
    assert recursive_bubble_sort(once) == once
    once = insertion_sort(sample)
    assert insertion_sort(once) == once
    once = recursive_insertion_sort(sample)
    assert recursive_insertion_sort(once) == once
    once = selection_sort(sample)
    assert selection_sort(once) == once
    once = merge_sort(sample)
    assert merge_sort(once) == once
    once = quick_sort(sample)
    assert quick_sort(once) == once


def test_merge_sort_is_stable():
    class Keyed:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __lt__(self, other):
            return self.key < other.key

        def __le__(self, other):
            return self.key <= other.key

        def __gt__(self, other):
            return self.key > other.key

    items = [Keyed(k, i) for i, k in enumerate([2, 1, 2, 1, 2])]
    result = merge_sort(items)
    assert [(x.key, x.tag) for x in result] == sorted(
        ((x.key, x.tag) for x in items)
    )