from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    heap_sort,
    heapify,
    insertion_sort,
    merge_sort,
    partition,
    quick_sort,
)

SOURCE_EXAMPLES = [
    [-2, 5, 7, 11, 9, 1],
    [30, 40, 10, 20, 50],
    [9, 4, 3, 8, 10, 2, 5],
    [1, 4, 7, 2, 9, 11],
    [6, 2, 8, 5, 3, 7, 4, 1],
    [10, 7, 8, 8, 9, 1, 5],
]


@pytest.mark.parametrize("example", SOURCE_EXAMPLES)
def test_source_examples_sorted(example):
    expected = sorted(example)
    assert bubble_sort(example) == expected
    assert insertion_sort(example) == expected
    assert merge_sort(example) == expected
    assert quick_sort(example) == expected
    assert heap_sort(example) == expected


@given(values=st.lists(st.integers(-1000, 1000), max_size=60))
def test_sorts_agree_with_builtin(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert heap_sort(values) == expected


def test_sort_does_not_mutate_input():
    original = [6, 2, 8, 5, 3, 7, 4, 1]
    bubble_sort(original)
    insertion_sort(original)
    merge_sort(original)
    quick_sort(original)
    heap_sort(original)
    assert original == [6, 2, 8, 5, 3, 7, 4, 1]


def test_sort_accepts_iterables():
    assert bubble_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert insertion_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert quick_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert heap_sort(iter([3, 1, 2])) == [1, 2, 3]


def test_sort_empty():
    assert bubble_sort([]) == []
    assert insertion_sort([]) == []
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert heap_sort([]) == []


def test_quick_sort_handles_long_sorted_input():
    values = list(range(3000))
    assert quick_sort(values) == values


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=40))
def test_partition_invariant(values):
    items = list(values)
    pivot = items[-1]
    index = partition(items, 0, len(items) - 1)
    assert items[index] == pivot
    assert all(x < pivot for x in items[:index])
    assert all(x >= pivot for x in items[index + 1:])
    assert Counter(items) == Counter(values)


def test_partition_only_touches_range():
    items = [10, 7, 8, 8, 9, 1, 5]
    partition(items, 1, 3)
    assert items[0] == 10
    assert items[4:] == [9, 1, 5]


def test_partition_bad_bounds_raise():
    with pytest.raises(IndexError):
        partition([1, 2, 3], 0, 3)
    with pytest.raises(IndexError):
        partition([1, 2, 3], 2, 1)


def _is_max_heap(items, size):
    return all(
        items[i] >= items[child]
        for i in range(size)
        for child in (2 * i + 1, 2 * i + 2)
        if child < size
    )


@given(st.lists(st.integers(-100, 100), max_size=50))
def test_heapify_builds_max_heap(values):
    items = list(values)
    for root in range(len(items) // 2 - 1, -1, -1):
        heapify(items, len(items), root)
    assert _is_max_heap(items, len(items))
    assert Counter(items) == Counter(values)
    if items:
        assert items[0] == max(values)


def test_heapify_respects_size():
    items = [1, 2, 3, 100]
    heapify(items, 3, 0)
    assert items[3] == 100
    assert items[0] == 3


def test_heapify_bad_size_raises():
    with pytest.raises(IndexError):
        heapify([1, 2], 3, 0)