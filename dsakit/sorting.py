"""Classic comparison sorts and their building blocks."""

from __future__ import annotations

from typing import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using bubble sort."""
    items = list(values)
    count = len(items)
    for done in range(count - 1):
        for j in range(count - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(values: list[int], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around its last element.

    Elements smaller than the pivot end up before it; the pivot's final
    index is returned.
    """
    if not 0 <= low <= high < len(values):
        raise IndexError(f"invalid partition bounds {low}..{high} for length {len(values)}")
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using quicksort with last-element pivots."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def heapify(values: list[int], size: int, root: int) -> None:
    """Sift ``values[root]`` down so the subtree within ``size`` is a max-heap."""
    if not 0 <= size <= len(values):
        raise IndexError(f"heap size {size} out of range for length {len(values)}")
    current = root
    while True:
        largest = current
        left, right = 2 * current + 1, 2 * current + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == current:
            return
        values[current], values[largest] = values[largest], values[current]
        current = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using heap sort."""
    items = list(values)
    count = len(items)
    for root in range(count // 2 - 1, -1, -1):
        heapify(items, count, root)
    for end in range(count - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items