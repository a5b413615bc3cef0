"""Classic comparison and distribution sorts.

Every function returns a new sorted list and leaves its input untouched.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any, TypeVar

__all__ = [
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "pigeonhole_sort",
    "quick_sort",
    "selection_sort",
]

T = TypeVar("T", bound=Any)


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Bubble sort that stops early once a pass makes no swap."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _sift_down(items: list[T], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Heap sort using a max-heap built in place."""
    items = list(values)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, root)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Insertion sort shifting larger elements right."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and key < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
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


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def pigeonhole_sort(values: Iterable[int]) -> list[int]:
    """Pigeonhole sort for integers, one hole per value between min and max."""
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    holes = Counter(items)
    return [
        value
        for value in range(low, high + 1)
        for _ in range(holes.get(value, 0))
    ]


def _partition(items: list[T], start: int, end: int) -> int:
    pivot = items[end]
    boundary = start
    for i in range(start, end):
        if items[i] <= pivot:
            items[i], items[boundary] = items[boundary], items[i]
            boundary += 1
    items[boundary], items[end] = items[end], items[boundary]
    return boundary


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            split = _partition(items, start, end)
            pending.append((start, split - 1))
            pending.append((split + 1, end))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Selection sort swapping the smallest remaining element into place."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items