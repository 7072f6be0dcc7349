"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted by repeated adjacent swaps."""
    values = list(items)
    count = len(values)
    for done in range(count):
        for j in range(1, count - done):
            if values[j - 1] > values[j]:
                values[j - 1], values[j] = values[j], values[j - 1]
    return values


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, inserting each into the sorted prefix."""
    values = list(items)
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return values


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, selecting the smallest remaining each pass."""
    values = list(items)
    for i in range(len(values)):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(values: list[Any]) -> list[Any]:
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(_merge_sorted(values[:mid]), _merge_sorted(values[mid:]))


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order using a stable top-down merge sort."""
    return _merge_sorted(list(items))


def _partition(values: list[Any], low: int, high: int, pivot: Any) -> int:
    while low <= high:
        while values[low] < pivot:
            low += 1
        while values[high] > pivot:
            high -= 1
        if low <= high:
            values[low], values[high] = values[high], values[low]
            low += 1
            high -= 1
    return low


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order using quicksort with a middle pivot."""
    values = list(items)
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        pivot = values[(low + high) // 2]
        split = _partition(values, low, high, pivot)
        ranges.append((low, split - 1))
        ranges.append((split, high))
    return values