"""Comparison sorts, random test data and timing of a sort run."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a new ascending list built by top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[low]
    i = low + 1
    j = high
    while True:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            items[low], items[j] = items[j], items[low]
            return j


def quick_sort(values: Iterable[T]) -> list[T]:
    """Return a new ascending list built by quicksort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a new ascending list built by selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        min_index = min(range(i, len(items)), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]
    return items


def random_values(count: int, upper: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random integers in ``[0, upper)``."""
    if count < 0:
        raise ValueError("count must not be negative")
    if upper <= 0:
        raise ValueError("upper must be positive")
    generator = rng if rng is not None else random.Random()
    return [generator.randrange(upper) for _ in range(count)]


def time_sort(
    sort: Callable[[Sequence[Any]], list], values: Sequence[Any]
) -> tuple[list, float]:
    """Run ``sort`` on ``values``; return its result and the processor time in seconds."""
    start = time.process_time()
    result = sort(values)
    elapsed = time.process_time() - start
    return result, elapsed