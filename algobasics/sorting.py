"""Quick sort, merge sort, inversion counting, quickselect and heap selection."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def _partition(items: list, left: int, right: int, pivot) -> tuple[int, int]:
    i, j = left - 1, right + 1
    while i < j:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    return i, j


def quick_sort(values: Iterable) -> list:
    """Return a sorted copy, using quick sort with a middle pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        _, j = _partition(items, left, right, items[(left + right) // 2])
        pending.append((left, j))
        pending.append((j + 1, right))
    return items


def _merge_count(items: list) -> tuple[list, int]:
    if len(items) <= 1:
        return list(items), 0
    mid = (len(items) + 1) // 2
    left, left_count = _merge_count(items[:mid])
    right, right_count = _merge_count(items[mid:])
    merged = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def merge_sort(values: Iterable) -> list:
    """Return a sorted copy, using a stable merge sort."""
    return _merge_count(list(values))[0]


def count_inversions(values: Iterable) -> int:
    """Number of pairs i < j with values[i] > values[j]."""
    return _merge_count(list(values))[1]


def kth_smallest(values: Iterable, k: int):
    """The k-th smallest element, counting from 1."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be in 1..{len(items)}")
    left, right = 0, len(items) - 1
    while left < right:
        i, _ = _partition(items, left, right, items[(left + right + 1) // 2])
        if k <= i - left:
            right = i - 1
        else:
            k -= i - left
            left = i
    return items[left]


def heap_smallest(values: Iterable, m: int) -> list:
    """The m smallest elements in ascending order, taken from a min-heap."""
    heap = list(values)
    if not 0 <= m <= len(heap):
        raise ValueError(f"m must be in 0..{len(heap)}")
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(m)]