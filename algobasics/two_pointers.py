"""Two-pointer scans over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def target_sum_pair(first: Sequence[int], second: Sequence[int], target: int):
    """Indices (i, j) with first[i] + second[j] == target, or None.

    Both sequences must be ascending; i is the smallest such index.
    """
    j = len(second) - 1
    for i, a in enumerate(first):
        while j >= 0 and a + second[j] > target:
            j -= 1
        if j < 0:
            break
        if a + second[j] == target:
            return i, j
    return None


def is_subsequence(first: Iterable, second: Iterable) -> bool:
    """Whether first appears in order (not necessarily contiguously) in second."""
    remaining = iter(second)
    return all(any(item == other for other in remaining) for item in first)


def longest_unique_run(values: Sequence) -> int:
    """Length of the longest contiguous stretch with no repeated element."""
    last_seen: dict = {}
    start = 0
    best = 0
    for i, value in enumerate(values):
        if last_seen.get(value, -1) >= start:
            start = last_seen[value] + 1
        last_seen[value] = i
        best = max(best, i - start + 1)
    return best