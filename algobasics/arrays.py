"""Prefix sums, difference arrays, discretization and interval merging."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate
from operator import itemgetter


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Prefix sums with a leading 0: result[i] is the sum of the first i values."""
    return [0, *accumulate(values)]


def range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Sum of values[l..r] for every (l, r) query, positions counted from 1."""
    sums = prefix_sums(values)
    result = []
    for left, right in queries:
        if not 1 <= left <= right <= len(values):
            raise IndexError(f"invalid range {left}..{right}")
        result.append(sums[right] - sums[left - 1])
    return result


def apply_range_additions(
    values: Sequence[int], operations: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Add c to values[l..r] for every (l, r, c), positions counted from 1."""
    n = len(values)
    diff = [0] * (n + 1)
    for left, right, c in operations:
        if not 1 <= left <= right <= n:
            raise IndexError(f"invalid range {left}..{right}")
        diff[left - 1] += c
        diff[right] -= c
    return [v + d for v, d in zip(values, accumulate(diff))]


def submatrix_sums(
    matrix: Sequence[Sequence[int]], queries: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Sum of the submatrix with corners (x1, y1) and (x2, y2), counted from 1."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows differ in length")
    table = [[0] * (cols + 1)]
    for row in matrix:
        above = table[-1]
        line = [0]
        for j, value in enumerate(row, start=1):
            line.append(value + line[j - 1] + above[j] - above[j - 1])
        table.append(line)
    result = []
    for x1, y1, x2, y2 in queries:
        if not (1 <= x1 <= x2 <= rows and 1 <= y1 <= y2 <= cols):
            raise IndexError(f"invalid submatrix ({x1}, {y1})..({x2}, {y2})")
        result.append(
            table[x2][y2] - table[x2][y1 - 1] - table[x1 - 1][y2] + table[x1 - 1][y1 - 1]
        )
    return result


def count_three_way_splits(values: Sequence[int]) -> int:
    """Ways to cut values into three non-empty parts with equal sums."""
    n = len(values)
    if n < 3:
        return 0
    sums = prefix_sums(values)
    total = sums[n]
    if total % 3:
        return 0
    first, second = total // 3, total // 3 * 2
    candidates = 0
    ways = 0
    for i in range(2, n):
        if sums[i - 1] == first:
            candidates += 1
        if sums[i] == second:
            ways += candidates
    return ways


def covered_flags(values: Sequence[int]) -> list[int]:
    """Mark the positions covered when element j covers the values[j] positions ending at j."""
    n = len(values)
    diff = [0] * (n + 1)
    for j, x in enumerate(values):
        if x < 0:
            raise ValueError("values must not be negative")
        diff[max(j - x + 1, 0)] += 1
        diff[j + 1] -= 1
    return [int(total != 0) for total in accumulate(diff[:n])]


def discretized_range_sums(
    additions: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Add c at coordinate x for every (x, c), then sum each [l, r] query."""
    additions = list(additions)
    queries = list(queries)
    points = sorted({x for x, _ in additions} | {p for query in queries for p in query})
    totals = [0] * len(points)
    for x, c in additions:
        totals[bisect_left(points, x)] += c
    sums = prefix_sums(totals)
    return [
        sums[bisect_left(points, right) + 1] - sums[bisect_left(points, left)]
        for left, right in queries
    ]


def count_merged_intervals(intervals: Iterable[tuple[int, int]]) -> int:
    """Number of intervals left after merging overlapping or touching ones."""
    count = 0
    end = None
    for left, right in sorted(intervals, key=itemgetter(0)):
        if end is None or left > end:
            count += 1
            end = right
        else:
            end = max(end, right)
    return count