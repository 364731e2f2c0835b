"""Binary search: real cube root and the range of equal elements."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

LOW, HIGH = -100.0, 100.0
EPSILON = 1e-8


def cube_root(x: float) -> float:
    """Cube root of x found by bisection on [-100, 100]."""
    if not LOW ** 3 <= x <= HIGH ** 3:
        raise ValueError("x must lie within [-1e6, 1e6]")
    low, high = LOW, HIGH
    while high - low > EPSILON:
        mid = (low + high) / 2
        if mid ** 3 <= x:
            low = mid
        else:
            high = mid
    return low


def element_range(values: Sequence[int], x: int) -> tuple[int, int]:
    """First and last index of x in an ascending sequence, or (-1, -1)."""
    first = bisect_left(values, x)
    if first == len(values) or values[first] != x:
        return -1, -1
    return first, bisect_right(values, x) - 1