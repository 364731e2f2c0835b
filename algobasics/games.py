"""Winning positions of Nim and staircase Nim."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor


def _piles(piles: Iterable[int]) -> list[int]:
    items = list(piles)
    if any(p < 0 for p in items):
        raise ValueError("piles must not be negative")
    return items


def nim_first_wins(piles: Iterable[int]) -> bool:
    """Whether the first player wins Nim: the XOR of all piles is non-zero."""
    return reduce(xor, _piles(piles), 0) != 0


def staircase_nim_first_wins(piles: Iterable[int]) -> bool:
    """Whether the first player wins staircase Nim.

    piles[0] is the first stair; only the odd-numbered stairs (1st, 3rd, ...)
    decide the outcome.
    """
    return reduce(xor, _piles(piles)[::2], 0) != 0