"""Tries: word counting and maximum XOR pair."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

BITS = 31


@dataclass
class _Node:
    children: dict = field(default_factory=dict)
    count: int = 0


class StringTrie:
    """Counts how many times each word was inserted."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.count += 1

    def count(self, word: str) -> int:
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return 0
        return node.count


def max_xor_pair(values: Iterable[int]) -> int:
    """Largest XOR of two elements, over the low 31 bits; 0 for no input."""
    items = list(values)
    root: list = [None, None]
    for value in items:
        node = root
        for bit in reversed(range(BITS)):
            x = (value >> bit) & 1
            if node[x] is None:
                node[x] = [None, None]
            node = node[x]
    best = 0
    for value in items:
        node = root
        acc = 0
        for bit in reversed(range(BITS)):
            x = (value >> bit) & 1
            if node[1 - x] is not None:
                acc |= 1 << bit
                node = node[1 - x]
            else:
                node = node[x]
        best = max(best, acc)
    return best