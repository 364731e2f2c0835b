"""Disjoint sets with path compression, and the food chain consistency check."""

from __future__ import annotations

from collections.abc import Iterable

SAME_KIND = 1
EATS = 2


class DisjointSet:
    """Union-find over the elements 1..n that tracks the size of each set."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def __len__(self) -> int:
        return self._n

    def _check(self, x: int) -> None:
        if not 1 <= x <= self._n:
            raise IndexError(f"element {x} is not in 1..{self._n}")

    def find(self, x: int) -> int:
        """Representative of the set holding x."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of a and b; return False if they were already one."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        self._size[root_b] += self._size[root_a]
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def size(self, x: int) -> int:
        """Number of elements in the set holding x."""
        return self._size[self.find(x)]


def count_false_statements(n: int, statements: Iterable[tuple[int, int, int]]) -> int:
    """Count the false statements about n animals in a three-kind food chain.

    Each statement is (d, x, y): d == 1 claims x and y are the same kind,
    d == 2 claims x eats y. A statement is false when it names an animal
    above n or contradicts the true statements before it.
    """
    parent = list(range(n + 1))
    dist = [0] * (n + 1)

    def find(x: int) -> int:
        path = []
        while parent[x] != x:
            path.append(x)
            x = parent[x]
        root = x
        for node in reversed(path):
            up = parent[node]
            if up != root:
                dist[node] += dist[up]
            parent[node] = root
        return root

    false_count = 0
    for d, x, y in statements:
        if d not in (SAME_KIND, EATS):
            raise ValueError(f"unknown statement kind {d}")
        if x < 1 or y < 1:
            raise ValueError("animals are numbered from 1")
        if x > n or y > n:
            false_count += 1
            continue
        offset = 0 if d == SAME_KIND else 1
        root_x, root_y = find(x), find(y)
        if root_x == root_y:
            if (dist[x] - dist[y] - offset) % 3:
                false_count += 1
        else:
            parent[root_x] = root_y
            dist[root_x] = dist[y] + offset - dist[x]
    return false_count