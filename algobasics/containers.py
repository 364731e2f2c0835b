"""Basic containers: queue, stack, monotonic helpers, indexed list and heap."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, Iterator


class Queue:
    """First-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x) -> None:
        self._items.append(x)

    def pop(self):
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def query(self):
        if not self._items:
            raise IndexError("query on empty queue")
        return self._items[0]


class Stack:
    """Last-in first-out stack."""

    def __init__(self) -> None:
        self._items: list = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x) -> None:
        self._items.append(x)

    def pop(self):
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def query(self):
        if not self._items:
            raise IndexError("query on empty stack")
        return self._items[-1]


def previous_smaller(values: Iterable[int]) -> list[int]:
    """For each element, the nearest earlier element smaller than it, or -1."""
    stack: list[int] = []
    result = []
    for x in values:
        while stack and stack[-1] >= x:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(x)
    return result


def _window_extremes(values: Iterable[int], k: int, better: Callable) -> list[int]:
    if k < 1:
        raise ValueError("window size must be positive")
    items = list(values)
    window: deque[int] = deque()
    result = []
    for i, x in enumerate(items):
        if window and window[0] <= i - k:
            window.popleft()
        while window and better(x, items[window[-1]]):
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(items[window[0]])
    return result


def sliding_window_min(values: Iterable[int], k: int) -> list[int]:
    """Minimum of every window of k consecutive elements."""
    return _window_extremes(values, k, operator.lt)


def sliding_window_max(values: Iterable[int], k: int) -> list[int]:
    """Maximum of every window of k consecutive elements."""
    return _window_extremes(values, k, operator.gt)


class IndexedLinkedList:
    """Singly linked list whose nodes are addressed by insertion number.

    Node k is the k-th inserted node (from 1); node 0 is the head itself.
    """

    def __init__(self) -> None:
        self._next: list[int | None] = [None]
        self._value: list = [None]

    def _insert(self, k: int, value) -> int:
        self._value.append(value)
        self._next.append(self._next[k])
        node = len(self._next) - 1
        self._next[k] = node
        return node

    def insert_head(self, value) -> int:
        """Insert at the front; return the new node's number."""
        return self._insert(0, value)

    def insert_after(self, k: int, value) -> int:
        """Insert after the k-th inserted node; return the new node's number."""
        if not 1 <= k < len(self._next):
            raise IndexError(f"no node number {k}")
        return self._insert(k, value)

    def delete_after(self, k: int) -> None:
        """Remove the node following node k (k == 0 removes the head)."""
        if not 0 <= k < len(self._next):
            raise IndexError(f"no node number {k}")
        target = self._next[k]
        if target is None:
            raise IndexError(f"no node follows node {k}")
        self._next[k] = self._next[target]

    def __iter__(self) -> Iterator:
        node = self._next[0]
        while node is not None:
            yield self._value[node]
            node = self._next[node]

    def values(self) -> list:
        return list(self)


class TrackedHeap:
    """Min-heap that can delete or change the k-th inserted element."""

    def __init__(self) -> None:
        self._heap: list = [None]
        self._id_at: list[int] = [0]
        self._position: dict[int, int] = {}
        self._inserted = 0

    def __len__(self) -> int:
        return len(self._heap) - 1

    def _swap(self, a: int, b: int) -> None:
        heap, ids = self._heap, self._id_at
        heap[a], heap[b] = heap[b], heap[a]
        ids[a], ids[b] = ids[b], ids[a]
        self._position[ids[a]] = a
        self._position[ids[b]] = b

    def _up(self, p: int) -> None:
        while p > 1 and self._heap[p] < self._heap[p // 2]:
            self._swap(p, p // 2)
            p //= 2

    def _down(self, p: int) -> None:
        size = len(self)
        while True:
            smallest = p
            for child in (2 * p, 2 * p + 1):
                if child <= size and self._heap[child] < self._heap[smallest]:
                    smallest = child
            if smallest == p:
                return
            self._swap(p, smallest)
            p = smallest

    def _remove_at(self, p: int):
        value = self._heap[p]
        self._swap(p, len(self))
        self._heap.pop()
        del self._position[self._id_at.pop()]
        if p <= len(self):
            self._up(p)
            self._down(p)
        return value

    def insert(self, x) -> int:
        """Insert x; return its insertion number."""
        self._inserted += 1
        self._heap.append(x)
        self._id_at.append(self._inserted)
        self._position[self._inserted] = len(self)
        self._up(len(self))
        return self._inserted

    def minimum(self):
        if not len(self):
            raise IndexError("heap is empty")
        return self._heap[1]

    def delete_min(self):
        if not len(self):
            raise IndexError("heap is empty")
        return self._remove_at(1)

    def delete(self, k: int):
        if k not in self._position:
            raise KeyError(k)
        return self._remove_at(self._position[k])

    def change(self, k: int, x) -> None:
        if k not in self._position:
            raise KeyError(k)
        p = self._position[k]
        self._heap[p] = x
        self._up(p)
        self._down(self._position[k])