"""Open-addressing integer set and polynomial prefix hashing of strings."""

from __future__ import annotations

TABLE_SIZE = 200003
BASE = 131
_MASK = (1 << 64) - 1


class OpenAddressingSet:
    """Set of integers stored in a linear-probing hash table."""

    def __init__(self, capacity: int = TABLE_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[int | None] = [None] * capacity
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _find(self, x: int) -> int | None:
        capacity = len(self._slots)
        p = x % capacity
        for _ in range(capacity):
            slot = self._slots[p]
            if slot is None or slot == x:
                return p
            p = (p + 1) % capacity
        return None

    def add(self, x: int) -> None:
        p = self._find(x)
        if p is None:
            raise OverflowError("hash table is full")
        if self._slots[p] is None:
            self._slots[p] = x
            self._size += 1

    def __contains__(self, x: int) -> bool:
        p = self._find(x)
        return p is not None and self._slots[p] == x


class PrefixHash:
    """Prefix hashes of a string, base 131 modulo 2**64, 1-based positions."""

    def __init__(self, text: str) -> None:
        self._length = len(text)
        self._prefix = [0]
        self._power = [1]
        for ch in text:
            self._prefix.append((self._prefix[-1] * BASE + ord(ch)) & _MASK)
            self._power.append((self._power[-1] * BASE) & _MASK)

    def __len__(self) -> int:
        return self._length

    def get(self, left: int, right: int) -> int:
        """Hash of the characters at positions left..right inclusive."""
        if not 1 <= left <= right <= self._length:
            raise IndexError(f"invalid range {left}..{right}")
        span = self._power[right - left + 1]
        return (self._prefix[right] - self._prefix[left - 1] * span) & _MASK

    def same(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        return self.get(l1, r1) == self.get(l2, r2)