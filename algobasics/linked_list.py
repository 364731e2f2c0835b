"""Singly linked list exercises: reversal, sorted merge and ring checks."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

MENU = (
    "请选择进行的操作：\n1.链表逆置\n2.链表合并\n3.链表合并并逆置\n"
    "4.链表判断连续元素之间是否差值绝对值不大于2"
)
PROMPT = "请输入链表元素，并以 “0” 结尾："

_END = object()


def _require(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("list is empty")
    return items


def reverse(values: Iterable[int]) -> list[int]:
    """Return the elements in reverse order."""
    items = _require(values)
    items.reverse()
    return items


def _merge_iter(first: list[int], second: list[int]) -> Iterator[int]:
    left, right = iter(first), iter(second)
    a = next(left, _END)
    b = next(right, _END)
    while a is not _END and b is not _END:
        if a < b:
            yield a
            a = next(left, _END)
        else:
            yield b
            b = next(right, _END)
    if a is not _END:
        yield a
        yield from left
    if b is not _END:
        yield b
        yield from right


def merge(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending lists into one ascending list."""
    return list(_merge_iter(_require(first), _require(second)))


def merge_reverse(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending lists into one descending list."""
    merged = merge(first, second)
    merged.reverse()
    return merged


def ring_judge(values: Iterable[int]) -> bool:
    """Check the differences between neighbours of a circular list.

    Every step along the list must differ by at most 2; the step that
    closes the ring must differ by less than 2.
    """
    items = _require(values)
    if any(abs(cur - nxt) > 2 for cur, nxt in zip(items, items[1:])):
        return False
    return abs(items[-1] - items[0]) < 2


def _read_ints(stream) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _read_list(tokens: Iterator[int]) -> list[int]:
    print(PROMPT)
    items = []
    for value in tokens:
        if value == 0:
            break
        items.append(value)
    return items


def _judge(items: list[int] | None, special: int = 0) -> int:
    if not items:
        print("NULL")
        return -1
    if special == 0:
        print("normal")
    else:
        print(f"special:{special}")
    return special


def _show(items: list[int] | None) -> None:
    if _judge(items) != 0:
        return
    print("".join(f"{value} " for value in items))


def main(argv=None) -> int:
    """Run the interactive linked list menu on standard input."""
    tokens = _read_ints(sys.stdin)
    print(MENU)
    choice = next(tokens, None)
    if choice == 1:
        items = _read_list(tokens)
        if _judge(items) == 0:
            items = reverse(items)
        _show(items)
    elif choice in (2, 3):
        first = _read_list(tokens)
        second = _read_list(tokens)
        result = None
        if _judge(first) == 0 and _judge(second) == 0:
            result = merge(first, second) if choice == 2 else merge_reverse(first, second)
        _show(result)
    elif choice == 4:
        items = _read_list(tokens)
        if _judge(items, special=1) != 1:
            print("列表不符合标准")
        elif ring_judge(items):
            print("差值不存在大于 2")
        else:
            print("差值存在大于 2")
    else:
        print("无效选项")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())