"""String matching with KMP and evaluation of integer expressions."""

from __future__ import annotations

import operator
import re
import string
from collections.abc import Sequence

_LEXEME = re.compile(r"[0-9]+|\S")
_PRIORITY = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2}


def _prefix_function(pattern: Sequence) -> list[int]:
    fail = [0] * len(pattern)
    j = 0
    for i, ch in enumerate(pattern[1:], start=1):
        while j and ch != pattern[j]:
            j = fail[j - 1]
        if ch == pattern[j]:
            j += 1
        fail[i] = j
    return fail


def kmp_find_all(pattern: Sequence, text: Sequence) -> list[int]:
    """Start indices (from 0) of every occurrence of pattern in text."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    fail = _prefix_function(pattern)
    n = len(pattern)
    j = 0
    found = []
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = fail[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == n:
            found.append(i - n + 1)
            j = fail[j - 1]
    return found


def _divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left >= 0) == (right > 0) else -quotient


_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def evaluate(expression: str) -> int:
    """Evaluate an integer expression with + - * / and parentheses.

    Division truncates toward zero.
    """
    numbers: list[int] = []
    operators: list[str] = []

    def reduce() -> None:
        if len(numbers) < 2 or not operators:
            raise ValueError("malformed expression")
        op = operators.pop()
        if op == "(":
            raise ValueError("unbalanced parentheses")
        right = numbers.pop()
        left = numbers.pop()
        numbers.append(_OPERATIONS[op](left, right))

    for item in _LEXEME.findall(expression):
        if item[0] in string.digits:
            numbers.append(int(item))
        elif item == "(":
            operators.append(item)
        elif item == ")":
            while operators and operators[-1] != "(":
                reduce()
            if not operators:
                raise ValueError("unbalanced parentheses")
            operators.pop()
        elif item in _PRIORITY:
            while operators and _PRIORITY[item] <= _PRIORITY[operators[-1]]:
                reduce()
            operators.append(item)
        else:
            raise ValueError(f"unexpected character {item!r}")
    while operators:
        reduce()
    if len(numbers) != 1:
        raise ValueError("malformed expression")
    return numbers[0]