"""Bit counting and arbitrary-length decimal addition."""

from __future__ import annotations

from itertools import zip_longest

INT_BITS = 32
_INT_MIN = -(1 << (INT_BITS - 1))
_MASK = (1 << INT_BITS) - 1


def _low_bit(x: int) -> int:
    return x & -x


def count_one_bits(x: int) -> int:
    """Number of 1 bits in x; negative values use 32-bit two's complement."""
    if x < _INT_MIN:
        raise ValueError(f"{x} does not fit in a 32-bit signed integer")
    if x < 0:
        x &= _MASK
    count = 0
    while x:
        x -= _low_bit(x)
        count += 1
    return count


def _check_digits(number: str) -> None:
    if not number or not (number.isascii() and number.isdigit()):
        raise ValueError(f"not a decimal number: {number!r}")


def add_decimal(a: str, b: str) -> str:
    """Sum of two non-negative decimal strings, added digit by digit.

    The result has as many digits as the longer operand, plus one when the
    sum carries out of the top digit; leading zeros are kept.
    """
    _check_digits(a)
    _check_digits(b)
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry += int(x) + int(y)
        digits.append(str(carry % 10))
        carry //= 10
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))