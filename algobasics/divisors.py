"""Divisor listing, divisor count and sum of a product, inclusion-exclusion."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations

from algobasics.number_theory import prime_factors

MOD = 1_000_000_007


def divisors(x: int) -> list[int]:
    """All positive divisors of x in ascending order."""
    if x < 1:
        raise ValueError("x must be positive")
    small: list[int] = []
    large: list[int] = []
    i = 1
    while i <= x // i:
        if x % i == 0:
            small.append(i)
            if i < x // i:
                large.append(x // i)
        i += 1
    return small + large[::-1]


def _exponents(values: Iterable[int]) -> Counter:
    exponents: Counter = Counter()
    for value in values:
        for prime, exponent in prime_factors(value):
            exponents[prime] += exponent
    return exponents


def divisor_count_of_product(values: Iterable[int]) -> int:
    """Number of divisors of the product of values, modulo 1e9+7."""
    result = 1
    for exponent in _exponents(values).values():
        result = result * (exponent + 1) % MOD
    return result


def divisor_sum_of_product(values: Iterable[int]) -> int:
    """Sum of the divisors of the product of values, modulo 1e9+7."""
    result = 1
    for prime, exponent in _exponents(values).items():
        series = 1
        for _ in range(exponent):
            series = (series * prime + 1) % MOD
        result = result * series % MOD
    return result


def count_divisible(n: int, primes: Sequence[int]) -> int:
    """How many of 1..n are divisible by at least one of the given primes."""
    if any(p < 1 for p in primes):
        raise ValueError("primes must be positive")
    total = 0
    for size in range(1, len(primes) + 1):
        sign = 1 if size % 2 else -1
        for combo in combinations(primes, size):
            product = 1
            for p in combo:
                product *= p
                if product > n:
                    break
            else:
                total += sign * (n // product)
    return total