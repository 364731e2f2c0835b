"""Binomial coefficients by table, factorials, Lucas' theorem and exact bignums."""

from __future__ import annotations

import math

from algobasics.number_theory import is_prime, power_mod

MOD = 1_000_000_007


def binomial_table(size: int) -> list[list[int]]:
    """Rows 0..size-1 of Pascal's triangle modulo 1e9+7."""
    if size < 0:
        raise ValueError("size must not be negative")
    rows = []
    row = [1]
    for _ in range(size):
        rows.append(row)
        row = [1, *((a + b) % MOD for a, b in zip(row, row[1:])), 1]
    return rows


class _Factorials:
    """Factorials and inverse factorials modulo 1e9+7, grown on demand."""

    def __init__(self) -> None:
        self.fact = [1]
        self.inverse = [1]

    def ensure(self, n: int) -> None:
        for i in range(len(self.fact), n + 1):
            self.fact.append(self.fact[-1] * i % MOD)
            self.inverse.append(self.inverse[-1] * power_mod(i, MOD - 2, MOD) % MOD)


_FACTORIALS = _Factorials()


def _check(a: int, b: int) -> None:
    if not 0 <= b <= a:
        raise ValueError("need 0 <= b <= a")


def binomial_mod_factorial(a: int, b: int) -> int:
    """C(a, b) modulo 1e9+7 from factorials and their inverses."""
    _check(a, b)
    if a >= MOD:
        raise ValueError("a must be below the modulus")
    _FACTORIALS.ensure(a)
    fact, inverse = _FACTORIALS.fact, _FACTORIALS.inverse
    return fact[a] * inverse[a - b] % MOD * inverse[b] % MOD


def _small_binomial(a: int, b: int, p: int) -> int:
    if b > a:
        return 0
    result = 1
    for i, j in zip(range(a, a - b, -1), range(1, b + 1)):
        result = result * i % p
        result = result * power_mod(j, p - 2, p) % p
    return result


def binomial_lucas(a: int, b: int, p: int) -> int:
    """C(a, b) modulo the prime p by Lucas' theorem."""
    if p < 2:
        raise ValueError("p must be a prime")
    if a < 0 or b < 0:
        raise ValueError("a and b must not be negative")
    if a < p or b < p:
        return _small_binomial(a, b, p)
    return _small_binomial(a % p, b % p, p) * binomial_lucas(a // p, b // p, p) % p


def _legendre(n: int, p: int) -> int:
    count = 0
    while n:
        n //= p
        count += n
    return count


def binomial_exact(a: int, b: int) -> int:
    """C(a, b) exactly, from the prime factorisation of the factorials."""
    _check(a, b)
    return math.prod(
        p ** (_legendre(a, p) - _legendre(b, p) - _legendre(a - b, p))
        for p in range(2, a + 1)
        if is_prime(p)
    )


def catalan_mod(n: int) -> int:
    """The n-th Catalan number, C(2n, n) / (n + 1), modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    return binomial_mod_factorial(2 * n, n) * power_mod(n + 1, MOD - 2, MOD) % MOD