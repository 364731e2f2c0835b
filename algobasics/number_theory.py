"""Euclid, congruences, modular powers, Euler's function and prime sieves."""

from __future__ import annotations

from collections.abc import Iterable


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm (remainders truncate toward zero)."""
    while b:
        a, b = b, _trunc_mod(a, b)
    return a


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (d, x, y) with a*x + b*y == d, d being gcd(a, b)."""
    if b == 0:
        return a, 1, 0
    d, x, y = ext_gcd(b, _trunc_mod(a, b))
    return d, y, x - _trunc_div(a, b) * y


def solve_linear_congruence(a: int, b: int, m: int) -> int | None:
    """Some x in [0, m) with a*x ≡ b (mod m), or None when there is none."""
    if m < 1:
        raise ValueError("modulus must be positive")
    d, x, _ = ext_gcd(a, m)
    if b % d:
        return None
    return x * (b // d) % m


def chinese_remainder(pairs: Iterable[tuple[int, int]]) -> int | None:
    """Smallest non-negative x with x ≡ r (mod m) for every (m, r), or None."""
    it = iter(pairs)
    first = next(it, None)
    if first is None:
        raise ValueError("at least one congruence is required")
    modulus, remainder = first
    if modulus < 1:
        raise ValueError("moduli must be positive")
    for other_modulus, other_remainder in it:
        if other_modulus < 1:
            raise ValueError("moduli must be positive")
        d, k, _ = ext_gcd(modulus, other_modulus)
        diff = other_remainder - remainder
        if diff % d:
            return None
        step = other_modulus // d
        k = k * (diff // d) % step
        remainder += modulus * k
        modulus = abs(modulus // d * other_modulus)
    return remainder % modulus


def power_mod(a: int, b: int, p: int) -> int:
    """a**b mod p by repeated squaring."""
    if b < 0:
        raise ValueError("exponent must not be negative")
    if p < 1:
        raise ValueError("modulus must be positive")
    result = 1 % p
    a %= p
    while b:
        if b & 1:
            result = result * a % p
        a = a * a % p
        b >>= 1
    return result


def mod_inverse(a: int, p: int) -> int | None:
    """Inverse of a modulo the prime p by Fermat's little theorem, or None."""
    if p < 2:
        raise ValueError("modulus must be a prime")
    if a % p == 0:
        return None
    return power_mod(a, p - 2, p)


def euler_phi(x: int) -> int:
    """Euler's totient of x."""
    if x < 1:
        raise ValueError("x must be positive")
    result = x
    i = 2
    while i <= x // i:
        if x % i == 0:
            result = result // i * (i - 1)
            while x % i == 0:
                x //= i
        i += 1
    if x > 1:
        result = result // x * (x - 1)
    return result


def euler_phi_sum(n: int) -> int:
    """Sum of Euler's totient over 1..n, using a linear sieve."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    phi = [0] * (n + 1)
    phi[1] = 1
    composite = bytearray(n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            phi[i] = i - 1
        limit = n // i
        for p in primes:
            if p > limit:
                break
            t = i * p
            composite[t] = 1
            if i % p == 0:
                phi[t] = phi[i] * p
                break
            phi[t] = phi[i] * (p - 1)
    return sum(phi)


def prime_factors(x: int) -> list[tuple[int, int]]:
    """Prime factorisation of x as ascending (prime, exponent) pairs."""
    if x < 1:
        raise ValueError("x must be positive")
    factors = []
    i = 2
    while i <= x // i:
        if x % i == 0:
            exponent = 0
            while x % i == 0:
                x //= i
                exponent += 1
            factors.append((i, exponent))
        i += 1
    if x > 1:
        factors.append((x, 1))
    return factors


def is_prime(x: int) -> bool:
    """Primality by trial division."""
    if x < 2:
        return False
    i = 2
    while i <= x // i:
        if x % i == 0:
            return False
        i += 1
    return True


def count_primes_linear(n: int) -> int:
    """Number of primes up to n, found with a linear sieve."""
    if n < 2:
        return 0
    composite = bytearray(n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
        limit = n // i
        for p in primes:
            if p > limit:
                break
            composite[i * p] = 1
            if i % p == 0:
                break
    return len(primes)


def count_primes_eratosthenes(n: int) -> int:
    """Number of primes up to n, found with the sieve of Eratosthenes."""
    if n < 2:
        return 0
    composite = bytearray(n + 1)
    count = 0
    for i in range(2, n + 1):
        if composite[i]:
            continue
        count += 1
        multiples = range(2 * i, n + 1, i)
        composite[2 * i :: i] = b"\x01" * len(multiples)
    return count