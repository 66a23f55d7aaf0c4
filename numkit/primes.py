"""Primality tests, prime listings and prime pair sums."""

from __future__ import annotations

from math import isqrt

__all__ = ["is_prime", "primes_up_to", "primes_in_range", "goldbach_pair"]


def is_prime(n: int) -> bool:
    """True when ``n`` is a prime number."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def primes_in_range(lower: int, upper: int) -> list[int]:
    """Primes between ``lower`` and ``upper`` inclusive, ascending."""
    return [n for n in range(lower, upper + 1) if is_prime(n)]


def primes_up_to(limit: int) -> list[int]:
    """Primes from 2 up to ``limit`` inclusive, ascending."""
    return primes_in_range(2, limit)


def goldbach_pair(n: int) -> tuple[int, int] | None:
    """First pair of primes ``(p, n - p)`` with ``p <= n // 2``, or None if there is none."""
    return next(
        ((i, n - i) for i in range(2, n // 2 + 1) if is_prime(i) and is_prime(n - i)),
        None,
    )