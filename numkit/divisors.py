"""Divisor sums, divisor counts, factorisation and common divisors and multiples."""

from __future__ import annotations

from math import isqrt

__all__ = [
    "proper_divisor_sum",
    "is_abundant",
    "abundance",
    "is_perfect",
    "are_friendly_pair",
    "count_divisors",
    "count_numbers_with_divisors",
    "prime_factors",
    "gcd",
    "gcd_by_subtraction",
    "lcm",
    "add_fractions",
]


def _remainder(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend (truncating division)."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def proper_divisor_sum(n: int) -> int:
    """Sum of the divisors of ``n`` that are smaller than ``n``."""
    return sum(i for i in range(1, n) if n % i == 0)


def is_abundant(n: int) -> bool:
    """True when the proper divisors of ``n`` add up to more than ``n``."""
    return proper_divisor_sum(n) > n


def abundance(n: int) -> int:
    """How far the proper divisor sum of an abundant ``n`` exceeds ``n``."""
    total = proper_divisor_sum(n)
    if total <= n:
        raise ValueError(f"{n} is not an abundant number")
    return total - n


def is_perfect(n: int) -> bool:
    """True when the proper divisors of ``n`` add up to exactly ``n``."""
    return proper_divisor_sum(n) == n


def are_friendly_pair(a: int, b: int) -> bool:
    """Compare the whole parts of the divisor-sum-to-number ratios of ``a`` and ``b``."""
    return proper_divisor_sum(a) // a == proper_divisor_sum(b) // b


def count_divisors(n: int) -> int:
    """Number of positive divisors of ``n``; zero for non-positive ``n``."""
    if n <= 0:
        return 0
    return sum(
        1 if i * i == n else 2
        for i in range(1, isqrt(n) + 1)
        if n % i == 0
    )


def count_numbers_with_divisors(limit: int, count: int) -> int:
    """How many of 1..``limit`` have exactly ``count`` divisors."""
    return sum(1 for i in range(1, limit + 1) if count_divisors(i) == count)


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order, repeated by multiplicity."""
    if n < 1:
        raise ValueError(f"cannot factorise {n}")
    factors: list[int] = []
    divisor = 2
    while n > 1:
        if divisor * divisor > n:
            factors.append(n)
            break
        if n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        else:
            divisor += 1
    return factors


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's remainder method."""
    while b:
        a, b = b, _remainder(a, b)
    return a


def gcd_by_subtraction(a: int, b: int) -> int:
    """Greatest common divisor of two positive numbers by repeated subtraction."""
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be positive")
    while a != b:
        if a > b:
            a -= b
        else:
            b -= a
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive numbers."""
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be positive")
    return a * b // gcd(a, b)


def add_fractions(num1: int, den1: int, num2: int, den2: int) -> tuple[int, int]:
    """Add two fractions and return the reduced ``(numerator, denominator)``."""
    if den1 == 0 or den2 == 0:
        raise ZeroDivisionError("fraction with zero denominator")
    common = den1 * den2 // gcd(den1, den2)
    total = num1 * (common // den1) + num2 * (common // den2)
    divisor = gcd(total, common)
    return total // divisor, common // divisor