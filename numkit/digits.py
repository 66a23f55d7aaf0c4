"""Properties of numbers defined by their decimal digits."""

from __future__ import annotations

from collections.abc import Iterator
from functools import reduce
from math import factorial

__all__ = [
    "is_armstrong",
    "armstrong_numbers",
    "is_automorphic",
    "is_harshad",
    "reverse_number",
    "is_palindrome",
    "digit_sum",
    "digit_count",
    "count_digit",
    "is_strong",
    "replace_zeros",
]


def _digits(n: int) -> Iterator[int]:
    """Decimal digits from least significant, carrying the sign of ``n``."""
    sign = -1 if n < 0 else 1
    n = abs(n)
    while n:
        n, digit = divmod(n, 10)
        yield sign * digit


def is_armstrong(n: int) -> bool:
    """True when the cubes of the digits of ``n`` add up to ``n``."""
    return sum(d ** 3 for d in _digits(n)) == n


def armstrong_numbers(start: int, end: int) -> list[int]:
    """Armstrong numbers between ``start`` and ``end`` inclusive."""
    return [n for n in range(start, end + 1) if is_armstrong(n)]


def is_automorphic(n: int) -> bool:
    """True when the square of ``n`` ends in the digits of ``n``.

    Non-positive numbers have no digits to compare and are reported as automorphic.
    """
    if n <= 0:
        return True
    return str(n * n).endswith(str(n))


def digit_sum(n: int) -> int:
    """Sum of the digits of ``n``, negative for negative ``n``."""
    return sum(_digits(n))


def is_harshad(n: int) -> bool:
    """True when ``n`` is divisible by the sum of its digits."""
    total = abs(digit_sum(n))
    if total == 0:
        raise ValueError("zero has no digit sum to divide by")
    return n % total == 0


def reverse_number(n: int) -> int:
    """The number with the digits of ``n`` in reverse order, keeping its sign."""
    return reduce(lambda acc, d: acc * 10 + d, _digits(n), 0)


def is_palindrome(n: int) -> bool:
    """True when ``n`` reads the same reversed."""
    return reverse_number(n) == n


def digit_count(n: int) -> int:
    """Number of decimal digits of a positive ``n``; zero otherwise."""
    if n <= 0:
        return 0
    return sum(1 for _ in _digits(n))


def count_digit(n: int, digit: int) -> int:
    """How many times ``digit`` occurs among the signed digits of ``n``."""
    return sum(1 for d in _digits(n) if d == digit)


def is_strong(n: int) -> bool:
    """True when the factorials of the digits of ``n`` add up to ``n``."""
    if n < 0:
        return False
    return sum(factorial(d) for d in _digits(n)) == n


def replace_zeros(n: int) -> int:
    """``n`` with every digit 0 replaced by 1."""
    return int(str(n).replace("0", "1"))