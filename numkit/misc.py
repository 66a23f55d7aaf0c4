"""Small arithmetic helpers: areas, sequences, calendars, roots and signs."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterable
from math import isqrt

__all__ = [
    "circle_area",
    "fibonacci",
    "largest",
    "smallest",
    "is_leap_year",
    "handshakes",
    "natural_sum",
    "days_in_month",
    "is_even",
    "is_perfect_square",
    "permutations",
    "power",
    "quadrant",
    "quadratic_roots",
    "sign",
    "range_sum",
]

_PI = 3.14
_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})


def circle_area(radius: float) -> float:
    """Area of a circle, taking pi as 3.14."""
    return _PI * radius * radius


def fibonacci(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting 0, 1."""
    if count < 0:
        raise ValueError("count must not be negative")
    terms: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    return terms


def largest(*args: int) -> int:
    """The greatest of the given numbers."""
    if not args:
        raise ValueError("largest() needs at least one number")
    return max(args)


def smallest(values: Iterable[int]) -> int:
    """The smallest element of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("smallest() of an empty sequence")
    return min(items)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def handshakes(people: int) -> int:
    """Handshakes when every pair of ``people`` shakes hands once."""
    return people * (people - 1) // 2


def natural_sum(n: int) -> int:
    """Sum of 1..``n``; zero when ``n`` is below one."""
    return sum(range(1, n + 1))


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    raise ValueError("Invalid month")


def is_even(n: int) -> bool:
    """True when ``n`` is divisible by two."""
    return n % 2 == 0


def is_perfect_square(n: int) -> bool:
    """True when ``n`` is the square of an integer."""
    if n < 0:
        return False
    root = isqrt(n)
    return root * root == n


def permutations(n: int, r: int) -> int:
    """Ordered arrangements of ``r`` out of ``n`` items."""
    if n < 0 or r < 0 or r > n:
        raise ValueError("need 0 <= r <= n")
    return math.factorial(n) // math.factorial(n - r)


def power(base: int, exponent: int) -> int:
    """``base`` raised to a non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def quadrant(x: int, y: int) -> str:
    """Where the point ``(x, y)`` lies: a quadrant, the origin or an axis."""
    if x > 0 and y > 0:
        return "Quadrant 1"
    if x < 0 and y > 0:
        return "Quadrant 2"
    if x < 0 and y < 0:
        return "Quadrant 3"
    if x > 0 and y < 0:
        return "Quadrant 4"
    if x == 0 and y == 0:
        return "Origin"
    return "On Axis"


def quadratic_roots(a: float, b: float, c: float) -> tuple[float, ...] | tuple[complex, complex]:
    """Roots of ``a*x**2 + b*x + c``.

    Two real roots, one repeated root as a one-element tuple, or a pair of
    complex conjugates.
    """
    if a == 0:
        raise ValueError("coefficient a must not be zero")
    d = b * b - 4 * a * c
    if d > 0:
        root = math.sqrt(d)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    if d == 0:
        return (-b / (2 * a),)
    real = -b / (2 * a)
    imag = cmath.sqrt(-d).real / (2 * a)
    return (complex(real, imag), complex(real, -imag))


def sign(n: float) -> str:
    """"Zero", "Positive" or "Negative"."""
    if n == 0:
        return "Zero"
    return "Positive" if n > 0 else "Negative"


def range_sum(a: int, b: int) -> int:
    """Sum of the integers from ``a`` to ``b`` inclusive; zero when ``a > b``."""
    return sum(range(a, b + 1))