import pytest

from numkit.misc import (
    circle_area,
    days_in_month,
    fibonacci,
    handshakes,
    is_even,
    is_leap_year,
    is_perfect_square,
    largest,
    natural_sum,
    permutations,
    power,
    quadrant,
    quadratic_roots,
    range_sum,
    sign,
    smallest,
)


def test_circle_area_uses_source_pi():
    assert circle_area(1) == pytest.approx(3.14)
    assert circle_area(3) == pytest.approx(9 * circle_area(1))
    assert circle_area(0) == 0


def test_fibonacci_sequence():
    terms = fibonacci(20)
    assert len(terms) == 20
    assert terms[:2] == [0, 1]
    for a, b, c in zip(terms, terms[1:], terms[2:]):
        assert c == a + b


def test_fibonacci_edges():
    assert fibonacci(0) == []
    assert fibonacci(1) == [0]
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_largest():
    assert largest(10, 20, 30) == 30
    assert largest(30, 20, 10) == 30
    assert largest(-5) == -5
    with pytest.raises(ValueError):
        largest()


def test_smallest():
    assert smallest([10, 45, 78, 34, 67]) == 10
    assert smallest(iter([67, 34, -2])) == -2
    with pytest.raises(ValueError):
        smallest([])


@pytest.mark.parametrize(
    "year, leap", [(2000, True), (2012, True), (1900, False), (2023, False)]
)
def test_leap_year(year, leap):
    assert is_leap_year(year) is leap


def test_days_in_month():
    assert days_in_month(12, 2012) == 31
    assert days_in_month(2, 2012) == 29
    assert days_in_month(2, 2023) == 28
    assert days_in_month(4, 2023) == 30
    assert days_in_month(9, 2023) == 30


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month(month):
    with pytest.raises(ValueError, match="Invalid month"):
        days_in_month(month, 2012)


def test_handshakes_recurrence():
    assert handshakes(1) == 0
    for n in range(1, 30):
        assert handshakes(n + 1) - handshakes(n) == n


def test_natural_sum():
    assert natural_sum(0) == 0
    assert natural_sum(-3) == 0
    for n in range(1, 30):
        assert natural_sum(n) == handshakes(n + 1)


def test_range_sum():
    assert range_sum(5, 4) == 0
    assert range_sum(5, 5) == 5
    for n in range(1, 20):
        assert range_sum(1, n) == natural_sum(n)
    assert range_sum(5, 10) == range_sum(5, 7) + range_sum(8, 10)


def test_is_even():
    assert is_even(0)
    assert is_even(-4)
    assert not is_even(7)
    assert not is_even(-3)


def test_perfect_square():
    for k in range(1, 50):
        assert is_perfect_square(k * k)
        assert not is_perfect_square(k * k + 1)
    assert is_perfect_square(0)
    assert not is_perfect_square(-4)


def test_permutations():
    for n in range(1, 10):
        assert permutations(n, 0) == 1
        assert permutations(n, 1) == n
        assert permutations(n, n) == permutations(n, n - 1)


@pytest.mark.parametrize("n, r", [(3, 4), (-1, 0), (3, -1)])
def test_permutations_invalid(n, r):
    with pytest.raises(ValueError):
        permutations(n, r)


def test_power_recurrence():
    for base in (-3, 2, 5):
        assert power(base, 0) == 1
        for exponent in range(8):
            assert power(base, exponent + 1) == base * power(base, exponent)


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (1, 1, "Quadrant 1"),
        (-1, 1, "Quadrant 2"),
        (-1, -1, "Quadrant 3"),
        (1, -1, "Quadrant 4"),
        (0, 0, "Origin"),
        (0, 5, "On Axis"),
        (-5, 0, "On Axis"),
    ],
)
def test_quadrant(x, y, expected):
    assert quadrant(x, y) == expected


def _residual(a, b, c, root):
    return abs(a * root * root + b * root + c)


def test_two_real_roots():
    roots = quadratic_roots(1, -3, 2)
    assert len(roots) == 2
    assert roots[0] != roots[1]
    for root in roots:
        assert _residual(1, -3, 2, root) == pytest.approx(0, abs=1e-9)


def test_repeated_root():
    roots = quadratic_roots(1, 2, 1)
    assert len(roots) == 1
    assert _residual(1, 2, 1, roots[0]) == pytest.approx(0, abs=1e-9)


def test_complex_roots():
    first, second = quadratic_roots(1, 0, 1)
    assert first == second.conjugate()
    assert first.imag > 0
    for root in (first, second):
        assert _residual(1, 0, 1, root) == pytest.approx(0, abs=1e-9)


def test_quadratic_needs_nonzero_a():
    with pytest.raises(ValueError):
        quadratic_roots(0, 1, 1)


@pytest.mark.parametrize("n, expected", [(15, "Positive"), (0, "Zero"), (-2, "Negative")])
def test_sign(n, expected):
    assert sign(n) == expected