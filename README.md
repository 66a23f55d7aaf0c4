# numkit

Small, dependency-free helpers for everyday number work: primality,
divisors, digit properties, base conversion, spelling numbers out in
English, and assorted arithmetic.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from numkit.primes import is_prime, primes_up_to, goldbach_pair
from numkit.divisors import gcd, lcm, prime_factors, add_fractions
from numkit.digits import is_armstrong, reverse_number, digit_sum
from numkit.bases import to_hex, to_binary, parse_int
from numkit.words import number_to_words, count_decodings
from numkit.misc import is_leap_year, days_in_month, quadratic_roots

is_prime(97)                  # True
primes_up_to(20)              # [2, 3, 5, 7, 11, 13, 17, 19]
goldbach_pair(28)             # (5, 23)
prime_factors(315)            # [3, 3, 5, 7]
gcd(96, 56)                   # 8
lcm(12, 14)                   # 84
add_fractions(1, 2, 1, 3)     # (5, 6)
is_armstrong(153)             # True
reverse_number(1234)          # 4321
to_hex(255)                   # 'FF'
parse_int("1010", 2)          # 10
number_to_words(1234)         # 'One Thousand Two Hundred Thirty Four'
count_decodings("226")        # 3
days_in_month(2, 2012)        # 29
```

### Modules

- `numkit.divisors` – `proper_divisor_sum`, `is_abundant`, `abundance`,
  `is_perfect`, `are_friendly_pair`, `count_divisors`,
  `count_numbers_with_divisors`, `prime_factors`, `gcd`,
  `gcd_by_subtraction`, `lcm` and `add_fractions` (returns a reduced
  `(numerator, denominator)` pair).
- `numkit.primes` – `is_prime`, `primes_up_to`, `primes_in_range` and
  `goldbach_pair`, which returns the first pair of primes adding up to a
  number, or `None`.
- `numkit.digits` – `is_armstrong` (sum of cubed digits), `armstrong_numbers`,
  `is_automorphic`, `is_harshad`, `reverse_number`, `is_palindrome`,
  `digit_sum`, `digit_count`, `count_digit`, `is_strong` (sum of digit
  factorials) and `replace_zeros`.
- `numkit.bases` – `to_binary`, `to_octal` and `to_hex` for non-negative
  integers (zero gives an empty string), `binary_to_octal`,
  `octal_to_binary`, and `parse_int`, which reads a leading signed integer
  in any base from 2 to 36, ignores trailing characters and raises
  `OverflowError` outside the 32-bit signed range.
- `numkit.words` – `number_to_words` for 0 to 999999 and
  `count_decodings`, the number of ways to read a digit string as letters
  numbered 1 to 26.
- `numkit.misc` – `circle_area` (with pi taken as 3.14), `fibonacci`,
  `largest`, `smallest`, `is_leap_year`, `days_in_month`, `handshakes`,
  `natural_sum`, `is_even`, `is_perfect_square`, `permutations`, `power`,
  `quadrant`, `quadratic_roots`, `sign` and `range_sum`.

Invalid input is reported with `ValueError` (for example a month outside
1–12, a number out of range for `number_to_words`, or a non-abundant
number passed to `abundance`); `add_fractions` raises `ZeroDivisionError`
for a zero denominator.

## Command line

The `numkit` command exposes three of the helpers as subcommands:

```
numkit prime 97       # 97 is a prime number.
numkit words 1234     # One Thousand Two Hundred Thirty Four
numkit hex 1A         # 26
```

Errors such as an out-of-range number are printed to standard error and
the command exits with status 1. Run `numkit --help` for the full usage.

The command line covers only primality, number words and hexadecimal
parsing; everything else is available from Python only.