"""Conversion of integers between binary, octal, decimal and hexadecimal."""

from __future__ import annotations

from itertools import takewhile

__all__ = [
    "binary_to_octal",
    "parse_int",
    "to_binary",
    "to_hex",
    "to_octal",
    "octal_to_binary",
]

_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1
_SPACE = " \t\n\v\f\r"


def _digit_text(value: int | str, allowed: str, kind: str) -> str:
    text = str(value).strip()
    if not text or any(ch not in allowed for ch in text):
        raise ValueError(f"{value!r} is not a {kind} number")
    return text


def _to_base(n: int, base: int) -> str:
    if n < 0:
        raise ValueError(f"cannot convert negative number {n}")
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(_ALPHABET[rem])
    return "".join(reversed(out))


def binary_to_octal(binary: int | str) -> str:
    """Octal digits of a number written with binary digits."""
    text = _digit_text(binary, "01", "binary")
    return format(int(text, 2), "o")


def parse_int(text: str, base: int) -> int:
    """Parse a leading signed integer in ``base``, ignoring trailing characters.

    Raises ValueError when no digits are found and OverflowError when the
    value does not fit in a 32-bit signed integer.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    valid = set(_ALPHABET[:base]) | set(_ALPHABET[:base].lower())
    body = text.lstrip(_SPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if base == 16 and body[:2] in ("0x", "0X") and body[2:3] and body[2] in valid:
        body = body[2:]
    digits = "".join(takewhile(lambda ch: ch in valid, body))
    if not digits:
        raise ValueError(f"no base-{base} digits in {text!r}")
    value = sign * int(digits, base)
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"{text!r} is out of range")
    return value


def to_binary(n: int) -> str:
    """Binary digits of a non-negative ``n``; zero gives an empty string."""
    return _to_base(n, 2)


def to_hex(n: int) -> str:
    """Upper-case hexadecimal digits of a non-negative ``n``; zero gives an empty string."""
    return _to_base(n, 16)


def to_octal(n: int) -> str:
    """Octal digits of a non-negative ``n``; zero gives an empty string."""
    return _to_base(n, 8)


def octal_to_binary(octal: int | str) -> str:
    """Binary digits of a number written with octal digits."""
    text = _digit_text(octal, "01234567", "octal")
    return format(int(text, 8), "b")