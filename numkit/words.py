"""Spelling numbers out in English and counting digit-string decodings."""

from __future__ import annotations

__all__ = ["number_to_words", "count_decodings"]

_ONES = ("", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine")
_TEENS = (
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
)
_TENS = ("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")

_LIMIT = 1_000_000


def _join(head: str, rest: int) -> str:
    return f"{head} {_spell(rest)}" if rest else head


def _spell(n: int) -> str:
    if n < 10:
        return _ONES[n]
    if n < 20:
        return _TEENS[n - 10]
    if n < 100:
        return _join(_TENS[n // 10], n % 10)
    if n < 1000:
        return _join(f"{_ONES[n // 100]} Hundred", n % 100)
    return _join(f"{_spell(n // 1000)} Thousand", n % 1000)


def number_to_words(n: int) -> str:
    """English words for ``n`` from 0 to 999999."""
    if n < 0:
        raise ValueError(f"cannot spell negative number {n}")
    if n >= _LIMIT:
        raise ValueError("Out of range")
    if n == 0:
        return "Zero"
    return _spell(n)


def count_decodings(s: str) -> int:
    """Ways to read the digit string ``s`` as letters numbered 1 to 26."""
    if not s or not all(ch in "0123456789" for ch in s):
        raise ValueError(f"{s!r} is not a string of digits")
    if s[0] == "0":
        return 0
    prev, curr = 1, 1
    for before, ch in zip(s, s[1:]):
        ways = curr if ch != "0" else 0
        if 10 <= int(before + ch) <= 26:
            ways += prev
        prev, curr = curr, ways
    return curr