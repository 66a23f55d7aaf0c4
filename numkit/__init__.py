"""Helpers for primes, divisors, digits, number bases, number words and small arithmetic tasks."""

__version__ = "0.1.0"
__all__ = ["bases", "cli", "digits", "divisors", "misc", "primes", "words"]