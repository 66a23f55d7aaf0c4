"""Command line: primality, number words and hexadecimal parsing."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from numkit.bases import parse_int
from numkit.primes import is_prime
from numkit.words import number_to_words


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numkit", description="Small number utilities.")
    commands = parser.add_subparsers(dest="command", required=True)

    prime = commands.add_parser("prime", help="tell whether a number is prime")
    prime.add_argument("number", type=int)

    words = commands.add_parser("words", help="spell a number in English")
    words.add_argument("number", type=int)

    hexa = commands.add_parser("hex", help="convert hexadecimal to decimal")
    hexa.add_argument("text")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "prime":
            verdict = "is" if is_prime(args.number) else "is not"
            print(f"{args.number} {verdict} a prime number.")
        elif args.command == "words":
            print(number_to_words(args.number))
        else:
            print(parse_int(args.text, 16))
    except (ValueError, OverflowError) as exc:
        print(f"numkit: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())