"""Decide whether an integer reads the same forwards and backwards."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

DEFAULT_NUMBER = -121


def is_palindrome(number: int) -> bool:
    """Return True if the decimal digits of ``number`` form a palindrome.

    Negative numbers are never palindromes.
    """
    if number < 0:
        return False
    digits = str(number)
    return digits == digits[::-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Report whether a number (or a sample value) is a palindrome."""
    parser = argparse.ArgumentParser(description="Check a palindrome number.")
    parser.add_argument("number", nargs="?", type=int, default=DEFAULT_NUMBER)
    args = parser.parse_args(argv)

    verdict = "is" if is_palindrome(args.number) else "is not"
    print(f"Number: {args.number} {verdict} palindrome")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())