"""Minimum number of front removals of three elements to make a list distinct."""

from __future__ import annotations

import argparse
from collections.abc import Hashable, Sequence

DEFAULT_NUMBERS = (2, 2, 4, 7, 1, 4, 8, 0, 0, 5, 6, 8, 9, 3, 8, 8, 8, 1, 2, 7)
CHUNK = 3


def minimum_operations(numbers: Sequence[Hashable]) -> int:
    """Count removals of the first three elements until the rest are distinct.

    The input is left unchanged.
    """
    remaining = list(numbers)
    operations = 0
    while remaining and len(set(remaining)) != len(remaining):
        del remaining[:CHUNK]
        operations += 1
    return operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operation count for the given numbers (or a sample list)."""
    parser = argparse.ArgumentParser(
        description="Operations needed to make the elements distinct."
    )
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)
    numbers = args.numbers or list(DEFAULT_NUMBERS)

    result = minimum_operations(numbers)
    print(
        "Minimum numbers of operations to make elements in array distinct: "
        f"{result}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())