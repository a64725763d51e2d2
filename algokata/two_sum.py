"""Find two indices whose values add up to a target."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

DEFAULT_NUMBERS = (1, 2, 3, 4, 5)
DEFAULT_TARGET = 3


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return the first pair of indices ``(i, j)``, ``i < j``, summing to ``target``.

    When a value repeats, the latest index seen for it is used. Returns None
    if no such pair exists.
    """
    index_of: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in index_of:
            return index_of[complement], index
        index_of[value] = index
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Solve two-sum for a target and numbers (or the sample input)."""
    parser = argparse.ArgumentParser(description="Find two numbers summing to a target.")
    parser.add_argument("--target", type=int, default=DEFAULT_TARGET)
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)
    numbers = args.numbers or list(DEFAULT_NUMBERS)

    result = two_sum(numbers, args.target)
    if result is None:
        print("No solution found")
    else:
        first, second = result
        print(f"Indices: [{first}], [{second}] ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())