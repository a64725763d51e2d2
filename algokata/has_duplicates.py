"""Check whether a sequence of numbers holds any value twice."""

from __future__ import annotations

import argparse
from collections.abc import Hashable, Iterable, Sequence

DEFAULT_NUMBERS = (1, 2, 3, 4, 2, 8)


def has_duplicates(nums: Iterable[Hashable]) -> bool:
    """Return True as soon as a value is seen a second time."""
    seen: set[Hashable] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Report whether the given numbers (or a sample list) contain duplicates."""
    parser = argparse.ArgumentParser(description="Detect duplicate numbers.")
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)
    numbers = args.numbers or list(DEFAULT_NUMBERS)

    result = has_duplicates(numbers)
    print(f"If vector has duplicates?: {str(result).lower()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())