"""Count how often each character occurs in a string."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Mapping, Sequence

DEFAULT_WORD = "orange"


def count_chars(s: str) -> dict[str, int]:
    """Return a mapping of each character in ``s`` to its number of occurrences."""
    return dict(Counter(s))


def format_counter(counter: Mapping[str, int]) -> str:
    """Render a character counter as ``'c' : n, `` entries joined together."""
    return "".join(f"'{char}' : {count}, " for char, count in counter.items())


def main(argv: Sequence[str] | None = None) -> int:
    """Count the characters of a word and print the result."""
    parser = argparse.ArgumentParser(description="Count characters in a word.")
    parser.add_argument("word", nargs="?", default=DEFAULT_WORD)
    args = parser.parse_args(argv)

    print(f"Counted word characters: {args.word}")
    print(format_counter(count_chars(args.word)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())