"""Group words that are anagrams of one another."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterable, Sequence

DEFAULT_WORDS = ("eat", "tea", "tan", "ate", "nat", "bat")


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Return the words grouped by anagram class, case-sensitively."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def main(argv: Sequence[str] | None = None) -> int:
    """Group the given words (or a sample list) and print the groups."""
    parser = argparse.ArgumentParser(description="Group anagrams.")
    parser.add_argument("words", nargs="*")
    args = parser.parse_args(argv)
    words = args.words or list(DEFAULT_WORDS)

    print("Grouped anagrams: ")
    for group in group_anagrams(words):
        print("[ " + "".join(f"{word} " for word in group) + "]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())