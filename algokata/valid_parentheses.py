"""Check that brackets in a string are balanced and properly nested."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

OPENERS = frozenset("([{")
MATCHING_OPENER = {")": "(", "]": "[", "}": "{"}
DEFAULT_TEXT = "(){}[]"


def is_valid(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket closes the innermost open
    bracket; a closing bracket must match it. A character with nothing open
    makes the string invalid.
    """
    stack: list[str] = []
    for char in s:
        if char in OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        expected = MATCHING_OPENER.get(char)
        if expected is not None and stack[-1] != expected:
            return False
        stack.pop()
    return not stack


def main(argv: Sequence[str] | None = None) -> int:
    """Print whether a string (or a sample one) has valid brackets."""
    parser = argparse.ArgumentParser(description="Validate bracket nesting.")
    parser.add_argument("text", nargs="?", default=DEFAULT_TEXT)
    args = parser.parse_args(argv)

    print("true" if is_valid(args.text) else "false")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())