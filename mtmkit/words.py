"""Statistics over a list of words read from standard input."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


def longest_string(strings: Iterable[str]) -> str:
    """Return the first longest string, or "" when there is none."""
    longest = ""
    for string in strings:
        if len(string) > len(longest):
            longest = string
    return longest


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Return the strings in lexicographic order."""
    return sorted(strings)


def report(words: Sequence[str]) -> str:
    """Describe the longest, maximal and minimal words, one per line."""
    if not words:
        raise ValueError("no words to report on")
    ordered = sort_strings(words)
    return (
        f"The longest word is: {longest_string(words)}\n"
        f"The maximal word lexicographically is: {ordered[-1]}\n"
        f"The minimal word lexicographically is: {ordered[0]}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many words, then print their statistics."""
    tokens = (token for line in sys.stdin for token in line.split())
    print("Enter number of strings:")
    try:
        size = int(next(tokens, ""))
    except ValueError:
        size = 0
    if size < 1:
        print("Invalid size")
        return 0
    words = [word for _, word in zip(range(size), tokens)]
    if len(words) < size:
        print("Error reading words")
        return 0
    print(report(words), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())