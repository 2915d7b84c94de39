"""Find the powers of two among numbers read from standard input."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


def is_power_of_two(num: int) -> bool:
    """Return True when ``num`` is a positive power of two."""
    return num > 0 and num & (num - 1) == 0


def power_of_two(n: int) -> int:
    """Return how many times ``n`` can be halved before reaching one."""
    return n.bit_length() - 1 if n > 1 else 0


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("no more input")
    return int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many numbers, then report the powers of two."""
    tokens = _tokens(sys.stdin)
    print("Enter size of input:")
    try:
        size = _read_int(tokens)
    except ValueError:
        print("Invalid number")
        return 0
    if size < 1:
        print("Invalid size")
        return 0

    print("Enter numbers:")
    try:
        numbers = [_read_int(tokens) for _ in range(size)]
    except ValueError:
        print("Invalid number")
        return 0

    total = 0
    for number in numbers:
        if is_power_of_two(number):
            power = power_of_two(number)
            total += power
            print(f"The number {number} is a power of 2: {number} = 2^{power}")
    print(f"Total exponent sum is {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())