"""Reading, writing and transforming ASCII art with run-length encoding."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from mtmkit.rle import RLEList

_ENCODING = "latin-1"


def ascii_art_read(stream: TextIO) -> RLEList:
    """Read every character of ``stream`` into an RLEList."""
    return RLEList(stream.read())


def ascii_art_print(rle: RLEList, stream: TextIO) -> None:
    """Write the characters of ``rle`` to ``stream``."""
    stream.write("".join(rle))


def ascii_art_print_encoded(rle: RLEList, stream: TextIO) -> None:
    """Write the run-length encoded form of ``rle`` to ``stream``."""
    stream.write(rle.export_to_string())


def map_invert(char: str) -> str:
    """Swap '@' and ' ', leaving other characters unchanged."""
    if char == "@":
        return " "
    if char == " ":
        return "@"
    return char


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool: ``-e|-i source target``. Returns 1 on success, 0 otherwise."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        return 0
    flag, source, target = args
    if flag not in ("-e", "-i"):
        return 0
    try:
        with open(source, encoding=_ENCODING, newline="") as src, open(
            target, "w", encoding=_ENCODING, newline=""
        ) as dst:
            rle = ascii_art_read(src)
            if flag == "-e":
                ascii_art_print_encoded(rle, dst)
            else:
                rle.map(map_invert)
                ascii_art_print(rle, dst)
    except OSError:
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())