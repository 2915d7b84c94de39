"""Run-length encoded sequence of characters."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

_NUL = "\0"


@dataclass
class _Run:
    letter: str
    count: int


def _check_char(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a single character, got {type(value).__name__}")
    if len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return value


class RLEList:
    """A sequence of characters stored as runs of repeated letters."""

    def __init__(self, text: Iterable[str] = "") -> None:
        self._runs: list[_Run] = []
        for char in text:
            self.append(char)

    def append(self, value: str) -> None:
        """Add a character at the end; the NUL character is ignored."""
        value = _check_char(value)
        if value == _NUL:
            return
        if self._runs and self._runs[-1].letter == value:
            self._runs[-1].count += 1
        else:
            self._runs.append(_Run(value, 1))

    def __len__(self) -> int:
        return sum(run.count for run in self._runs)

    def __iter__(self) -> Iterator[str]:
        for run in self._runs:
            yield from run.letter * run.count

    def _locate(self, index: int) -> int:
        """Return the position of the run holding the character at ``index``."""
        if not isinstance(index, int):
            raise TypeError("index must be an integer")
        if index < 0 or index >= len(self):
            raise IndexError(f"index {index} out of range")
        prefix = 0
        for position, run in enumerate(self._runs):
            prefix += run.count
            if prefix > index:
                return position
        raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> str:
        return self._runs[self._locate(index)].letter

    def remove(self, index: int) -> None:
        """Remove the character found at ``index``."""
        position = self._locate(index)
        run = self._runs[position]
        if run.count > 1:
            run.count -= 1
        else:
            del self._runs[position]
            self._merge_runs()

    def map(self, function: Callable[[str], str]) -> None:
        """Replace every character with ``function(character)``."""
        if not callable(function):
            raise TypeError("map function must be callable")
        for run in self._runs:
            run.letter = _check_char(function(run.letter))
        self._merge_runs()

    def _merge_runs(self) -> None:
        merged: list[_Run] = []
        for run in self._runs:
            if merged and merged[-1].letter == run.letter:
                merged[-1].count += run.count
            else:
                merged.append(run)
        self._runs = merged

    def export_to_string(self) -> str:
        """Return each run as its letter, its count and a newline."""
        return "".join(f"{run.letter}{run.count}\n" for run in self._runs)

    def __repr__(self) -> str:
        return f"RLEList({''.join(self)!r})"