"""Small string and list helpers."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def duplicate_string(s: str, times: int) -> str:
    """Return ``s`` repeated ``times`` times; ``times`` must be positive."""
    if s is None:
        raise ValueError("string must not be None")
    if times <= 0:
        raise ValueError(f"times must be positive, got {times}")
    return s * times


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted, non-empty sequences into one sorted list."""
    if not first or not second:
        raise ValueError("both sequences must be non-empty")
    return list(heapq.merge(first, second))