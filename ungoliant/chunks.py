"""Grouping of sequences into runs of equal values."""

from __future__ import annotations

from typing import Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)

Range = tuple[int, int]


def group_by(values: Iterable[T]) -> dict[T, list[Range]]:
    """Map each value to the inclusive (start, end) ranges of its contiguous runs.

    Values appear in the result in the order of their first run, and ranges
    are listed in increasing order.
    """
    groups: dict[T, list[Range]] = {}
    current: T | None = None
    start = 0
    length = 0
    for idx, item in enumerate(values):
        length = idx + 1
        if idx == 0:
            current = item
            start = 0
        elif item != current:
            groups.setdefault(current, []).append((start, idx - 1))
            current = item
            start = idx
    if length:
        groups.setdefault(current, []).append((start, length - 1))
    return groups