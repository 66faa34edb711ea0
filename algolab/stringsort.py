"""Multikey (three-way radix) quicksort of records keyed by a string."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

_END = -1


def _char(text: str, depth: int) -> int:
    return ord(text[depth]) if depth < len(text) else _END


def multikey_quicksort(records: Iterable[Sequence[Any]]) -> list[Sequence[Any]]:
    """Return the records ordered by their first field, a string.

    Ranges are split three ways on the character at the current depth; the
    middle part moves on to the next character. A string that has ended
    sorts before every longer string sharing its prefix.
    """
    items = list(records)
    pending = [(0, len(items) - 1, 0)]
    while pending:
        lo, hi, depth = pending.pop()
        if hi <= lo:
            continue
        pivot = _char(items[hi][0], depth)
        lt, i, gt = lo, lo, hi
        while i <= gt:
            current = _char(items[i][0], depth)
            if current < pivot:
                items[lt], items[i] = items[i], items[lt]
                lt += 1
                i += 1
            elif current > pivot:
                items[i], items[gt] = items[gt], items[i]
                gt -= 1
            else:
                i += 1
        pending.append((lo, lt - 1, depth))
        pending.append((gt + 1, hi, depth))
        if pivot != _END:
            pending.append((lt, gt, depth + 1))
    return items