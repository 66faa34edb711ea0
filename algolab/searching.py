"""Binary search and randomized order-statistic selection."""

from __future__ import annotations

import random
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return the first index of ``target`` in sorted ``values``."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    raise ValueError(f"{target!r} is not in values")


def _partition(items: list[Any], lo: int, hi: int) -> int:
    pivot = items[hi]
    boundary = lo - 1
    for j in range(lo, hi):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[hi] = items[hi], items[boundary + 1]
    return boundary + 1


def _random_partition(items: list[Any], lo: int, hi: int, rng: random.Random) -> int:
    chosen = rng.randint(lo, hi)
    items[hi], items[chosen] = items[chosen], items[hi]
    return _partition(items, lo, hi)


def order_statistic(values: Iterable[Any], k: int, rng: random.Random | None = None) -> Any:
    """Return the k-th smallest value (1-based) using randomized selection."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must lie between 1 and {len(items)}")
    if rng is None:
        rng = random.Random()
    lo, hi = 0, len(items) - 1
    while lo < hi:
        q = _random_partition(items, lo, hi, rng)
        rank = q - lo + 1
        if k == rank:
            return items[q]
        if k < rank:
            hi = q - 1
        else:
            lo = q + 1
            k -= rank
    return items[lo]