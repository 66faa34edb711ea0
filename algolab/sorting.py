"""Classic comparison sorts and a check that a file of integers is sorted.

Every sort takes an iterable and an optional ``key`` and returns a new list.
Insertion sort and both merge sorts are stable.
"""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Iterable
from os import PathLike
from typing import Any

Key = Callable[[Any], Any] | None

SHELL_GAPS = (1, 4, 10, 23, 57, 132, 301, 701, 1750, 4001, 10001, 32001, 57001)
UNIVERSAL_CLUSTER = 22500
UNIVERSAL_SMALL = 80

_Entry = tuple[Any, Any]


def _decorate(items: Iterable[Any], key: Key) -> list[_Entry]:
    if key is None:
        return [(item, item) for item in items]
    return [(key(item), item) for item in items]


def _undecorate(entries: list[_Entry]) -> list[Any]:
    return [item for _, item in entries]


def _insertion(entries: list[_Entry], lo: int, hi: int) -> None:
    for j in range(lo + 1, hi + 1):
        current = entries[j]
        i = j - 1
        while i >= lo and entries[i][0] > current[0]:
            entries[i + 1] = entries[i]
            i -= 1
        entries[i + 1] = current


def insertion_sort(items: Iterable[Any], key: Key = None) -> list[Any]:
    """Sort by straight insertion."""
    entries = _decorate(items, key)
    _insertion(entries, 0, len(entries) - 1)
    return _undecorate(entries)


def _sift_recursive(entries: list[_Entry], end: int, i: int) -> None:
    left, right = 2 * i + 1, 2 * i + 2
    largest = i
    if left <= end and entries[left][0] > entries[i][0]:
        largest = left
    if right <= end and entries[right][0] > entries[largest][0]:
        largest = right
    if largest != i:
        entries[i], entries[largest] = entries[largest], entries[i]
        _sift_recursive(entries, end, largest)


def _sift_iterative(entries: list[_Entry], end: int, i: int) -> None:
    while True:
        left, right = 2 * i + 1, 2 * i + 2
        largest = i
        if left <= end and entries[left][0] > entries[i][0]:
            largest = left
        if right <= end and entries[right][0] > entries[largest][0]:
            largest = right
        if largest == i:
            return
        entries[i], entries[largest] = entries[largest], entries[i]
        i = largest


def _heap_sort(entries: list[_Entry], sift: Callable[[list[_Entry], int, int], None]) -> None:
    last = len(entries) - 1
    for i in range(len(entries) // 2 - 1, -1, -1):
        sift(entries, last, i)
    for end in range(last, 0, -1):
        entries[0], entries[end] = entries[end], entries[0]
        sift(entries, end - 1, 0)


def heap_sort(items: Iterable[Any], key: Key = None) -> list[Any]:
    """Sort with a binary max-heap, sifting down recursively."""
    entries = _decorate(items, key)
    _heap_sort(entries, _sift_recursive)
    return _undecorate(entries)


def heap_sort_iterative(items: Iterable[Any], key: Key = None) -> list[Any]:
    """Sort with a binary max-heap, sifting down in a loop."""
    entries = _decorate(items, key)
    _heap_sort(entries, _sift_iterative)
    return _undecorate(entries)


def _merge(entries: list[_Entry], lo: int, mid: int, hi: int) -> None:
    left = entries[lo : mid + 1]
    right = entries[mid + 1 : hi + 1]
    li = ri = 0
    out = lo
    while li < len(left) and ri < len(right):
        if left[li][0] <= right[ri][0]:
            entries[out] = left[li]
            li += 1
        else:
            entries[out] = right[ri]
            ri += 1
        out += 1
    rest = left[li:] if li < len(left) else right[ri:]
    entries[out : hi + 1] = rest


def _merge_sort(entries: list[_Entry], lo: int, hi: int) -> None:
    if lo < hi:
        mid = (lo + hi) // 2
        _merge_sort(entries, lo, mid)
        _merge_sort(entries, mid + 1, hi)
        _merge(entries, lo, mid, hi)


def merge_sort(items: Iterable[Any], key: Key = None) -> list[Any]:
    """Sort by recursive top-down merging."""
    entries = _decorate(items, key)
    _merge_sort(entries, 0, len(entries) - 1)
    return _undecorate(entries)


def _merge_runs(entries: list[_Entry], width: int) -> None:
    count = len(entries)
    while width < count:
        for start in range(0, count, 2 * width):
            mid = start + width - 1
            if mid >= count - 1:
                continue
            _merge(entries, start, mid, min(start + 2 * width - 1, count - 1))
        width *= 2


def merge_sort_bottom_up(items: Iterable[Any], key: Key = None) -> list[Any]:
    """Sort by merging runs of doubling width, without recursion."""
    entries = _decorate(items, key)
    _merge_runs(entries, 1)
    return _undecorate(entries)


def _partition(entries: list[_Entry], lo: int, hi: int) -> int:
    pivot = entries[hi][0]
    boundary = lo - 1
    for j in range(lo, hi):
        if entries[j][0] <= pivot:
            boundary += 1
            entries[boundary], entries[j] = entries[j], entries[boundary]
    entries[boundary + 1], entries[hi] = entries[hi], entries[boundary + 1]
    return boundary + 1


def _random_partition(entries: list[_Entry], lo: int, hi: int, rng: random.Random) -> int:
    chosen = rng.randint(lo, hi)
    entries[hi], entries[chosen] = entries[chosen], entries[hi]
    return _partition(entries, lo, hi)


def _quick(
    entries: list[_Entry],
    lo: int,
    hi: int,
    partition: Callable[[list[_Entry], int, int], int],
    threshold: int = 1,
) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while hi - lo + 1 > threshold:
        q = partition(entries, lo, hi)
        if q - lo <= hi - q:
            _quick(entries, lo, q - 1, partition, threshold)
            lo = q + 1
        else:
            _quick(entries, q + 1, hi, partition, threshold)
            hi = q - 1
    if lo < hi:
        _insertion(entries, lo, hi)


def quick_sort(items: Iterable[Any], key: Key = None) -> list[Any]:
    """Quicksort with the last element as pivot."""
    entries = _decorate(items, key)
    _quick(entries, 0, len(entries) - 1, _partition)
    return _undecorate(entries)


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def quick_sort_random(
    items: Iterable[Any], key: Key = None, rng: random.Random | None = None
) -> list[Any]:
    """Quicksort with a randomly chosen pivot."""
    entries = _decorate(items, key)
    chooser = _rng_or_default(rng)
    _quick(
        entries,
        0,
        len(entries) - 1,
        lambda e, lo, hi: _random_partition(e, lo, hi, chooser),
    )
    return _undecorate(entries)


def _hybrid(entries: list[_Entry], lo: int, hi: int, rng: random.Random) -> None:
    size = hi - lo + 1
    if size < 2:
        return
    threshold = max(1, int(3 * math.log(size)))
    _quick(
        entries,
        lo,
        hi,
        lambda e, a, b: _random_partition(e, a, b, rng),
        threshold,
    )


def hybrid_quick_sort(
    items: Iterable[Any], key: Key = None, rng: random.Random | None = None
) -> list[Any]:
    """Randomized quicksort that hands ranges of at most 3*ln(n) items to insertion sort."""
    entries = _decorate(items, key)
    _hybrid(entries, 0, len(entries) - 1, _rng_or_default(rng))
    return _undecorate(entries)


def shell_sort(items: Iterable[Any], key: Key = None) -> list[Any]:
    """Shell sort with a fixed gap sequence, using only gaps smaller than the input."""
    entries = _decorate(items, key)
    count = len(entries)
    for gap in reversed(SHELL_GAPS):
        if gap >= count:
            continue
        for j in range(gap, count):
            current = entries[j]
            i = j
            while i >= gap and entries[i - gap][0] > current[0]:
                entries[i] = entries[i - gap]
                i -= gap
            entries[i] = current
    return _undecorate(entries)


def universal_sort(
    items: Iterable[Any], key: Key = None, rng: random.Random | None = None
) -> list[Any]:
    """Pick a strategy by size.

    Up to 80 items use insertion sort; up to 22500 use the hybrid quicksort;
    larger inputs are cut into blocks of 22500, each sorted by the hybrid
    quicksort, and the blocks are then merged.
    """
    entries = _decorate(items, key)
    chooser = _rng_or_default(rng)
    count = len(entries)
    if count <= UNIVERSAL_SMALL:
        _insertion(entries, 0, count - 1)
    elif count <= UNIVERSAL_CLUSTER:
        _hybrid(entries, 0, count - 1, chooser)
    else:
        for start in range(0, count, UNIVERSAL_CLUSTER):
            _hybrid(entries, start, min(start + UNIVERSAL_CLUSTER, count) - 1, chooser)
        _merge_runs(entries, UNIVERSAL_CLUSTER)
    return _undecorate(entries)


def is_sorted_file(path: str | PathLike[str]) -> bool:
    """Report whether the whitespace-separated integers in a file never decrease."""
    with open(path, encoding="utf-8") as handle:
        numbers = [int(token) for line in handle for token in line.split()]
    return all(a <= b for a, b in zip(numbers, numbers[1:]))