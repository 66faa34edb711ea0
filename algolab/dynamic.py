"""Dynamic-programming exercises: Catalan numbers, LCS, LIS, edit distance, towers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Any


def catalan(n: int) -> int:
    """Return c(n) with c(0)=0, c(1)=c(2)=1 and c(n)=sum c(j)*c(n-j), 0<j<n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    values = [0, 1, 1]
    for i in range(3, n + 1):
        values.append(sum(values[j] * values[i - j] for j in range(1, i)))
    return values[n]


def longest_common_subsequence(x: Sequence[Any], y: Sequence[Any]) -> list[Any]:
    """Return one longest common subsequence of ``x`` and ``y`` as a list."""
    xs, ys = list(x), list(y)
    lengths = [[0] * (len(ys) + 1) for _ in range(len(xs) + 1)]
    for i, xi in enumerate(xs, 1):
        for j, yj in enumerate(ys, 1):
            if xi == yj:
                lengths[i][j] = lengths[i - 1][j - 1] + 1
            else:
                lengths[i][j] = max(lengths[i - 1][j], lengths[i][j - 1])

    result = []
    i, j = len(xs), len(ys)
    while i and j:
        if xs[i - 1] == ys[j - 1]:
            result.append(xs[i - 1])
            i -= 1
            j -= 1
        elif lengths[i - 1][j] >= lengths[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    return result


def longest_increasing_subsequence(values: Iterable[Any]) -> list[Any]:
    """Return one longest strictly increasing subsequence of ``values``.

    Among equally long ones, the one ending latest in the input wins.
    """
    items = list(values)
    if not items:
        return []
    count = len(items)
    length = [1] * count
    pred = [0] * count
    for i, current in enumerate(items):
        for j in range(i + 1, count):
            if current < items[j] and length[i] + 1 > length[j]:
                length[j] = length[i] + 1
                pred[j] = i

    best = max(range(count), key=lambda k: (length[k], k))
    result = [items[best]]
    for _ in range(length[best] - 1):
        best = pred[best]
        result.append(items[best])
    result.reverse()
    return result


@dataclass(frozen=True)
class EditCosts:
    """Prices of the operations that turn one string into another."""

    copy: int
    substitute: int
    delete: int
    insert: int
    transpose: int
    truncate: int


def edit_distance_table(x: str, y: str, costs: EditCosts) -> list[list[int]]:
    """Return the (len(x)+1) x (len(y)+1) table of conversion costs."""
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for j in range(1, len(y) + 1):
        table[0][j] = table[0][j - 1] + costs.insert
    for i in range(1, len(x) + 1):
        table[i][0] = table[i - 1][0] + costs.delete
        for j in range(1, len(y) + 1):
            step = costs.copy if x[i - 1] == y[j - 1] else costs.substitute
            candidates = [
                table[i - 1][j] + costs.delete,
                table[i][j - 1] + costs.insert,
                table[i - 1][j - 1] + step,
            ]
            if i >= 3 and j >= 3 and x[i - 3] == y[j - 2] and x[i - 2] == y[j - 3]:
                candidates.append(table[i - 2][j - 2] + costs.transpose)
            table[i][j] = min(candidates)
    return table


def edit_distance(x: str, y: str, costs: EditCosts) -> int:
    """Return the cheapest cost of turning ``x`` into ``y``.

    A truncation may drop any tail of ``x`` once ``y`` has been produced.
    """
    table = edit_distance_table(x, y, costs)
    last = len(y)
    best = table[len(x)][last]
    for row in table[: len(x)]:
        best = min(best, row[last] + costs.truncate)
    return best


@dataclass(frozen=True)
class Athlete:
    """An athlete with a body mass and the load they can carry."""

    mass: int
    strength: int


def max_tower(athletes: Iterable[Athlete]) -> list[Athlete]:
    """Greedily stack athletes by increasing strength.

    An athlete joins when their strength covers the mass of everyone
    already in the tower; the first one always joins.
    """
    tower: list[Athlete] = []
    load = 0
    for athlete in sorted(athletes, key=attrgetter("strength")):
        if not tower or load <= athlete.strength:
            tower.append(athlete)
            load += athlete.mass
    return tower