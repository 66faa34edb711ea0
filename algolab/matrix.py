"""Dense matrices with Gaussian elimination, determinants and inverses."""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Number
from typing import Any

EPSILON = 1e-14


def _is_zero(value: float) -> bool:
    return -EPSILON < value < EPSILON


def _snap(value: float) -> float:
    return 0.0 if _is_zero(value) else value


def _format(value: Any) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


class Matrix:
    """An immutable rectangular table of numbers.

    Indexing with an integer gives a row as a tuple; indexing with a pair
    ``(row, column)`` gives one element.
    """

    __slots__ = ("_rows", "_cols")

    def __init__(self, rows: Iterable[Iterable[Any]] = ()) -> None:
        table = tuple(tuple(row) for row in rows)
        widths = {len(row) for row in table}
        if len(widths) > 1:
            raise ValueError("rows differ in length")
        self._rows: tuple[tuple[Any, ...], ...] = table
        self._cols = widths.pop() if widths else 0

    @classmethod
    def _build(cls, rows: Iterable[Iterable[Any]], col_count: int) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._rows = tuple(tuple(row) for row in rows)
        matrix._cols = col_count
        return matrix

    @classmethod
    def filled(cls, row_count: int, col_count: int, value: Any = 0) -> Matrix:
        """Return a ``row_count`` x ``col_count`` matrix holding ``value`` everywhere."""
        if row_count < 0 or col_count < 0:
            raise ValueError("dimensions must be non-negative")
        return cls._build(([value] * col_count for _ in range(row_count)), col_count)

    @classmethod
    def identity(cls, row_count: int, col_count: int) -> Matrix:
        """Return a matrix with ones on the main diagonal and zeros elsewhere."""
        if row_count < 0 or col_count < 0:
            raise ValueError("dimensions must be non-negative")
        return cls._build(
            ([1 if i == j else 0 for j in range(col_count)] for i in range(row_count)),
            col_count,
        )

    @property
    def row_count(self) -> int:
        """The number of rows."""
        return len(self._rows)

    @property
    def col_count(self) -> int:
        """The number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """The pair (rows, columns)."""
        return self.row_count, self._cols

    def __getitem__(self, index: int | tuple[int, int]) -> Any:
        if isinstance(index, tuple):
            row, column = index
            return self._rows[row][column]
        return self._rows[index]

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._rows == other._rows

    def __hash__(self) -> int:
        return hash((self.shape, self._rows))

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def __add__(self, other: object) -> Matrix:
        """Add element-wise; a cell present in only one operand is copied, others are 0."""
        if not isinstance(other, Matrix):
            return NotImplemented
        rows = max(self.row_count, other.row_count)
        cols = max(self.col_count, other.col_count)

        def cell(i: int, j: int) -> Any:
            in_left = i < self.row_count and j < self.col_count
            in_right = i < other.row_count and j < other.col_count
            if in_left and in_right:
                return self._rows[i][j] + other._rows[i][j]
            if in_left:
                return self._rows[i][j]
            if in_right:
                return other._rows[i][j]
            return 0

        return Matrix._build(([cell(i, j) for j in range(cols)] for i in range(rows)), cols)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> Matrix:
        return Matrix._build(([-value for value in row] for row in self._rows), self._cols)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            if self.col_count != other.row_count:
                raise ValueError(
                    f"cannot multiply {self.row_count}x{self.col_count} "
                    f"by {other.row_count}x{other.col_count}"
                )
            columns = [
                tuple(row[j] for row in other._rows) for j in range(other.col_count)
            ]
            return Matrix._build(
                (
                    [sum(a * b for a, b in zip(row, column)) for column in columns]
                    for row in self._rows
                ),
                other.col_count,
            )
        if isinstance(other, Number):
            return self._scaled(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, Number):
            return self._scaled(other)
        return NotImplemented

    def _scaled(self, factor: Any) -> Matrix:
        return Matrix._build(([factor * value for value in row] for row in self._rows), self._cols)

    def __str__(self) -> str:
        return "".join(
            "".join(f"{_format(value)} " for value in row) + "\n" for row in self._rows
        )

    def _float_rows(self) -> list[list[float]]:
        return [[float(value) for value in row] for row in self._rows]

    def _forward(self) -> tuple[list[list[float]], int]:
        rows = self._float_rows()
        swaps = 0
        for i in range(min(self.row_count, self.col_count)):
            if _is_zero(rows[i][i]):
                pivot = next(
                    (j for j in range(i + 1, len(rows)) if not _is_zero(rows[j][i])), None
                )
                if pivot is None:
                    continue
                rows[i], rows[pivot] = rows[pivot], rows[i]
                swaps += 1
            for k in range(i + 1, len(rows)):
                fraction = rows[k][i] / rows[i][i]
                rows[k] = [_snap(v - fraction * p) for v, p in zip(rows[k], rows[i])]
        return rows, swaps

    def triangulate(self) -> Matrix:
        """Return an upper-triangular float matrix reached by row operations."""
        rows, _ = self._forward()
        return Matrix._build(rows, self._cols)

    def reverse_triangulate(self) -> Matrix:
        """Eliminate above the diagonal, working upward from the last pivot."""
        rows = self._float_rows()
        for i in reversed(range(min(self.row_count, self.col_count))):
            if _is_zero(rows[i][i]):
                pivot = next(
                    (j for j in range(i - 1, -1, -1) if not _is_zero(rows[j][i])), None
                )
                if pivot is None:
                    continue
                rows[i], rows[pivot] = rows[pivot], rows[i]
            for k in range(i):
                fraction = rows[k][i] / rows[i][i]
                rows[k] = [_snap(v - fraction * p) for v, p in zip(rows[k], rows[i])]
        return Matrix._build(rows, self._cols)

    def _require_square(self) -> None:
        if self.row_count != self.col_count:
            raise ValueError("the matrix is not square")

    def determinant(self) -> float:
        """Return the determinant of a square matrix."""
        self._require_square()
        rows, swaps = self._forward()
        sign = -1.0 if swaps % 2 else 1.0
        return sign * math.prod(rows[i][i] for i in range(self.row_count))

    def trace(self) -> Any:
        """Return the sum of the main diagonal of a square matrix."""
        self._require_square()
        return sum(self._rows[i][i] for i in range(self.row_count))

    def transpose(self) -> Matrix:
        """Return the matrix with rows and columns swapped."""
        return Matrix._build(
            ([row[j] for row in self._rows] for j in range(self._cols)), self.row_count
        )

    def extract(self, x0: int, y0: int, x1: int, y1: int) -> Matrix:
        """Return columns ``x0..x1`` of rows ``y0..y1``, both ends inclusive."""
        if not (0 <= x0 <= x1 < self._cols and 0 <= y0 <= y1 < self.row_count):
            raise IndexError("block lies outside the matrix")
        return Matrix._build((row[x0 : x1 + 1] for row in self._rows[y0 : y1 + 1]), x1 - x0 + 1)

    def expand(self, row_count: int, col_count: int, value: Any = 0) -> Matrix:
        """Return the matrix grown to at least the given size.

        Added rows hold zeros in the existing columns; added columns hold ``value``.
        """
        rows = [list(row) for row in self._rows]
        cols = self._cols
        if row_count > len(rows):
            rows.extend([0] * cols for _ in range(row_count - len(rows)))
        if col_count > cols:
            for row in rows:
                row.extend([value] * (col_count - cols))
            cols = col_count
        return Matrix._build(rows, cols)

    def inverse(self) -> Matrix:
        """Return the inverse of a square, non-singular matrix, as floats."""
        self._require_square()
        if abs(self.determinant()) <= EPSILON:
            raise ValueError("the matrix is singular")
        size = self.row_count
        if size == 0:
            return Matrix()
        augmented = compose_right(self, Matrix.identity(size, size))
        reduced = augmented.triangulate().reverse_triangulate()
        rows = []
        for i, row in enumerate(reduced):
            pivot = row[i]
            rows.append([_snap(value / pivot) for value in row])
        return Matrix._build(rows, 2 * size).extract(size, 0, 2 * size - 1, size - 1)


def compose_right(first: Matrix, second: Matrix) -> Matrix:
    """Place ``second`` to the right of ``first``, keeping ``first``'s row count.

    Rows of ``second`` past that count are dropped; missing ones become zeros.
    """
    padding = [0] * second.col_count
    rows = (
        list(row) + (list(second[i]) if i < second.row_count else padding)
        for i, row in enumerate(first)
    )
    return Matrix._build(rows, first.col_count + second.col_count)