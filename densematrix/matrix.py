"""A dense matrix of floats with arithmetic, determinant and inversion."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from numbers import Real
from typing import TextIO

EPSILON = 1e-7


def _eliminate(data: list[list[float]], full: bool) -> int:
    """Reduce ``data`` in place by Gaussian elimination.

    With ``full`` set, every row other than the pivot row is cleared in the
    pivot column (Gauss-Jordan); otherwise only the rows below it are.
    Returns the sign change caused by row swaps.
    """
    size = len(data)
    sign = 1
    for i in range(size):
        if data[i][i] == 0.0:
            swap = next((k for k in range(i + 1, size) if data[k][i] != 0.0), None)
            if swap is None:
                continue
            data[i], data[swap] = data[swap], data[i]
            sign = -sign
        pivot_row = data[i]
        pivot = pivot_row[i]
        for j, row in enumerate(data):
            if j == i or (not full and j < i):
                continue
            ratio = row[i] / pivot
            data[j] = [a - ratio * b for a, b in zip(row, pivot_row)]
    return sign


class Matrix:
    """A rectangular matrix of floating point numbers."""

    __slots__ = ("_rows", "_cols", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int | None = None, cols: int | None = None) -> None:
        if rows is None and cols is None:
            rows = cols = 0
        elif rows is None or cols is None:
            raise TypeError("both rows and cols must be given")
        elif rows < 0 or cols < 0 or (rows < 1 and cols < 1):
            raise ValueError(
                "Incorrect rows/cols. Set positive integer number for both rows and cols"
            )
        self._rows = rows
        self._cols = cols
        self._data = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        if not data:
            return cls()
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("All rows must have the same length")
        matrix = cls(len(data), width)
        matrix._data = data
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def copy(self) -> Matrix:
        """Return an independent copy of this matrix."""
        result = Matrix()
        result._assign(self._rows, self._cols, [list(row) for row in self._data])
        return result

    def to_list(self) -> list[list[float]]:
        """Return the elements as a fresh list of row lists."""
        return [list(row) for row in self._data]

    def _assign(self, rows: int, cols: int, data: list[list[float]]) -> None:
        self._rows = rows
        self._cols = cols
        self._data = data

    def _index(self, index: object) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("Matrix indices must be a (row, col) pair")
        i, j = index
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError("Index i/j is out of range")
        return i, j

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = self._index(index)
        return self._data[i][j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = self._index(index)
        self._data[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            abs(a - b) <= EPSILON
            for row, other_row in zip(self._data, other._data)
            for a, b in zip(row, other_row)
        )

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_list()!r})"

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value:g}\t" for value in row) + "\n" for row in self._data
        )

    def print(self, file: TextIO | None = None) -> None:
        """Write the matrix, tab separated, one row per line."""
        (sys.stdout if file is None else file).write(str(self))

    def _check_operand(self, other: Matrix) -> None:
        if other._rows < 1 or other._cols < 1 or self.shape != other.shape:
            raise ValueError("Invalid or mismatched rows/cols")

    def _product(self, other: Matrix) -> list[list[float]]:
        columns = list(zip(*other._data)) if other._rows else [()] * other._cols
        return [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._data
        ]

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_operand(other)
        result = self.copy()
        result.sum_matrix(other)
        return result

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_operand(other)
        result = self.copy()
        result.sub_matrix(other)
        return result

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            if other._rows < 1 or other._cols < 1 or self._cols != other._rows:
                raise ValueError("Invalid rows/cols")
            result = Matrix()
            result._assign(self._rows, other._cols, self._product(other))
            return result
        if isinstance(other, Real) and not isinstance(other, bool):
            result = self.copy()
            result.mul_number(float(other))
            return result
        return NotImplemented

    def __iadd__(self, other: Matrix) -> Matrix:
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result._rows, result._cols, result._data)
        return self

    def __isub__(self, other: Matrix) -> Matrix:
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result._rows, result._cols, result._data)
        return self

    def __imul__(self, other: Matrix | float) -> Matrix:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result._rows, result._cols, result._data)
        return self

    def eq_matrix(self, other: Matrix) -> bool:
        """Return whether both matrices have the same shape and elements."""
        return self == other

    def sum_matrix(self, other: Matrix) -> None:
        """Add ``other`` to this matrix in place."""
        if self.shape != other.shape:
            raise ValueError("Invalid matrices. Rows/cols didn't match")
        self._data = [
            [a + b for a, b in zip(row, other_row)]
            for row, other_row in zip(self._data, other._data)
        ]

    def sub_matrix(self, other: Matrix) -> None:
        """Subtract ``other`` from this matrix in place."""
        if self.shape != other.shape:
            raise ValueError("Invalid matrices. Rows/cols didn't match")
        self._data = [
            [a - b for a, b in zip(row, other_row)]
            for row, other_row in zip(self._data, other._data)
        ]

    def mul_number(self, num: float) -> None:
        """Multiply every element by ``num`` in place."""
        self._data = [[value * num for value in row] for row in self._data]

    def mul_matrix(self, other: Matrix) -> None:
        """Replace this matrix with its product by ``other``."""
        if self._cols != other._rows:
            raise ValueError(
                "Invalid matrices. Columns of the first matrix should be equal "
                "to rows of the second matrix"
            )
        self._assign(self._rows, other._cols, self._product(other))

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        result = Matrix()
        data = [list(column) for column in zip(*self._data)]
        if not self._rows:
            data = [[] for _ in range(self._cols)]
        result._assign(self._cols, self._rows, data)
        return result

    def determinant(self) -> float:
        """Return the determinant of a square matrix."""
        if self._rows != self._cols:
            raise ValueError("Determinant exists only for square matrices")
        data = self.to_list()
        sign = _eliminate(data, full=False)
        return sign * math.prod(row[i] for i, row in enumerate(data))

    def inverse_matrix(self) -> Matrix:
        """Return the inverse of a square, non-singular matrix."""
        if self._rows != self._cols:
            raise ValueError("It's not a square matrix")
        if self.determinant() == 0.0:
            raise ValueError("Determinant is zero. There's no inverse.")
        size = self._rows
        augmented = [
            list(row) + [1.0 if k == i else 0.0 for k in range(size)]
            for i, row in enumerate(self._data)
        ]
        _eliminate(augmented, full=True)
        result = Matrix()
        result._assign(
            size,
            size,
            [[value / row[i] for value in row[size:]] for i, row in enumerate(augmented)],
        )
        return result

    def calc_complements(self) -> Matrix:
        """Return the matrix of algebraic complements (cofactors)."""
        if self._rows != self._cols:
            raise ValueError("Non square")
        det = self.determinant()
        if det == 0.0:
            raise ValueError("Determinant is zero. No complements")
        adjugate = self.inverse_matrix()
        adjugate.mul_number(det)
        return adjugate.transpose()

    def resize(self, rows: int, cols: int) -> None:
        """Change the shape, keeping overlapping elements and zero-filling the rest."""
        if rows < 1 or cols < 1:
            raise ValueError("Incorrect rows/cols")
        keep = min(cols, self._cols)
        data = [[0.0] * cols for _ in range(rows)]
        for new_row, old_row in zip(data, self._data):
            new_row[:keep] = old_row[:keep]
        self._assign(rows, cols, data)