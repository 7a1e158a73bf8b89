"""Square matrices of real numbers with operator support."""

from __future__ import annotations

import math
import numbers
import operator
from collections.abc import Iterable, Iterator
from typing import Callable

_SIZE_MISMATCH = "Matrices must be of the same size"


def format_number(value: float) -> str:
    """Format a number the way a default-configured stream prints a double."""
    return format(float(value), "g")


def _index(value: object) -> int:
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(f"matrix indices must be integers, not {type(value).__name__}") from None


def _product(left: list[list[float]], right: list[list[float]]) -> list[list[float]]:
    columns = list(zip(*right))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in left]


def _determinant(rows: list[list[float]]) -> float:
    n = len(rows)
    if n == 0:
        return 0.0
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    det = 0.0
    for j, pivot in enumerate(rows[0]):
        minor = [row[:j] + row[j + 1:] for row in rows[1:]]
        sign = 1 if j % 2 == 0 else -1
        det += sign * pivot * _determinant(minor)
    return det


class Row:
    """A bounds-checked view of one row of a SquareMat."""

    __slots__ = ("_matrix", "_row")

    def __init__(self, matrix: SquareMat, row: int) -> None:
        row = _index(row)
        if not 0 <= row < matrix.size:
            raise IndexError("Row index out of range")
        self._matrix = matrix
        self._row = row

    def _check(self, col: object) -> int:
        col = _index(col)
        if not 0 <= col < self._matrix.size:
            raise IndexError("Column index out of range")
        return col

    def __getitem__(self, col: int) -> float:
        return self._matrix._data[self._row][self._check(col)]

    def __setitem__(self, col: int, value: float) -> None:
        self._matrix._data[self._row][self._check(col)] = float(value)

    def __len__(self) -> int:
        return self._matrix.size

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._matrix._data[self._row]))

    def __repr__(self) -> str:
        return f"Row({list(self)!r})"


class SquareMat:
    """A mutable n x n matrix of floats."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int = 0) -> None:
        size = _index(size)
        if size < 0:
            raise ValueError("Matrix size cannot be negative")
        self._data: list[list[float]] = [[0.0] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> SquareMat:
        """Build a matrix from row sequences; every row must be as long as there are rows."""
        data = [[float(v) for v in row] for row in rows]
        if any(len(row) != len(data) for row in data):
            raise ValueError("Rows must form a square matrix")
        result = cls(len(data))
        result._data = data
        return result

    @property
    def size(self) -> int:
        return len(self._data)

    def copy(self) -> SquareMat:
        result = SquareMat(0)
        result._data = [list(row) for row in self._data]
        return result

    def resize(self, new_size: int) -> None:
        """Change the size; all elements are reset to zero."""
        new_size = _index(new_size)
        if new_size < 0:
            raise ValueError("Matrix size cannot be negative")
        self._data = [[0.0] * new_size for _ in range(new_size)]

    def rows(self) -> list[list[float]]:
        """Return a copy of the elements as a list of rows."""
        return [list(row) for row in self._data]

    # element access

    def _cell(self, key: tuple[int, int]) -> tuple[int, int]:
        if len(key) != 2:
            raise TypeError("matrix element key must be a pair (row, col)")
        i, j = _index(key[0]), _index(key[1])
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError("Index out of range")
        return i, j

    def __getitem__(self, key: int | tuple[int, int]) -> Row | float:
        if isinstance(key, tuple):
            i, j = self._cell(key)
            return self._data[i][j]
        return Row(self, key)

    def __setitem__(self, key: int | tuple[int, int], value) -> None:
        if isinstance(key, tuple):
            i, j = self._cell(key)
            self._data[i][j] = float(value)
            return
        row = Row(self, key)._row
        values = [float(v) for v in value]
        if len(values) != self.size:
            raise ValueError("Row length must equal the matrix size")
        self._data[row] = values

    # arithmetic helpers

    def _check_same_size(self, other: SquareMat) -> None:
        if self.size != other.size:
            raise ValueError(_SIZE_MISMATCH)

    def _map(self, fn: Callable[[float], float]) -> list[list[float]]:
        return [[fn(v) for v in row] for row in self._data]

    def _zip(self, other: SquareMat, fn: Callable[[float, float], float]) -> list[list[float]]:
        self._check_same_size(other)
        return [[fn(a, b) for a, b in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)]

    def _with(self, data: list[list[float]]) -> SquareMat:
        result = SquareMat(0)
        result._data = data
        return result

    # addition and subtraction

    def __add__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._with(self._zip(other, operator.add))

    def __iadd__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._data = self._zip(other, operator.add)
        return self

    def __sub__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._with(self._zip(other, operator.sub))

    def __isub__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._data = self._zip(other, operator.sub)
        return self

    # multiplication

    def __mul__(self, other: SquareMat | float) -> SquareMat:
        if isinstance(other, SquareMat):
            self._check_same_size(other)
            return self._with(_product(self._data, other._data))
        if isinstance(other, numbers.Real):
            return self._with(self._map(lambda v: v * other))
        return NotImplemented

    def __rmul__(self, other: float) -> SquareMat:
        if isinstance(other, numbers.Real):
            return self * other
        return NotImplemented

    def __imul__(self, other: SquareMat | float) -> SquareMat:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        self._data = result._data
        return self

    # division

    def _divided(self, scalar: float) -> list[list[float]]:
        if scalar == 0:
            raise ZeroDivisionError("Division by zero")
        return self._map(lambda v: v / scalar)

    def __truediv__(self, scalar: float) -> SquareMat:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self._with(self._divided(scalar))

    def __itruediv__(self, scalar: float) -> SquareMat:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self._data = self._divided(scalar)
        return self

    # element-wise product and modulo

    def _modded(self, other: SquareMat | float) -> list[list[float]] | None:
        if isinstance(other, SquareMat):
            return self._zip(other, operator.mul)
        if isinstance(other, numbers.Real):
            if other == 0:
                raise ZeroDivisionError("Modulo by zero")
            return self._map(lambda v: math.fmod(v, other))
        return None

    def __mod__(self, other: SquareMat | int) -> SquareMat:
        """Element-wise product with a matrix, or element-wise fmod with a scalar."""
        data = self._modded(other)
        if data is None:
            return NotImplemented
        return self._with(data)

    def __imod__(self, other: SquareMat | int) -> SquareMat:
        data = self._modded(other)
        if data is None:
            return NotImplemented
        self._data = data
        return self

    def __neg__(self) -> SquareMat:
        return self._with(self._map(operator.neg))

    # comparison

    def _total(self) -> float:
        return sum(sum(row) for row in self._data)

    def __eq__(self, other: object) -> bool:
        """Matrices are equal when they have the same size and the same element sum."""
        if not isinstance(other, SquareMat):
            return NotImplemented
        if self.size != other.size:
            return False
        return self._total() == other._total()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SquareMat) -> bool:
        """Lexicographic comparison of elements in row-major order."""
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._check_same_size(other)
        for r1, r2 in zip(self._data, other._data):
            for a, b in zip(r1, r2):
                if a < b:
                    return True
                if a > b:
                    return False
        return False

    def __gt__(self, other: SquareMat) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return other.__lt__(self)

    def __le__(self, other: SquareMat) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not other.__lt__(self)

    def __ge__(self, other: SquareMat) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self.__lt__(other)

    # other operations

    def __pow__(self, power: int) -> SquareMat:
        power = _index(power)
        if power < 0:
            raise ValueError("Power cannot be negative")
        if power == 0:
            return self._with(
                [[1.0 if i == j else 0.0 for j in range(self.size)] for i in range(self.size)]
            )
        result = self.copy()
        base = self.copy()
        power -= 1
        while power > 0:
            if power % 2 == 1:
                result = result * base
            base = base * base
            power //= 2
        return result

    def transpose(self) -> SquareMat:
        return self._with([list(col) for col in zip(*self._data)])

    def __invert__(self) -> SquareMat:
        return self.transpose()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row; 0 for an empty matrix."""
        return _determinant(self._data)

    def increment(self) -> SquareMat:
        """Add one to every element in place and return the matrix."""
        self._data = self._map(lambda v: v + 1)
        return self

    def decrement(self) -> SquareMat:
        """Subtract one from every element in place and return the matrix."""
        self._data = self._map(lambda v: v - 1)
        return self

    def __str__(self) -> str:
        return "".join(
            "".join(f"{format_number(v)} " for v in row) + "\n" for row in self._data
        )

    def __repr__(self) -> str:
        return f"SquareMat.from_rows({self.rows()!r})"