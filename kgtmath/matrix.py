"""Dense matrices of floats built from row vectors."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from numbers import Real
from typing import IO

from .vector import MAX_DIM, Vector

__all__ = ["Matrix"]


def _check_shape(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(f"shape must be non-negative, got {rows}x{cols}")
    if rows >= MAX_DIM:
        raise ValueError(f"row count {rows} exceeds the limit of {MAX_DIM - 1}")
    if cols >= MAX_DIM:
        raise ValueError(f"column count {cols} exceeds the limit of {MAX_DIM - 1}")
    if rows * cols >= MAX_DIM:
        raise ValueError(f"matrix of {rows}x{cols} elements is too large")


class Matrix:
    """A rectangular grid of floats stored as row vectors."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[float]] = ()) -> None:
        vectors = [Vector(r) for r in rows]
        cols = len(vectors[0]) if vectors else 0
        for number, vec in enumerate(vectors):
            if len(vec) != cols:
                raise ValueError(
                    f"row {number} has {len(vec)} elements, expected {cols}"
                )
        _check_shape(len(vectors), cols)
        self._rows = vectors
        self._cols = cols

    @classmethod
    def _from_rows(cls, vectors: list[Vector], cols: int) -> Matrix:
        _check_shape(len(vectors), cols)
        obj = cls.__new__(cls)
        obj._rows = vectors
        obj._cols = cols
        return obj

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Return a ``rows`` by ``cols`` matrix of zeros."""
        _check_shape(rows, cols)
        return cls._from_rows([Vector.zeros(cols) for _ in range(rows)], cols)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def copy(self) -> Matrix:
        return Matrix._from_rows([r.copy() for r in self._rows], self._cols)

    def resized(self, rows: int, cols: int) -> Matrix:
        """Return a copy truncated or zero-padded to ``rows`` by ``cols``."""
        _check_shape(rows, cols)
        kept = [r.resized(cols) for r in self._rows[:rows]]
        kept.extend(Vector.zeros(cols) for _ in range(rows - len(kept)))
        return Matrix._from_rows(kept, cols)

    def row(self, index: int) -> Vector:
        """Return a copy of row ``index``."""
        return self._rows[index].copy()

    def __iter__(self) -> Iterator[Vector]:
        return (r.copy() for r in self._rows)

    def __getitem__(self, key: int | tuple[int, int]) -> float | Vector:
        if isinstance(key, tuple):
            i, j = key
            return self._rows[i][j]
        return self.row(key)

    def __setitem__(self, key: int | tuple[int, int], value) -> None:
        if isinstance(key, tuple):
            i, j = key
            self._rows[i][j] = value
            return
        vec = Vector(value)
        if len(vec) != self._cols:
            raise ValueError(
                f"row has {len(vec)} elements, expected {self._cols}"
            )
        self._rows[key] = vec

    def __str__(self) -> str:
        return "[" + ",\n ".join(str(r) for r in self._rows) + "]"

    def __repr__(self) -> str:
        return f"Matrix({[list(r) for r in self._rows]!r})"

    def write(self, stream: IO[str]) -> None:
        """Write the textual form of the matrix to ``stream``."""
        stream.write(str(self))

    def apply(self, func: Callable[[float], float]) -> Matrix:
        """Return a new matrix with ``func`` applied to every element."""
        return Matrix._from_rows([r.apply(func) for r in self._rows], self._cols)

    def transpose(self) -> Matrix:
        cols = [Vector(column) for column in zip(*self._rows)]
        if not self._rows:
            cols = [Vector() for _ in range(self._cols)]
        return Matrix._from_rows(cols, self.rows)

    def _combine(self, other: object, op: Callable[[Vector, object], Vector]) -> Matrix:
        if isinstance(other, Matrix):
            if other.rows != self.rows or other.cols != self.cols:
                raise ValueError(
                    f"shape mismatch: {self.rows}x{self.cols} "
                    f"and {other.rows}x{other.cols}"
                )
            rows = [op(a, b) for a, b in zip(self._rows, other._rows)]
        elif isinstance(other, Vector):
            if len(other) != self.rows:
                raise ValueError(
                    f"vector of dimension {len(other)} does not match "
                    f"{self.rows} rows"
                )
            rows = [op(a, b) for a, b in zip(self._rows, other)]
        elif isinstance(other, Real):
            rows = [op(a, other) for a in self._rows]
        else:
            return NotImplemented
        return Matrix._from_rows(rows, self._cols)

    def __add__(self, other: Matrix | Vector | float) -> Matrix:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Matrix | Vector | float) -> Matrix:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Matrix | Vector | float) -> Matrix:
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self, other: Matrix | Vector | float) -> Matrix:
        return self._combine(other, lambda a, b: a / b)

    def dot(self, other: Matrix | Vector) -> Matrix | Vector:
        """Return the matrix product with a matrix or a column vector."""
        if isinstance(other, Vector):
            if len(other) != self.cols:
                raise ValueError(
                    f"dimension mismatch: {self.cols} columns and "
                    f"vector of {len(other)}"
                )
            return Vector(r.dot(other) for r in self._rows)
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise ValueError(
                    f"shape mismatch: {self.rows}x{self.cols} "
                    f"and {other.rows}x{other.cols}"
                )
            columns = list(other.transpose()._rows)
            rows = [Vector(r.dot(c) for c in columns) for r in self._rows]
            return Matrix._from_rows(rows, other.cols)
        raise TypeError(f"cannot multiply matrix by {type(other).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.rows != other.rows:
            return False
        return all(a == b for a, b in zip(self._rows, other._rows))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __gt__(self, other: Matrix) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        for a, b in zip(self._rows, other._rows):
            if a < b:
                return False
            if a > b:
                return True
        return self.rows > other.rows

    def __ge__(self, other: Matrix) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.__gt__(other) or self.__eq__(other)

    def __lt__(self, other: Matrix) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return other.__gt__(self)

    def __le__(self, other: Matrix) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return other.__ge__(self)