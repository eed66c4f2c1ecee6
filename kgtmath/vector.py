"""Dense vectors of floats with element-wise arithmetic."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from numbers import Real
from typing import IO

__all__ = ["MAX_DIM", "Vector"]

MAX_DIM = 1 << 20


def _check_dim(dim: int) -> None:
    if dim < 0:
        raise ValueError(f"dimension must be non-negative, got {dim}")
    if dim >= MAX_DIM:
        raise ValueError(f"dimension {dim} exceeds the limit of {MAX_DIM - 1}")


def _divide(lhs: float, rhs: float) -> float:
    """Divide with IEEE 754 semantics instead of raising on zero."""
    if rhs == 0.0:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        sign = math.copysign(1.0, lhs) * math.copysign(1.0, rhs)
        return math.copysign(math.inf, sign)
    return lhs / rhs


class Vector:
    """A fixed-length sequence of floats."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[float] = ()) -> None:
        data = [float(v) for v in values]
        _check_dim(len(data))
        self._values = data

    @classmethod
    def zeros(cls, dim: int) -> Vector:
        """Return a vector of ``dim`` zeros."""
        _check_dim(dim)
        return cls([0.0] * dim)

    def copy(self) -> Vector:
        return Vector(self._values)

    def resized(self, dim: int) -> Vector:
        """Return a copy truncated or zero-padded to ``dim`` elements."""
        _check_dim(dim)
        kept = self._values[:dim]
        return Vector(kept + [0.0] * (dim - len(kept)))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._values[index] = float(value)

    def __str__(self) -> str:
        return "[" + ",".join(f"{v:8.5f}" for v in self._values) + "]"

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"

    def write(self, stream: IO[str]) -> None:
        """Write the textual form of the vector to ``stream``."""
        stream.write(str(self))

    def apply(self, func: Callable[[float], float]) -> Vector:
        """Return a new vector with ``func`` applied to every element."""
        return Vector(func(v) for v in self._values)

    def _combine(self, other: object, op: Callable[[float, float], float]) -> Vector:
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ValueError(
                    f"dimension mismatch: {len(self)} and {len(other)}"
                )
            return Vector(op(a, b) for a, b in zip(self._values, other._values))
        if isinstance(other, Real):
            scalar = float(other)
            return Vector(op(a, scalar) for a in self._values)
        return NotImplemented

    def __add__(self, other: Vector | float) -> Vector:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Vector | float) -> Vector:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Vector | float) -> Vector:
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self, other: Vector | float) -> Vector:
        return self._combine(other, _divide)

    def dot(self, other: Vector) -> float:
        """Return the inner product with a vector of equal dimension."""
        if len(other) != len(self):
            raise ValueError(f"dimension mismatch: {len(self)} and {len(other)}")
        total = 0.0
        for a, b in zip(self._values, other._values):
            total += a * b
        return total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self._values, other._values))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __gt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        for a, b in zip(self._values, other._values):
            if a < b:
                return False
            if a > b:
                return True
        return len(self) > len(other)

    def __ge__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.__gt__(other) or self.__eq__(other)

    def __lt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return other.__gt__(self)

    def __le__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return other.__ge__(self)