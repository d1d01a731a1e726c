"""Fixed-size square matrices: a shared base and the 3x3 matrix for 2D transforms."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator, Optional, Sequence

from zxcmath.vector3 import _is_scalar

Rows = list[list[float]]


@dataclass
class _SquareMatrix:
    """Square matrix of floats stored as a list of rows."""

    data: Optional[Sequence[Sequence[float]]] = None

    SIZE: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if self.data is None:
            self.data = self._zero_rows()
            return
        rows = [[float(value) for value in row] for row in self.data]
        if len(rows) != self.SIZE or any(len(row) != self.SIZE for row in rows):
            raise ValueError(f"expected a {self.SIZE}x{self.SIZE} array of numbers")
        self.data = rows

    @classmethod
    def _zero_rows(cls) -> Rows:
        return [[0.0] * cls.SIZE for _ in range(cls.SIZE)]

    @classmethod
    def _diagonal_rows(cls, diagonal: Sequence[float]) -> Rows:
        rows = cls._zero_rows()
        for index, value in enumerate(diagonal):
            rows[index][index] = value
        return rows

    @classmethod
    def _identity_rows(cls) -> Rows:
        return cls._diagonal_rows([1.0] * cls.SIZE)

    def _elementwise(self, other: _SquareMatrix, op: Callable[[float, float], float]):
        return type(self)(
            [[op(a, b) for a, b in zip(row, other_row)] for row, other_row in zip(self.data, other.data)]
        )

    def _scaled(self, op: Callable[[float, float], float], scalar: float):
        return type(self)([[op(value, scalar) for value in row] for row in self.data])

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._elementwise(other, operator.add)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._elementwise(other, operator.sub)

    def __mul__(self, other):
        if type(other) is type(self):
            columns = list(zip(*other.data))
            return type(self)(
                [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in self.data]
            )
        if _is_scalar(other):
            return self._scaled(operator.mul, other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._scaled(operator.mul, other)
        return NotImplemented

    def __truediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide by zero!")
        return self._scaled(operator.truediv, scalar)

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self.data)


@dataclass
class Matrix3x3(_SquareMatrix):
    """A 3x3 float matrix; ``Matrix3x3()`` is the zero matrix."""

    SIZE: ClassVar[int] = 3

    @classmethod
    def zeros(cls) -> Matrix3x3:
        """Matrix with every element zero."""
        return cls(cls._zero_rows())

    @classmethod
    def identity(cls) -> Matrix3x3:
        """Matrix with ones on the diagonal."""
        return cls(cls._identity_rows())

    @classmethod
    def translate(cls, x: float, y: float) -> Matrix3x3:
        """Translation held in the last column."""
        rows = cls._identity_rows()
        rows[0][2] = x
        rows[1][2] = y
        return cls(rows)

    @classmethod
    def scale(cls, x: float, y: float) -> Matrix3x3:
        return cls(cls._diagonal_rows([x, y, 1.0]))

    @classmethod
    def rotate(cls, angle: float) -> Matrix3x3:
        """Rotation by ``angle`` radians."""
        sin, cos = math.sin(angle), math.cos(angle)
        rows = cls._identity_rows()
        rows[0][:2] = [cos, -sin]
        rows[1][:2] = [sin, cos]
        return cls(rows)