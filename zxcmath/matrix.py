"""Dynamically sized matrix stored as a flat row-major list."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Sequence

from zxcmath.vector3 import _is_scalar


def _format(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class Matrix:
    """A ``rows`` by ``cols`` matrix of floats."""

    data: Sequence[float]
    rows: int
    cols: int

    def __post_init__(self) -> None:
        self.data = [float(value) for value in self.data]
        if self.rows < 0 or self.cols < 0 or len(self.data) != self.rows * self.cols:
            raise ValueError("Rows and Cols are not the same length vector")

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls([0.0] * (rows * cols), rows, cols)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        matrix = cls.zeros(size, size)
        for i in range(size):
            matrix.set(i, i, 1.0)
        return matrix

    @staticmethod
    def is_equals(lhs: Matrix, rhs: Matrix) -> bool:
        """Whether both matrices hold the same number of elements."""
        return lhs.size() == rhs.size()

    @staticmethod
    def is_square(matrix: Matrix) -> bool:
        return matrix.rows == matrix.cols

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index ({i}, {j}) out of range for {self.rows}x{self.cols} matrix")
        return i * self.cols + j

    def get(self, i: int, j: int) -> float:
        return self.data[self._index(i, j)]

    def set(self, i: int, j: int, value: float) -> None:
        self.data[self._index(i, j)] = float(value)

    def size(self) -> int:
        return self.rows * self.cols

    def _scaled(self, scalar: float) -> Matrix:
        return Matrix([value * scalar for value in self.data], self.rows, self.cols)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("Matrix dimensions do not match")
        return Matrix(list(map(operator.add, self.data, other.data)), self.rows, self.cols)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise ValueError("Matrix dimensions do not match")
            values = [
                sum(self.get(i, k) * other.get(k, j) for k in range(self.cols))
                for i in range(self.rows)
                for j in range(other.cols)
            ]
            return Matrix(values, self.rows, other.cols)
        if _is_scalar(other):
            return self._scaled(other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._scaled(other)
        return NotImplemented

    def __str__(self) -> str:
        lines = [
            "".join(f"{_format(self.get(row, col))}," for row in range(self.rows))
            for col in range(self.cols)
        ]
        return f"Matrix{self.rows}x{self.cols}[\n" + "\n".join(lines) + " ]"