"""Two-component vectors: a floating-point ``Vector2`` and a 32-bit integer ``Vector2i``."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator, Sequence, Union

from zxcmath.vector3 import _divide, _is_scalar

Scalar = Union[int, float]

# Machine epsilon of single precision, the threshold used for normalisation.
_F32_EPSILON = 2.0 ** -23

_I32_MIN = -(2 ** 31)
_I32_MAX = 2 ** 31 - 1


def _two_components(array: Sequence) -> tuple:
    values = list(array)
    if len(values) != 2:
        raise ValueError(f"expected 2 components, got {len(values)}")
    return values[0], values[1]


@dataclass
class Vector2:
    """A vector of two floats supporting component-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    X: ClassVar[Vector2]
    Y: ClassVar[Vector2]

    @classmethod
    def from_array(cls, array: Sequence[float]) -> Vector2:
        """Build a vector from a sequence of exactly two numbers."""
        x, y = _two_components(array)
        return cls(float(x), float(y))

    @staticmethod
    def dot(lhs: Vector2, rhs: Vector2) -> float:
        return lhs.x * rhs.x + lhs.y * rhs.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def sum(self) -> float:
        return self.x + self.y

    def normalize(self) -> None:
        """Scale this vector in place to unit length; near-zero vectors are left as they are."""
        n = Vector2.normalized(self)
        self.x, self.y = n.x, n.y

    def unpack_array(self) -> list[float]:
        return [self.x, self.y]

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def is_infinite(self) -> bool:
        return math.isinf(self.x) or math.isinf(self.y)

    @staticmethod
    def lerp(vec: Vector2, vec2: Vector2, t: float) -> Vector2:
        return vec * (1.0 - t) + vec2 * t

    @staticmethod
    def distance(lhs: Vector2, rhs: Vector2) -> float:
        return (lhs - rhs).length()

    @staticmethod
    def abs(vec: Vector2) -> Vector2:
        return Vector2(math.fabs(vec.x), math.fabs(vec.y))

    @staticmethod
    def normalized(vec: Vector2) -> Vector2:
        """Return a unit-length copy of ``vec``; a near-zero vector is returned unchanged."""
        length = vec.length()
        if length < _F32_EPSILON:
            length = 1.0
        return Vector2(vec.x / length, vec.y / length)

    def _apply(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Vector2):
            return Vector2(op(self.x, other.x), op(self.y, other.y))
        if _is_scalar(other):
            return Vector2(op(self.x, other), op(self.y, other))
        return NotImplemented

    def __add__(self, other: Vector2 | Scalar) -> Vector2:
        return self._apply(other, operator.add)

    def __sub__(self, other: Vector2 | Scalar) -> Vector2:
        return self._apply(other, operator.sub)

    def __mul__(self, other: Vector2 | Scalar) -> Vector2:
        return self._apply(other, operator.mul)

    def __truediv__(self, other: Vector2 | Scalar) -> Vector2:
        return self._apply(other, _divide)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __abs__(self) -> Vector2:
        return Vector2.abs(self)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.X = Vector2(1.0, 0.0)
Vector2.Y = Vector2(0.0, 1.0)


def _check_i32(value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit signed integer")
    return value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Vector2i:
    """A vector of two 32-bit signed integers; overflow raises ``OverflowError``."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar[Vector2i]
    ONE: ClassVar[Vector2i]
    X: ClassVar[Vector2i]
    Y: ClassVar[Vector2i]

    def __post_init__(self) -> None:
        for value in (self.x, self.y):
            if not _is_int(value):
                raise TypeError(f"components must be integers, got {value!r}")
            _check_i32(value)

    @classmethod
    def from_array(cls, array: Sequence[int]) -> Vector2i:
        """Build a vector from a sequence of exactly two integers."""
        x, y = _two_components(array)
        return cls(x, y)

    @staticmethod
    def dot(lhs: Vector2i, rhs: Vector2i) -> int:
        return _check_i32(
            _check_i32(lhs.x * rhs.x) + _check_i32(lhs.y * rhs.y)
        )

    def length(self) -> int:
        """Integer square root of the squared length."""
        return math.isqrt(self.length_squared())

    def length_squared(self) -> int:
        return Vector2i.dot(self, self)

    def sum(self) -> int:
        return _check_i32(self.x + self.y)

    def normalize(self) -> None:
        """Divide this vector in place by its integer length."""
        n = Vector2i.normalized(self)
        self.x, self.y = n.x, n.y

    def unpack_array(self) -> list[int]:
        return [self.x, self.y]

    @staticmethod
    def distance(lhs: Vector2i, rhs: Vector2i) -> int:
        return (lhs - rhs).length()

    @staticmethod
    def abs(vec: Vector2i) -> Vector2i:
        return Vector2i(_check_i32(abs(vec.x)), _check_i32(abs(vec.y)))

    @staticmethod
    def normalized(vec: Vector2i) -> Vector2i:
        """Divide by the integer length, truncating; a zero vector stays zero."""
        length = vec.length()
        if length <= 0:
            length = 1
        return Vector2i(_trunc_div(vec.x, length), _trunc_div(vec.y, length))

    def _apply(self, other: object, op: Callable[[int, int], int]):
        if isinstance(other, Vector2i):
            return Vector2i(_check_i32(op(self.x, other.x)), _check_i32(op(self.y, other.y)))
        if _is_int(other):
            return Vector2i(_check_i32(op(self.x, other)), _check_i32(op(self.y, other)))
        return NotImplemented

    def __add__(self, other: Vector2i | int) -> Vector2i:
        return self._apply(other, operator.add)

    def __sub__(self, other: Vector2i | int) -> Vector2i:
        return self._apply(other, operator.sub)

    def __mul__(self, other: Vector2i | int) -> Vector2i:
        return self._apply(other, operator.mul)

    def __truediv__(self, other: Vector2i | int) -> Vector2i:
        return self._apply(other, _trunc_div)

    def __neg__(self) -> Vector2i:
        return Vector2i(_check_i32(-self.x), _check_i32(-self.y))

    def __abs__(self) -> Vector2i:
        return Vector2i.abs(self)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


Vector2i.ZERO = Vector2i(0, 0)
Vector2i.ONE = Vector2i(1, 1)
Vector2i.X = Vector2i(1, 0)
Vector2i.Y = Vector2i(0, 0)