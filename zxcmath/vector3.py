"""Three-component double-precision vector."""

from __future__ import annotations

import math
import operator
import sys
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator, Sequence, Union

Scalar = Union[int, float]

_EPSILON = sys.float_info.epsilon


def _divide(a: float, b: float) -> float:
    """Divide with IEEE semantics: zero divisors give inf or nan instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Vector3:
    """A vector of three floats supporting component-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vector3]
    ONE: ClassVar[Vector3]
    X: ClassVar[Vector3]
    Y: ClassVar[Vector3]
    Z: ClassVar[Vector3]

    # Construction

    @classmethod
    def from_i32(cls, x: int, y: int, z: int) -> Vector3:
        """Build a vector from integer components."""
        return cls(float(int(x)), float(int(y)), float(int(z)))

    @classmethod
    def from_array(cls, array: Sequence[float]) -> Vector3:
        """Build a vector from a sequence of exactly three numbers."""
        values = list(array)
        if len(values) != 3:
            raise ValueError(f"expected 3 components, got {len(values)}")
        x, y, z = values
        return cls(float(x), float(y), float(z))

    # Properties

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def sum(self) -> float:
        return self.x + self.y + self.z

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        length = self.magnitude()
        if length <= 0.0:
            length = _EPSILON
        self.x /= length
        self.y /= length
        self.z /= length

    def unpack(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def unpack_array(self) -> list[float]:
        return [self.x, self.y, self.z]

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y) or math.isnan(self.z)

    def is_infinite(self) -> bool:
        return math.isinf(self.x) or math.isinf(self.y) or math.isinf(self.z)

    # Static helpers

    @staticmethod
    def projection(lhs: Vector3, rhs: Vector3) -> Vector3:
        """Direction of ``lhs`` scaled by the dot product of both vectors."""
        return Vector3.normalized(lhs) * Vector3.dot(lhs, rhs)

    @staticmethod
    def lerp(vec: Vector3, vec2: Vector3, t: float) -> Vector3:
        return vec * (1.0 - t) + vec2 * t

    @staticmethod
    def distance(lhs: Vector3, rhs: Vector3) -> float:
        return (lhs - rhs).magnitude()

    @staticmethod
    def cross_product(lhs: Vector3, rhs: Vector3) -> Vector3:
        return Vector3(
            lhs.y * rhs.z - lhs.z * rhs.y,
            lhs.z * rhs.x - lhs.x * rhs.z,
            lhs.x * rhs.y - lhs.y * rhs.x,
        )

    @staticmethod
    def min(lhs: Vector3, rhs: Vector3) -> Vector3:
        return Vector3(_fmin(lhs.x, rhs.x), _fmin(lhs.y, rhs.y), _fmin(lhs.z, rhs.z))

    @staticmethod
    def max(lhs: Vector3, rhs: Vector3) -> Vector3:
        return Vector3(_fmax(lhs.x, rhs.x), _fmax(lhs.y, rhs.y), _fmax(lhs.z, rhs.z))

    @staticmethod
    def abs(vec: Vector3) -> Vector3:
        return Vector3(math.fabs(vec.x), math.fabs(vec.y), math.fabs(vec.z))

    @staticmethod
    def dot(lhs: Vector3, rhs: Vector3) -> float:
        return lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z

    @staticmethod
    def normalized(vec: Vector3) -> Vector3:
        """Return a unit-length copy of ``vec``; a zero vector stays zero."""
        length = vec.magnitude()
        if length <= 0.0:
            length = _EPSILON
        return Vector3(vec.x / length, vec.y / length, vec.z / length)

    # Operators

    def _apply(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Vector3):
            return Vector3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if _is_scalar(other):
            return Vector3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other: Vector3 | Scalar) -> Vector3:
        return self._apply(other, operator.add)

    def __sub__(self, other: Vector3 | Scalar) -> Vector3:
        return self._apply(other, operator.sub)

    def __mul__(self, other: Vector3 | Scalar) -> Vector3:
        return self._apply(other, operator.mul)

    def __truediv__(self, other: Vector3 | Scalar) -> Vector3:
        return self._apply(other, _divide)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __abs__(self) -> Vector3:
        return Vector3.abs(self)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
Vector3.X = Vector3(1.0, 0.0, 0.0)
Vector3.Y = Vector3(0.0, 1.0, 0.0)
Vector3.Z = Vector3(0.0, 0.0, 1.0)