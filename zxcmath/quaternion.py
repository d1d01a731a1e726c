"""Quaternion with Hamilton product and interpolation helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

# Machine epsilon of single precision, which the dot-product threshold is based on.
_F32_EPSILON = 2.0 ** -23


@dataclass
class Quaternion:
    """A quaternion stored as vector part ``x, y, z`` and scalar part ``w``."""

    x: float
    y: float
    z: float
    w: float

    RAD_TO_DEG: ClassVar[float] = 360.0 / (math.pi * 2.0)

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    def normalize(self) -> None:
        """Scale this quaternion in place to unit magnitude."""
        n = Quaternion.normalized(self)
        self.x, self.y, self.z, self.w = n.x, n.y, n.z, n.w

    def unpack(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]

    @staticmethod
    def dot(lhs: Quaternion, rhs: Quaternion) -> float:
        return lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z + lhs.w * rhs.w

    @staticmethod
    def angle(lhs: Quaternion, rhs: Quaternion) -> float:
        """Angle in degrees between two rotations."""
        dot = abs(Quaternion.dot(lhs, rhs))
        dot = 1.0 if math.isnan(dot) else min(dot, 1.0)
        if Quaternion.is_equal_dot(dot):
            return 0.0
        return math.acos(dot) * 2.0 * Quaternion.RAD_TO_DEG

    @staticmethod
    def magnitude(q: Quaternion) -> float:
        return math.sqrt(q.w ** 2 + q.x ** 2 + q.y ** 2 + q.z ** 2)

    @staticmethod
    def conjugate(q: Quaternion) -> Quaternion:
        return Quaternion(-q.x, -q.y, -q.z, q.w)

    @staticmethod
    def normalized(q: Quaternion) -> Quaternion:
        """Return a unit copy of ``q``; a zero quaternion yields NaN components."""
        mag = Quaternion.magnitude(q)
        if mag == 0.0:
            return Quaternion(math.nan, math.nan, math.nan, math.nan)
        return Quaternion(q.x / mag, q.y / mag, q.z / mag, q.w / mag)

    @staticmethod
    def lerp(lhs: Quaternion, rhs: Quaternion, t: float) -> Quaternion:
        """Linear interpolation followed by normalisation."""
        return Quaternion.normalized(
            Quaternion(
                lhs.x + (rhs.x - lhs.x) * t,
                lhs.y + (rhs.y - lhs.y) * t,
                lhs.z + (rhs.z - lhs.z) * t,
                lhs.w + (rhs.w - lhs.w) * t,
            )
        )

    @staticmethod
    def is_equal_dot(dot: float) -> bool:
        return dot > 1.0 - _F32_EPSILON

    def __mul__(self, rhs: Quaternion) -> Quaternion:
        if not isinstance(rhs, Quaternion):
            return NotImplemented
        return Quaternion(
            self.w * rhs.x + self.x * rhs.w + self.y * rhs.z - self.z * rhs.y,
            self.w * rhs.y - self.x * rhs.z + self.y * rhs.w + self.z * rhs.x,
            self.w * rhs.z + self.x * rhs.y - self.y * rhs.x + self.z * rhs.w,
            self.w * rhs.w - self.x * rhs.x - self.y * rhs.y - self.z * rhs.z,
        )

    def __add__(self, rhs: Quaternion) -> Quaternion:
        if not isinstance(rhs, Quaternion):
            return NotImplemented
        return Quaternion(self.x + rhs.x, self.y + rhs.y, self.z + rhs.z, self.w + rhs.w)