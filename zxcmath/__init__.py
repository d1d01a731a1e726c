"""Vectors, quaternions and matrices for games and graphics."""

__version__ = "0.1.2"
__all__ = ["vector3", "vector2", "quaternion", "matrix3x3", "matrix4x4", "matrix"]