# zxcmath

A small, dependency-free linear algebra library for games and graphics code.
It is a library only: there is no command-line tool.

## Modules

- `zxcmath.vector3` — `Vector3`, a 3D float vector.
  Operators `+ - * /` work component-wise with another `Vector3` or with a
  number on the right; unary `-` and `abs()` are supported, and a vector can be
  iterated or unpacked. Static helpers: `dot`, `cross_product`, `projection`,
  `lerp`, `distance`, `min`, `max`, `abs`, `normalized`. Instance methods:
  `magnitude`, `magnitude_squared`, `sum`, `normalize` (in place), `unpack`,
  `unpack_array`, `is_nan`, `is_infinite`. Constructors `from_i32` and
  `from_array`, and the constants `ZERO`, `ONE`, `X`, `Y`, `Z`.
  Division by zero follows IEEE rules and yields `inf` or `nan`; normalising a
  zero vector leaves it zero.
- `zxcmath.vector2` — `Vector2` (float) and `Vector2i` (32-bit signed integer),
  with the same operator set as `Vector3` plus `dot`, `length`,
  `length_squared`, `sum`, `distance`, `abs`, `normalize`, `normalized`,
  `unpack_array` and `from_array`. `Vector2` also has `lerp`, `is_nan` and
  `is_infinite`; normalising a vector shorter than single-precision epsilon
  leaves it unchanged. `Vector2i` uses integer square roots and division that
  truncates toward zero; results outside the 32-bit range raise
  `OverflowError`, non-integer components raise `TypeError`, and dividing by
  zero raises `ZeroDivisionError`.
- `zxcmath.quaternion` — `Quaternion(x, y, z, w)` with Hamilton product `*`,
  addition `+`, and `identity`, `dot`, `angle` (in degrees), `magnitude`,
  `conjugate`, `normalize`, `normalized`, `lerp` (normalised result),
  `is_equal_dot` and `unpack`. Normalising a zero quaternion yields NaN
  components.
- `zxcmath.matrix3x3` — `Matrix3x3`, a 3x3 matrix for 2D transforms:
  `zeros`, `identity`, `translate(x, y)`, `scale(x, y)`, `rotate(angle)`.
- `zxcmath.matrix4x4` — `Matrix4x4`, a 4x4 matrix for 3D transforms:
  `zeros`, `identity`, `translate(x, y, z)` (stored in the last row as
  `x, z, y`), `scale`, `rotation_x`, `rotation_y`, `rotation_z`, `transpose`,
  `lerp`, `trace`, `perspective`, `from_quaternion` and `unpack`.
- `zxcmath.matrix` — `Matrix(data, rows, cols)`, a dynamically sized matrix
  stored as a flat row-major list, with `zeros`, `identity`, `get`, `set`,
  `size`, `is_equals` (same element count), `is_square`, addition,
  matrix and scalar multiplication, and a text form via `str()`.

Both fixed-size matrices take their data as a list of rows (`Matrix3x3()` and
`Matrix4x4()` with no argument are zero matrices) and support `+`, `-`, matrix
`*`, multiplication by a number on either side, and `/` by a number.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from zxcmath.vector3 import Vector3
from zxcmath.quaternion import Quaternion
from zxcmath.matrix4x4 import Matrix4x4

a = Vector3(1.0, 0.0, 0.0)
b = Vector3(0.0, 1.0, 0.0)
print(Vector3.cross_product(a, b))   # Vector3(x=0.0, y=0.0, z=1.0)
print(Vector3.dot(a, b))             # 0.0
print(Vector3.lerp(a, b, 0.5))       # Vector3(x=0.5, y=0.5, z=0.0)

q = Quaternion.identity()
m = Matrix4x4.from_quaternion(q)
print(m.trace())                     # 4.0

proj = Matrix4x4.perspective(1.0, 16 / 9, 0.1, 100.0)
```

## Errors

- `Matrix4x4.perspective` raises `ValueError` when the field of view is not
  strictly between 0 and π, the aspect ratio or far distance is not positive,
  or the near distance is not less than the far distance.
- Dividing a `Matrix3x3` or `Matrix4x4` by zero raises `ZeroDivisionError`.
- `Matrix` raises `ValueError` when the data length does not match
  `rows * cols` or when shapes do not fit for `+` or `*`, and `IndexError`
  for an element index out of range.
- `from_array` raises `ValueError` when given the wrong number of components.

## What it does not do

There are no determinants, inverses, or products between matrices and
vectors, and `Matrix` has no subtraction or division.