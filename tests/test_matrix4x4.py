import math

import pytest

from zxcmath.matrix4x4 import Matrix4x4
from zxcmath.quaternion import Quaternion


def _flat(matrix):
    return [value for row in matrix.data for value in row]


def _sample():
    return Matrix4x4([[float(4 * i + j) for j in range(4)] for i in range(4)])


def test_default_is_zero():
    assert Matrix4x4() == Matrix4x4.zeros()
    assert _flat(Matrix4x4()) == [0.0] * 16


def test_identity_layout():
    identity = Matrix4x4.identity()
    assert identity.data[0] == [1.0, 0.0, 0.0, 0.0]
    assert identity.data[3] == [0.0, 0.0, 0.0, 1.0]


def test_translate_last_row_order():
    assert Matrix4x4.translate(1.0, 2.0, 3.0).data[3] == [1.0, 3.0, 2.0, 1.0]


def test_scale_diagonal():
    m = Matrix4x4.scale(2.0, 3.0, 5.0)
    assert [m.data[i][i] for i in range(4)] == [2.0, 3.0, 5.0, 1.0]


def test_trace_of_scale():
    x, y, z = 2.0, 3.0, 5.0
    assert Matrix4x4.scale(x, y, z).trace() == x + y + z + 1.0


@pytest.mark.parametrize("factory", [Matrix4x4.rotation_x, Matrix4x4.rotation_y, Matrix4x4.rotation_z])
def test_rotation_zero_is_identity(factory):
    assert factory(0.0) == Matrix4x4.identity()


@pytest.mark.parametrize("factory", [Matrix4x4.rotation_x, Matrix4x4.rotation_y, Matrix4x4.rotation_z])
def test_rotation_inverse(factory):
    product = factory(1.1) * factory(-1.1)
    assert _flat(product) == pytest.approx(_flat(Matrix4x4.identity()), abs=1e-12)


def test_rotation_is_orthogonal():
    r = Matrix4x4.rotation_y(0.4)
    assert _flat(r * Matrix4x4.transpose(r)) == pytest.approx(_flat(Matrix4x4.identity()), abs=1e-12)


def test_transpose_twice_round_trip():
    m = _sample()
    assert Matrix4x4.transpose(Matrix4x4.transpose(m)) == m
    assert Matrix4x4.transpose(m).data[0][3] == m.data[3][0]


def test_lerp_endpoints_and_midpoint():
    a = _sample()
    b = Matrix4x4.identity()
    assert Matrix4x4.lerp(a, b, 0.0) == a
    assert Matrix4x4.lerp(a, b, 1.0) == b
    assert _flat(Matrix4x4.lerp(a, b, 0.5)) == pytest.approx(_flat((a + b) / 2))


def test_arithmetic_round_trips():
    a = _sample()
    b = Matrix4x4.rotation_z(0.2)
    assert _flat((a + b) - b) == pytest.approx(_flat(a))
    assert a * 3 == a + a + a
    assert (a * 8) / 8 == a
    assert a * Matrix4x4.identity() == a


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        _sample() / 0.0


def test_perspective_structure():
    fov, aspect, near, far = 1.2, 2.0, 0.1, 100.0
    m = Matrix4x4.perspective(fov, aspect, near, far)
    assert m.data[2][3] == -1.0
    assert m.data[0][0] == pytest.approx(m.data[1][1] / aspect)
    assert m.data[3][2] == pytest.approx(m.data[2][2] * near)
    assert m.data[3][3] == 0.0


def test_perspective_infinite_far_plane():
    near = 0.5
    m = Matrix4x4.perspective(1.0, 1.0, near, math.inf)
    assert m.data[2][2] == -1.0
    assert m.data[3][2] == -near


@pytest.mark.parametrize(
    "args",
    [
        (0.0, 1.0, 0.1, 10.0),
        (math.pi, 1.0, 0.1, 10.0),
        (1.0, 0.0, 0.1, 10.0),
        (1.0, 1.0, 0.1, 0.0),
        (1.0, 1.0, 10.0, 10.0),
    ],
)
def test_perspective_invalid_arguments(args):
    with pytest.raises(ValueError):
        Matrix4x4.perspective(*args)


def test_from_identity_quaternion():
    assert Matrix4x4.from_quaternion(Quaternion.identity()) == Matrix4x4.identity()


def test_unpack_is_independent_copy():
    m = _sample()
    rows = m.unpack()
    assert rows == m.data
    rows[0][0] = 99.0
    assert m.data[0][0] == 0.0


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Matrix4x4([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])