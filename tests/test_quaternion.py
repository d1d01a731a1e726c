import math

import pytest

from zxcmath.quaternion import Quaternion


SAMPLE = Quaternion(1.0, 2.0, -3.0, 4.0)
OTHER = Quaternion(-0.5, 1.5, 2.0, 0.25)


def test_identity_components():
    assert Quaternion.identity().unpack() == [0.0, 0.0, 0.0, 1.0]


def test_identity_is_neutral_for_product():
    assert Quaternion.identity() * SAMPLE == SAMPLE
    assert SAMPLE * Quaternion.identity() == SAMPLE


def test_unit_quaternion_basis_product():
    i = Quaternion(1.0, 0.0, 0.0, 0.0)
    j = Quaternion(0.0, 1.0, 0.0, 0.0)
    k = Quaternion(0.0, 0.0, 1.0, 0.0)
    assert i * j == k
    assert j * i == Quaternion(0.0, 0.0, -1.0, 0.0)


def test_product_with_conjugate_is_real():
    p = SAMPLE * Quaternion.conjugate(SAMPLE)
    assert p.unpack()[:3] == pytest.approx([0.0, 0.0, 0.0])
    assert p.w == pytest.approx(Quaternion.magnitude(SAMPLE) ** 2)


def test_conjugate_twice_is_identity_operation():
    assert Quaternion.conjugate(Quaternion.conjugate(SAMPLE)) == SAMPLE


def test_product_magnitude_is_multiplicative():
    product = SAMPLE * OTHER
    assert Quaternion.magnitude(product) == pytest.approx(
        Quaternion.magnitude(SAMPLE) * Quaternion.magnitude(OTHER)
    )


def test_in_place_multiply_matches_product():
    q = Quaternion(SAMPLE.x, SAMPLE.y, SAMPLE.z, SAMPLE.w)
    q *= OTHER
    assert q == SAMPLE * OTHER
    assert SAMPLE == Quaternion(1.0, 2.0, -3.0, 4.0)


def test_addition():
    s = SAMPLE + OTHER
    assert s.unpack() == [a + b for a, b in zip(SAMPLE.unpack(), OTHER.unpack())]
    q = Quaternion(0.0, 0.0, 0.0, 0.0)
    q += SAMPLE
    assert q == SAMPLE


def test_dot_is_symmetric_and_matches_magnitude():
    assert Quaternion.dot(SAMPLE, OTHER) == Quaternion.dot(OTHER, SAMPLE)
    assert Quaternion.dot(SAMPLE, SAMPLE) == pytest.approx(Quaternion.magnitude(SAMPLE) ** 2)


def test_identity_magnitude():
    assert Quaternion.magnitude(Quaternion.identity()) == 1.0


def test_normalized_has_unit_magnitude():
    n = Quaternion.normalized(SAMPLE)
    assert Quaternion.magnitude(n) == pytest.approx(1.0)
    assert SAMPLE == Quaternion(1.0, 2.0, -3.0, 4.0)


def test_normalize_in_place():
    q = Quaternion(SAMPLE.x, SAMPLE.y, SAMPLE.z, SAMPLE.w)
    q.normalize()
    assert q == Quaternion.normalized(SAMPLE)


def test_normalized_zero_gives_nan():
    result = Quaternion.normalized(Quaternion(0.0, 0.0, 0.0, 0.0))
    assert [math.isnan(c) for c in result.unpack()] == [True, True, True, True]


def test_half_turn_angle_uses_degrees():
    half_turn = Quaternion(0.0, 0.0, 1.0, 0.0)
    assert Quaternion.angle(Quaternion.identity(), half_turn) == pytest.approx(180.0)
    assert Quaternion.RAD_TO_DEG == pytest.approx(math.degrees(1.0))


def test_is_equal_dot():
    assert Quaternion.is_equal_dot(1.0) is True
    assert Quaternion.is_equal_dot(0.5) is False


def test_angle_of_same_rotation_is_zero():
    q = Quaternion.normalized(SAMPLE)
    assert Quaternion.angle(q, q) == 0.0
    assert Quaternion.angle(q, Quaternion(-q.x, -q.y, -q.z, -q.w)) == 0.0


def test_angle_of_quarter_turn():
    half = math.pi / 4.0
    turn = Quaternion(0.0, 0.0, math.sin(half), math.cos(half))
    assert Quaternion.angle(Quaternion.identity(), turn) == pytest.approx(90.0)


def test_angle_is_symmetric():
    a = Quaternion.normalized(SAMPLE)
    b = Quaternion.normalized(OTHER)
    assert Quaternion.angle(a, b) == pytest.approx(Quaternion.angle(b, a))


def test_lerp_endpoints():
    assert Quaternion.lerp(SAMPLE, OTHER, 0.0) == Quaternion.normalized(SAMPLE)
    end = Quaternion.lerp(SAMPLE, OTHER, 1.0)
    assert end.unpack() == pytest.approx(Quaternion.normalized(OTHER).unpack())


def test_lerp_result_is_unit():
    mid = Quaternion.lerp(SAMPLE, OTHER, 0.3)
    assert Quaternion.magnitude(mid) == pytest.approx(1.0)


def test_multiply_by_non_quaternion_fails():
    with pytest.raises(TypeError):
        Quaternion.identity() * "x"