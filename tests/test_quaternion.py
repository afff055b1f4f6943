import math

import pytest

from wireview.quaternion import Quaternion
from wireview.vectors import Vec3


def _length(v):
    return math.sqrt(v.dot(v))


@pytest.fixture
def yaw90():
    return Quaternion.from_axis_angle(math.pi / 2, Vec3(0.0, 1.0, 0.0))


@pytest.fixture
def arbitrary():
    q = Quaternion(0.7, -0.2, 0.4, 0.3)
    q.normalize()
    return q


def test_default_is_identity():
    assert tuple(Quaternion()) == (1.0, 0.0, 0.0, 0.0)


def test_yaw_rotates_forward_to_left(yaw90):
    assert tuple(yaw90.rotate(Vec3(0, 0, -1))) == pytest.approx((-1.0, 0.0, 0.0), abs=1e-9)


def test_yaw_rotates_right_to_forward(yaw90):
    assert tuple(yaw90.rotate(Vec3(1, 0, 0))) == pytest.approx((0.0, 0.0, -1.0), abs=1e-9)


def test_yaw_leaves_up_unchanged(yaw90):
    up = Vec3(0, 1, 0)
    assert tuple(yaw90.rotate(up)) == pytest.approx(tuple(up), abs=1e-9)


def test_rotation_preserves_length(arbitrary):
    v = Vec3(1.5, -2.0, 0.25)
    assert _length(arbitrary.rotate(v)) == pytest.approx(_length(v))


def test_identity_rotation_is_noop():
    v = Vec3(3.0, -1.0, 2.0)
    assert tuple(Quaternion().rotate(v)) == pytest.approx(tuple(v))


def test_double_conjugate_is_original(arbitrary):
    assert arbitrary.conjugate().conjugate() == arbitrary


def test_product_with_conjugate_is_squared_norm():
    q = Quaternion(1.0, 2.0, -1.0, 0.5)
    p = q * q.conjugate()
    assert tuple(p) == pytest.approx((q.norm() ** 2, 0.0, 0.0, 0.0))


def test_scalar_multiplication_scales_norm():
    q = Quaternion(1.0, 2.0, -1.0, 0.5)
    assert (q * 3).norm() == pytest.approx(3 * q.norm())


def test_multiplying_by_string_raises():
    with pytest.raises(TypeError):
        Quaternion() * "q"


def test_inverse_of_zero_is_identity():
    assert Quaternion(0.0, 0.0, 0.0, 0.0).inverse() == Quaternion()


def test_inverse_of_unit_undoes_rotation(arbitrary):
    assert tuple(arbitrary * arbitrary.inverse()) == pytest.approx(tuple(Quaternion()), abs=1e-9)
    v = Vec3(0.3, 4.0, -2.0)
    back = arbitrary.inverse().rotate(arbitrary.rotate(v))
    assert tuple(back) == pytest.approx(tuple(v))


def test_normalize_gives_unit_norm():
    q = Quaternion(2.0, -1.0, 3.0, 0.5)
    q.normalize()
    assert q.norm() == pytest.approx(1.0)


def test_normalize_zero_is_noop():
    q = Quaternion(0.0, 0.0, 0.0, 0.0)
    q.normalize()
    assert tuple(q) == (0.0, 0.0, 0.0, 0.0)


def test_rotation_matrix_applies_inverse_rotation(arbitrary):
    m = arbitrary.to_rotation_matrix()
    v = Vec3(1.0, -2.0, 0.5)
    by_matrix = [sum(a * b for a, b in zip(row[:3], v)) for row in m[:3]]
    expected = arbitrary.conjugate().rotate(v)
    assert by_matrix == pytest.approx(list(expected))


def test_rotation_matrix_bottom_row_and_last_column_are_zero(arbitrary):
    m = arbitrary.to_rotation_matrix()
    assert m[3] == [0.0, 0.0, 0.0, 0.0]
    assert [row[3] for row in m] == [0.0, 0.0, 0.0, 0.0]


def test_identity_rotation_matrix_upper_block():
    m = Quaternion().to_rotation_matrix()
    for i, row in enumerate(m[:3]):
        for j, value in enumerate(row[:3]):
            assert value == (1.0 if i == j else 0.0)


def test_apply_rotation_matches_product_in_place(arbitrary, yaw90):
    expected = arbitrary * yaw90
    q = Quaternion(*arbitrary)
    q.apply_rotation(yaw90)
    assert tuple(q) == pytest.approx(tuple(expected))


def test_euler_zero_is_identity():
    assert tuple(Quaternion.from_euler(Vec3())) == pytest.approx((1.0, 0.0, 0.0, 0.0))


def test_euler_is_unit_length():
    q = Quaternion.from_euler(Vec3(0.3, -1.1, 0.7))
    assert q.norm() == pytest.approx(1.0)


def test_euler_roll_only_matches_axis_angle_about_x():
    angle = 0.8
    q = Quaternion.from_euler(Vec3(0.0, 0.0, angle))
    expected = Quaternion.from_axis_angle(angle, Vec3(1.0, 0.0, 0.0))
    assert tuple(q) == pytest.approx(tuple(expected))


def test_str_format():
    assert str(Quaternion()) == "x: 0.000000, y: 0.000000, z: 0.000000, w: 1.000000"