import math

import pytest

from wireview.vectors import Vec3, Vec4


def test_default_is_origin():
    assert tuple(Vec3()) == (0.0, 0.0, 0.0)


def test_dot_operator_matches_method():
    a = Vec3(1.5, -2.0, 3.0)
    b = Vec3(4.0, 0.5, -1.0)
    assert a * b == a.dot(b)
    assert a.dot(b) == b.dot(a)


def test_dot_with_self_is_squared_length():
    v = Vec3(3.0, 4.0, 12.0)
    assert v * v == pytest.approx(v.normalize().dot(v) ** 2)


def test_cross_of_basis_vectors():
    assert Vec3(1, 0, 0) ^ Vec3(0, 1, 0) == Vec3(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = a ^ b
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    d = b.cross(a)
    assert tuple(d) == pytest.approx(tuple(c * -1))


def test_add_then_subtract_round_trip():
    a = Vec3(1.25, -3.5, 7.0)
    b = Vec3(0.5, 2.0, -4.0)
    assert (a + b) - b == a


def test_scalar_multiplication_both_sides():
    v = Vec3(1.0, -2.0, 3.0)
    assert v * 2 == 2 * v
    assert v * 2 == v + v


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        Vec3() + 1
    with pytest.raises(TypeError):
        Vec3() * "a"


def test_normalize_gives_unit_length_same_direction():
    v = Vec3(2.0, -3.0, 6.0)
    n = v.normalize()
    assert math.sqrt(n.dot(n)) == pytest.approx(1.0)
    assert (n ^ v).dot(n ^ v) == pytest.approx(0.0)
    assert n.dot(v) > 0


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3().normalize()


def test_str_uses_fixed_six_decimals():
    assert str(Vec3(1, 2, 3)) == "x: 1.000000, y: 2.000000, z: 3.000000"


def test_vec4_default_w_is_one():
    assert tuple(Vec4()) == (0.0, 0.0, 0.0, 1.0)


def test_vec4_from_vec3_keeps_components():
    v = Vec3(1.5, 2.5, -3.5)
    h = Vec4.from_vec3(v)
    assert (h.x, h.y, h.z) == tuple(v)
    assert h.w == 1.0


def test_vec4_str():
    assert str(Vec4(1, 2, 3, 1)) == "(1, 2, 3, 1)"