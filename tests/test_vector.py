import math

import pytest

from openlima.vector import Vector2, Vector3


def _dot(a, b):
    return a.x * b.x + a.y * b.y + a.z * b.z


def test_vector2_default_is_zero():
    assert Vector2() == Vector2(0, 0)


def test_vector2_add_sub_round_trip():
    a = Vector2(3, -4)
    b = Vector2(10, 7)
    assert (a + b) - b == a
    assert a + b == b + a


def test_vector2_mul_div_round_trip():
    a = Vector2(3, -4)
    b = Vector2(5, 2)
    assert (a * b) / b == a


def test_vector2_integer_division_truncates_toward_zero():
    assert Vector2(7, -7) / Vector2(2, 2) == Vector2(3, -3)


def test_vector2_float_division():
    assert Vector2(1.0, 3.0) / Vector2(2.0, 2.0) == Vector2(0.5, 1.5)


def test_vector2_in_place_mutates_same_object():
    v = Vector2(1, 2)
    ref = v
    v += Vector2(4, 5)
    v -= Vector2(4, 5)
    v *= Vector2(3, 3)
    v /= Vector2(3, 3)
    assert v is ref
    assert v == Vector2(1, 2)


def test_vector2_copy_is_independent():
    a = Vector2(1, 2)
    b = a.copy()
    b.x = 9
    assert a == Vector2(1, 2)
    assert b != a


def test_vector2_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2(1, 1) / Vector2(0, 1)


def test_vector3_length_of_3_4_0():
    assert Vector3(3.0, 4.0, 0.0).length() == 5.0
    assert Vector3(3.0, 4.0, 0.0).length_sq() == 25.0


def test_vector3_length_squared_matches_length():
    v = Vector3(1.5, -2.0, 0.25)
    assert math.isclose(v.length() ** 2, v.length_sq())


def test_vector3_normalized_has_unit_length():
    v = Vector3(2.0, -3.0, 6.0)
    n = v.normalized()
    assert math.isclose(n.length(), 1.0)
    assert v == Vector3(2.0, -3.0, 6.0)


def test_vector3_normalize_in_place_keeps_direction():
    v = Vector3(0.0, 0.0, 8.0)
    v.normalize()
    assert v == Vector3(0.0, 0.0, 1.0)


def test_vector3_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3(0.0, 0.0, 0.0).normalize()


def test_cross_product_of_axes():
    origin = Vector3(0, 0, 0)
    ex = Vector3(1, 0, 0)
    ey = Vector3(0, 1, 0)
    assert Vector3.cross_product(origin, ex, ey) == Vector3(0, 0, 1)


def test_cross_product_is_perpendicular_to_edges():
    p1 = Vector3(1.0, 2.0, 3.0)
    p2 = Vector3(4.0, -1.0, 2.0)
    p3 = Vector3(0.5, 5.0, -2.0)
    n = Vector3.cross_product(p1, p2, p3)
    assert math.isclose(_dot(n, p2 - p1), 0.0, abs_tol=1e-9)
    assert math.isclose(_dot(n, p3 - p1), 0.0, abs_tol=1e-9)


def test_cross_product_flips_with_winding():
    p1 = Vector3(1, 2, 3)
    p2 = Vector3(4, -1, 2)
    p3 = Vector3(0, 5, -2)
    assert Vector3.cross_product(p1, p3, p2) == -Vector3.cross_product(p1, p2, p3)


def test_vector3_negation():
    v = Vector3(1, -2, 3)
    assert -v + v == Vector3(0, 0, 0)
    assert -(-v) == v


def test_vector3_arithmetic_round_trips():
    a = Vector3(1.5, -2.0, 4.0)
    b = Vector3(0.5, 4.0, -8.0)
    assert (a + b) - b == a
    assert (a * b) / b == a


def test_vector3_in_place_mutates_same_object():
    v = Vector3(1, 2, 3)
    ref = v
    v += Vector3(1, 1, 1)
    v -= Vector3(1, 1, 1)
    v *= Vector3(2, 2, 2)
    v /= Vector3(2, 2, 2)
    assert v is ref
    assert v == Vector3(1, 2, 3)


def test_vector3_copy_is_independent():
    a = Vector3(1, 2, 3)
    b = a.copy()
    b.z = 0
    assert a == Vector3(1, 2, 3)


def test_vector3_equality_and_inequality():
    assert Vector3(1, 2, 3) == Vector3(1, 2, 3)
    assert Vector3(1, 2, 3) != Vector3(1, 2, 4)


def test_vector3_integer_length_is_integral():
    v = Vector3(1, 1, 1)
    assert v.length() == math.isqrt(v.length_sq())
    assert isinstance(v.length(), int)