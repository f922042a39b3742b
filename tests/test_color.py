import pytest

from openlima.color import Color


def test_default_color_is_blank():
    assert Color() == Color(0.0, 0.0, 0.0, 0.0)
    assert Color().int_rgba() == 0


def test_full_component_maps_to_255():
    c = Color(1.0, 1.0, 1.0, 1.0)
    assert c.int_r() == 255
    assert c.int_a() == c.int_r()


@pytest.mark.parametrize("value", [0.0, 0.1, 0.25, 0.5, 0.77, 0.999])
def test_int_components_truncate(value):
    c = Color(value, value, value, value)
    for got in (c.int_r(), c.int_g(), c.int_b(), c.int_a()):
        assert got <= value * 255.0 < got + 1


def test_int_rgba_layout():
    c = Color(0.2, 0.4, 0.6, 0.8)
    packed = c.int_rgba()
    assert packed >> 24 == c.int_r()
    assert (packed >> 16) & 0xFF == c.int_g()
    assert (packed >> 8) & 0xFF == c.int_b()
    assert packed & 0xFF == c.int_a()


def test_int_argb_layout():
    c = Color(0.2, 0.4, 0.6, 0.8)
    packed = c.int_argb()
    assert packed >> 24 == c.int_a()
    assert (packed >> 16) & 0xFF == c.int_r()
    assert (packed >> 8) & 0xFF == c.int_g()
    assert packed & 0xFF == c.int_b()


def test_rgba_and_argb_are_rotations():
    c = Color(0.1, 0.3, 0.5, 0.9)
    rgba = c.int_rgba()
    assert ((rgba >> 8) | ((rgba & 0xFF) << 24)) == c.int_argb()


def test_as_tuple_order():
    assert Color(0.25, 0.5, 0.75, 1.0).as_tuple() == (0.25, 0.5, 0.75, 1.0)
    assert tuple(Color(0.25, 0.5, 0.75, 1.0)) == (0.25, 0.5, 0.75, 1.0)


def test_copy_is_independent():
    original = Color(0.25, 0.5, 0.75, 1.0)
    duplicate = original.copy()
    assert duplicate == original
    duplicate.r = 0.0
    assert original.r == 0.25


def test_equality_and_inequality():
    assert Color(0.5, 0.5, 0.5, 0.5) == Color(0.5, 0.5, 0.5, 0.5)
    assert not (Color(0.5, 0.5, 0.5, 0.5) != Color(0.5, 0.5, 0.5, 0.5))
    assert Color(0.5, 0.5, 0.5, 0.5) != Color(0.5, 0.5, 0.5, 0.25)


def test_add_sub_round_trip():
    a = Color(0.25, 0.5, 0.125, 0.75)
    b = Color(0.5, 0.25, 0.25, 0.125)
    assert (a + b) - b == a
    assert (a + b) == (b + a)


def test_mul_div_round_trip():
    a = Color(0.25, 0.5, 0.125, 0.75)
    b = Color(0.5, 0.25, 2.0, 4.0)
    assert (a * b) / b == a
    assert a * Color(1.0, 1.0, 1.0, 1.0) == a


def test_binary_operators_leave_operands_unchanged():
    a = Color(0.25, 0.5, 0.125, 0.75)
    b = Color(0.5, 0.25, 0.25, 0.125)
    _ = a + b
    _ = a * b
    assert a == Color(0.25, 0.5, 0.125, 0.75)
    assert b == Color(0.5, 0.25, 0.25, 0.125)


def test_in_place_operators_mutate_same_object():
    c = Color(0.25, 0.5, 0.125, 0.75)
    ref = c
    c += Color(0.25, 0.25, 0.25, 0.25)
    assert c is ref
    c -= Color(0.25, 0.25, 0.25, 0.25)
    assert c is ref and c == Color(0.25, 0.5, 0.125, 0.75)
    c *= Color(2.0, 2.0, 2.0, 2.0)
    c /= Color(2.0, 2.0, 2.0, 2.0)
    assert c is ref and c == Color(0.25, 0.5, 0.125, 0.75)


def test_division_by_zero_component_raises():
    with pytest.raises(ZeroDivisionError):
        Color(1.0, 1.0, 1.0, 1.0) / Color(1.0, 0.0, 1.0, 1.0)


def test_operator_with_other_type_fails():
    with pytest.raises(TypeError):
        Color() + 1