import math

import pytest

from raytracer.tuples import Tuple, point, vector
from raytracer.utils import is_float_equal


def test_a_tuple_with_w_equals_1_is_a_point():
    a = Tuple(4.3, -4.2, 3.1, 1.0)
    assert is_float_equal(a.x, 4.3)
    assert is_float_equal(a.y, -4.2)
    assert is_float_equal(a.z, 3.1)
    assert is_float_equal(a.w, 1.0)
    assert a.is_point()
    assert not a.is_vector()


def test_a_tuple_with_w_equals_0_is_a_vector():
    a = Tuple(4.3, -4.2, 3.1, 0.0)
    assert is_float_equal(a.w, 0.0)
    assert not a.is_point()
    assert a.is_vector()


def test_point_creates_tuple_with_w_equal_1():
    p = point(4.0, -4.0, 3.0)
    assert (p.x, p.y, p.z, p.w) == (4.0, -4.0, 3.0, 1.0)


def test_vector_creates_tuple_with_w_equal_0():
    v = vector(4.0, -4.0, 3.0)
    assert (v.x, v.y, v.z, v.w) == (4.0, -4.0, 3.0, 0.0)


def test_adding_two_tuples():
    a1 = Tuple(3.0, -2.0, 5.0, 1.0)
    a2 = Tuple(-2.0, 3.0, 1.0, 0.0)
    assert a1 + a2 == Tuple(1.0, 1.0, 6.0, 1.0)


def test_subtracting_two_points():
    assert point(3.0, 2.0, 1.0) - point(5.0, 6.0, 7.0) == vector(-2.0, -4.0, -6.0)


def test_subtracting_a_vector_from_a_point():
    assert point(3.0, 2.0, 1.0) - vector(5.0, 6.0, 7.0) == point(-2.0, -4.0, -6.0)


def test_subtracting_two_vectors():
    assert vector(3.0, 2.0, 1.0) - vector(5.0, 6.0, 7.0) == vector(-2.0, -4.0, -6.0)


def test_subtracting_a_vector_from_the_zero_vector():
    assert vector(0.0, 0.0, 0.0) - vector(1.0, -2.0, 3.0) == vector(-1.0, 2.0, -3.0)


def test_negating_a_tuple():
    assert -Tuple(1.0, -2.0, 3.0, -4.0) == Tuple(-1.0, 2.0, -3.0, 4.0)


def test_multiplying_by_a_scalar():
    assert Tuple(1.0, -2.0, 3.0, -4.0) * 3.5 == Tuple(3.5, -7.0, 10.5, -14.0)


def test_multiplying_by_a_fraction():
    assert Tuple(1.0, -2.0, 3.0, -4.0) * 0.5 == Tuple(0.5, -1.0, 1.5, -2.0)


def test_dividing_by_a_scalar():
    assert Tuple(1.0, -2.0, 3.0, -4.0) / 2.0 == Tuple(0.5, -1.0, 1.5, -2.0)


@pytest.mark.parametrize(
    "v, expected",
    [
        (vector(1.0, 0.0, 0.0), 1.0),
        (vector(0.0, 1.0, 0.0), 1.0),
        (vector(0.0, 0.0, 1.0), 1.0),
        (vector(1.0, 2.0, 3.0), math.sqrt(14.0)),
        (vector(-1.0, -2.0, -3.0), math.sqrt(14.0)),
    ],
)
def test_magnitude(v, expected):
    assert v.magnitude() == expected


def test_normalizing_4_0_0():
    assert vector(4.0, 0.0, 0.0).normalize() == vector(1.0, 0.0, 0.0)


def test_normalizing_1_2_3():
    s = math.sqrt(14.0)
    assert vector(1.0, 2.0, 3.0).normalize() == vector(1.0 / s, 2.0 / s, 3.0 / s)


def test_the_magnitude_of_a_normalized_vector_is_1():
    assert is_float_equal(vector(1.0, 2.0, 3.0).normalize().magnitude(), 1.0)


def test_dot_product():
    assert is_float_equal(vector(1.0, 2.0, 3.0).dot(vector(2.0, 3.0, 4.0)), 20.0)


def test_cross_product():
    a = vector(1.0, 2.0, 3.0)
    b = vector(2.0, 3.0, 4.0)
    assert a.cross(b) == vector(-1.0, 2.0, -1.0)
    assert b.cross(a) == vector(1.0, -2.0, 1.0)


def test_reflecting_a_vector_approaching_at_45_degrees():
    r = vector(1.0, -1.0, 0.0).reflect(vector(0.0, 1.0, 0.0))
    assert r == vector(1.0, 1.0, 0.0)


def test_reflecting_a_vector_off_a_slanted_surface():
    h = math.sqrt(2.0) / 2.0
    r = vector(0.0, -1.0, 0.0).reflect(vector(h, h, 0.0))
    assert r == vector(1.0, 0.0, 0.0)


def test_vector_only_operations_reject_points():
    p = point(1.0, 2.0, 3.0)
    v = vector(1.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        p.magnitude()
    with pytest.raises(ValueError):
        p.normalize()
    with pytest.raises(ValueError):
        p.dot(v)
    with pytest.raises(ValueError):
        v.cross(p)


def test_equality_is_approximate():
    assert point(1.0, 2.0, 3.0) == point(1.00001, 2.0, 3.0)
    assert not (point(1.0, 2.0, 3.0) == point(1.1, 2.0, 3.0))