import pytest

from raytracer.utils import EPSILON, is_float_equal


def test_epsilon_bounds_the_comparison():
    assert is_float_equal(0.0, 0.00004)
    assert not is_float_equal(0.0, 0.00006)
    assert not is_float_equal(0.0, EPSILON * 1.5)


def test_identical_values_are_equal():
    assert is_float_equal(4.3, 4.3)
    assert is_float_equal(-4.2, -4.2)


def test_values_within_epsilon_are_equal():
    assert is_float_equal(1.0, 1.0 + EPSILON / 2)
    assert is_float_equal(1.0, 1.0 - EPSILON / 2)


def test_values_beyond_epsilon_differ():
    assert not is_float_equal(1.0, 1.0 + EPSILON * 2)
    assert not is_float_equal(1.0, 1.0 - EPSILON * 2)


@pytest.mark.parametrize("a, b", [(0.0, 0.1), (3.0, 2.0), (-1.0, 1.0)])
def test_equality_is_symmetric(a, b):
    assert is_float_equal(a, b) == is_float_equal(b, a)
    assert not is_float_equal(a, b)