"""Floating-point helpers shared across the renderer."""

EPSILON = 0.00005


def is_float_equal(actual: float, comparison: float) -> bool:
    """Return True when the two values differ by less than ``EPSILON``."""
    return abs(actual - comparison) < EPSILON