"""The axis-aligned cube spanning -1 to 1 on every axis."""

from __future__ import annotations

import math

from raytracer.shapes import Shape
from raytracer.tuples import Tuple, vector
from raytracer.utils import is_float_equal


def _divide(numerator: float, denominator: float) -> float:
    """Divide following IEEE rules, so a zero denominator gives an infinity or NaN."""
    if denominator == 0.0:
        return numerator * math.copysign(math.inf, denominator)
    return numerator / denominator


def check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Times at which a ray enters and leaves the slab between -1 and 1 on one axis."""
    tmin = _divide(-1.0 - origin, direction)
    tmax = _divide(1.0 - origin, direction)
    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    """A cube centred on the origin with sides of length two."""

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        ax, ay, az = abs(local_point.x), abs(local_point.y), abs(local_point.z)
        maxc = max(ax, ay, az)
        if is_float_equal(maxc, ax):
            return vector(local_point.x, 0.0, 0.0)
        if is_float_equal(maxc, ay):
            return vector(0.0, local_point.y, 0.0)
        if is_float_equal(maxc, az):
            return vector(0.0, 0.0, local_point.z)
        raise ValueError("intersection did not match any axis")

    def local_intersect(self, origin: Tuple, direction: Tuple) -> list[float]:
        bounds = [
            check_axis(origin.x, direction.x),
            check_axis(origin.y, direction.y),
            check_axis(origin.z, direction.z),
        ]
        tmin = max(low for low, _ in bounds)
        tmax = min(high for _, high in bounds)
        if tmin > tmax:
            return []
        return [tmin, tmax]