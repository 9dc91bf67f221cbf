"""The infinite xz plane."""

from __future__ import annotations

from raytracer.shapes import Shape
from raytracer.tuples import Tuple, vector
from raytracer.utils import EPSILON


class Plane(Shape):
    """A flat plane through the origin with normal along +y."""

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return vector(0.0, 1.0, 0.0)

    def local_intersect(self, origin: Tuple, direction: Tuple) -> list[float]:
        if abs(direction.y) < EPSILON:
            return []
        return [-origin.y / direction.y]