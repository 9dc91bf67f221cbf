"""The unit sphere centred on the origin."""

from __future__ import annotations

import math

from raytracer.shapes import Shape
from raytracer.tuples import Tuple, point


class Sphere(Shape):
    """A sphere of radius one around its position."""

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return local_point - point(0.0, 0.0, 0.0)

    def local_intersect(self, origin: Tuple, direction: Tuple) -> list[float]:
        sphere_to_ray = origin - self.position
        a = direction.dot(direction)
        b = 2.0 * direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b**2 - 4.0 * a * c
        if discriminant < 0.0:
            return []
        root = math.sqrt(discriminant)
        return [(-b - root) / (2.0 * a), (-b + root) / (2.0 * a)]