"""The double-napped cone around the y axis."""

from __future__ import annotations

import math

import numpy as np

from raytracer.shapes import Shape
from raytracer.tuples import Tuple, vector
from raytracer.utils import EPSILON, is_float_equal


class Cone(Shape):
    """A double cone with its apex at the origin, optionally truncated and capped along y."""

    def __init__(
        self,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
        transform: np.ndarray | None = None,
    ) -> None:
        super().__init__(transform)
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def _extra_state(self) -> tuple:
        return (self.minimum, self.maximum, self.closed)

    @staticmethod
    def _within_cap(level: float, origin: Tuple, direction: Tuple, t: float) -> bool:
        x = origin.x + t * direction.x
        z = origin.z + t * direction.z
        return x**2 + z**2 <= level**2

    def _intersect_caps(self, origin: Tuple, direction: Tuple) -> list[float]:
        if not self.closed or is_float_equal(direction.y, 0.0):
            return []
        hits = []
        for level in (self.minimum, self.maximum):
            t = (level - origin.y) / direction.y
            if self._within_cap(level, origin, direction, t):
                hits.append(t)
        return hits

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        dist = local_point.x**2 + local_point.z**2
        if dist < 1.0 and local_point.y >= self.maximum - EPSILON:
            return vector(0.0, 1.0, 0.0)
        if dist < 1.0 and local_point.y <= self.minimum + EPSILON:
            return vector(0.0, -1.0, 0.0)
        y = math.sqrt(dist)
        if local_point.y > 0.0:
            y = -y
        return vector(local_point.x, y, local_point.z)

    def local_intersect(self, origin: Tuple, direction: Tuple) -> list[float]:
        a = direction.x**2 - direction.y**2 + direction.z**2
        b = (
            2.0 * origin.x * direction.x
            - 2.0 * origin.y * direction.y
            + 2.0 * origin.z * direction.z
        )
        c = origin.x**2 - origin.y**2 + origin.z**2

        if is_float_equal(a, 0.0):
            if is_float_equal(b, 0.0):
                return []
            # The ray runs parallel to one of the halves and meets the other once.
            xs = [-c / (2.0 * b)]
        else:
            disc = b**2 - 4.0 * a * c
            if disc < 0.0:
                return []
            root = math.sqrt(disc)
            t0 = (-b - root) / (2.0 * a)
            t1 = (-b + root) / (2.0 * a)
            xs = [
                t
                for t in (t0, t1)
                if self.minimum < origin.y + t * direction.y < self.maximum
            ]

        xs.extend(self._intersect_caps(origin, direction))
        return xs

    def __repr__(self) -> str:
        return (
            f"Cone(minimum={self.minimum!r}, maximum={self.maximum!r}, "
            f"closed={self.closed!r}, transform={self._transform.tolist()!r})"
        )