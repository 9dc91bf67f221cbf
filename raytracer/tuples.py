"""Homogeneous 4-component tuples used for points and vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from raytracer.utils import is_float_equal


@dataclass(frozen=True, eq=False)
class Tuple:
    """A 4-component tuple; w is 1 for points and 0 for vectors."""

    x: float
    y: float
    z: float
    w: float

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return all(is_float_equal(a, b) for a, b in zip(self, other))

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def _require_vector(self, operation: str) -> None:
        if self.w != 0.0:
            raise ValueError(f"{operation} is only valid for vectors")

    def magnitude(self) -> float:
        """Length of a vector."""
        self._require_vector("Magnitude")
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalize(self) -> Tuple:
        """Unit vector pointing the same way."""
        self._require_vector("Normalize")
        return self / self.magnitude()

    def dot(self, other: Tuple) -> float:
        """Dot product of two vectors."""
        self._require_vector("Dot-product")
        other._require_vector("Dot-product")
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of two vectors."""
        self._require_vector("Cross-product")
        other._require_vector("Cross-product")
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector around ``normal``."""
        return self - normal * 2.0 * self.dot(normal)

    def is_point(self) -> bool:
        return is_float_equal(self.w, 1.0)

    def is_vector(self) -> bool:
        return is_float_equal(self.w, 0.0)


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0)."""
    return Tuple(x, y, z, 0.0)