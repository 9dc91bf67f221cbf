"""Common behaviour of every renderable shape."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from raytracer.transformations import apply, identity, matrices_equal
from raytracer.tuples import Tuple, point


class Shape(ABC):
    """A shape placed in the world by a 4x4 transformation matrix.

    Subclasses describe the shape in its own object space through
    ``local_normal_at`` and ``local_intersect``.
    """

    def __init__(self, transform: np.ndarray | None = None) -> None:
        self.position: Tuple = point(0.0, 0.0, 0.0)
        self._transform: np.ndarray = identity()
        self._inverse: np.ndarray = identity()
        if transform is not None:
            self.transform = transform

    @property
    def transform(self) -> np.ndarray:
        """The object-to-world transformation."""
        return self._transform.copy()

    @transform.setter
    def transform(self, matrix: np.ndarray) -> None:
        m = np.array(matrix, dtype=float)
        if m.shape != (4, 4):
            raise ValueError(f"transform must be a 4x4 matrix, got shape {m.shape}")
        if np.linalg.det(m) == 0.0:
            raise ValueError("transform is not invertible")
        try:
            inverse = np.linalg.inv(m)
        except np.linalg.LinAlgError as exc:
            raise ValueError("transform is not invertible") from exc
        self._transform = m
        self._inverse = inverse

    @property
    def inverse(self) -> np.ndarray:
        """The world-to-object transformation."""
        return self._inverse.copy()

    def world_to_local(self, world_point: Tuple) -> Tuple:
        """Convert a point from world space into object space."""
        return apply(self._inverse, world_point)

    def _local_vector_to_world(self, local_vector: Tuple) -> Tuple:
        world = apply(self._inverse.T, local_vector)
        return Tuple(world.x, world.y, world.z, 0.0).normalize()

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Unit surface normal, in world space, at ``world_point``."""
        local_point = self.world_to_local(world_point)
        local_normal = self.local_normal_at(local_point)
        return self._local_vector_to_world(local_normal)

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Surface normal at a point given in object space."""

    @abstractmethod
    def local_intersect(self, origin: Tuple, direction: Tuple) -> list[float]:
        """Times at which a ray given in object space meets the shape."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.position == other.position
            and matrices_equal(self._transform, other._transform)
            and self._extra_state() == other._extra_state()
        )

    __hash__ = None  # type: ignore[assignment]

    def _extra_state(self) -> tuple:
        """Shape-specific values that take part in equality."""
        return ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform.tolist()!r})"