"""4x4 transformation matrices built on numpy."""

from __future__ import annotations

import math

import numpy as np

from raytracer.tuples import Tuple
from raytracer.utils import EPSILON


def identity() -> np.ndarray:
    """The 4x4 identity matrix."""
    return np.identity(4, dtype=float)


def translation(x: float, y: float, z: float) -> np.ndarray:
    return np.array(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z, 1.0]).astype(float)


def rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(x_y: float, x_z: float, y_x: float, y_z: float, z_x: float, z_y: float) -> np.ndarray:
    return np.array(
        [
            [1.0, x_y, x_z, 0.0],
            [y_x, 1.0, y_z, 0.0],
            [z_x, z_y, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Tuple, to: Tuple, up: Tuple) -> np.ndarray:
    """Matrix that orients the world relative to an eye at ``from_point``."""
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = np.array(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)


def apply(matrix: np.ndarray, tup: Tuple) -> Tuple:
    """Multiply a 4x4 matrix by a tuple."""
    x, y, z, w = (float(v) for v in matrix @ np.array(list(tup), dtype=float))
    return Tuple(x, y, z, w)


def matrices_equal(a: np.ndarray, b: np.ndarray) -> bool:
    """Element-wise comparison within ``EPSILON``."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return a.shape == b.shape and bool(np.all(np.abs(a - b) < EPSILON))