"""Leaf-node geometry helpers. No scene imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

# 2x3 affine matrix as exposed to callers: ((a, c, tx), (b, d, ty))
Transform = tuple[tuple[float, float, float], tuple[float, float, float]]


def affine(x: float, y: float, rotation: float = 0.0) -> NDArray[np.float64]:
    """3x3 matrix placing a local frame at (x, y), rotated counter-clockwise in degrees."""
    theta = math.radians(rotation)
    cos, sin = math.cos(theta), math.sin(theta)
    # y grows downward, so a counter-clockwise turn on screen is -theta
    return np.array(
        [
            [cos, sin, x],
            [-sin, cos, y],
            [0.0, 0.0, 1.0],
        ]
    )


def to_transform(matrix: NDArray[np.float64]) -> Transform:
    """Drop the homogeneous row of a 3x3 matrix."""
    return (
        (float(matrix[0, 0]), float(matrix[0, 1]), float(matrix[0, 2])),
        (float(matrix[1, 0]), float(matrix[1, 1]), float(matrix[1, 2])),
    )


def union_bounds(
    rects: list[tuple[float, float, float, float]],
) -> tuple[float, float, float, float]:
    """Union of (x, y, width, height) rects as (xmin, ymin, xmax, ymax)."""
    if not rects:
        return (0.0, 0.0, 0.0, 0.0)
    arr = np.array(rects, dtype=np.float64)
    return (
        float(np.min(arr[:, 0])),
        float(np.min(arr[:, 1])),
        float(np.max(arr[:, 0] + arr[:, 2])),
        float(np.max(arr[:, 1] + arr[:, 3])),
    )
