"""Angle and distance primitives for sampled slider paths.

Tangent angles are undirected: a segment and its reverse lie on the same line,
so directions are compared modulo pi.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from burai_checker.data.curves import Point2D

CurveLike = Sequence[Point2D] | Sequence[Sequence[float]] | np.ndarray


def wrap_angle(radians: float, scale: float = 1.0) -> float:
    """Fold an angle back below pi * scale.

    Angles at or below the limit are returned unchanged; anything above it is
    reflected to 2 * pi * scale - radians.
    """
    return 2 * math.pi * scale - radians if radians > math.pi * scale else radians


def tangent_angle(a: Point2D, b: Point2D) -> float:
    """Undirected direction of the segment a-b, in [0, pi)."""
    radians = wrap_angle(math.atan2(a.y - b.y, a.x - b.x), 1.0)
    return (radians if radians >= 0 else 2 * math.pi + radians) % math.pi


def euclidean_distance(a: Point2D, b: Point2D) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def as_point_array(curve: CurveLike) -> np.ndarray:
    """Convert a curve to a float64 array of shape [N, 2]."""
    if isinstance(curve, np.ndarray):
        return curve.astype(np.float64, copy=False).reshape(-1, 2)
    rows = [(p.x, p.y) if isinstance(p, Point2D) else (p[0], p[1]) for p in curve]
    return np.asarray(rows, dtype=np.float64).reshape(-1, 2)


def as_points(curve: CurveLike) -> list[Point2D]:
    """Convert a curve to a list of Point2D."""
    return [Point2D(float(x), float(y)) for x, y in as_point_array(curve)]


def pairwise_distances(points: np.ndarray) -> np.ndarray:
    """All-pairs euclidean distance matrix [N, N] for an [N, 2] array."""
    diff = points[:, None, :] - points[None, :, :]
    return np.sqrt(diff[..., 0] * diff[..., 0] + diff[..., 1] * diff[..., 1])
