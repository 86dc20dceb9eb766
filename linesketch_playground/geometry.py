"""Planar geometry helpers for the LineSketch Playground.

Points are plain ``(x, y)`` tuples in widget-local coordinates. The routines
are small enough to stay scalar; numpy is used where the formula reads better
as vector arithmetic.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

Point = Tuple[float, float]
EPS = 1e-12


def as_point(value: Sequence[float]) -> Point:
    """Coerce any two-element sequence to a float ``(x, y)`` tuple."""
    return (float(value[0]), float(value[1]))


def euclid_len(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Return the Euclidean distance between two points."""
    return float(math.hypot(float(p2[0]) - float(p1[0]), float(p2[1]) - float(p1[1])))


def is_degenerate(a: Sequence[float], b: Sequence[float]) -> bool:
    """True when ``a`` and ``b`` are too close to define a line."""
    return euclid_len(a, b) < EPS


def point_line_distance(point: Sequence[float], a: Sequence[float], b: Sequence[float]) -> float:
    """Distance from ``point`` to the infinite line through ``a`` and ``b``.

    Uses the two-point form ``|(by-ay)x - (bx-ax)y + bx*ay - by*ax| / |b-a|``.
    When ``a`` and ``b`` coincide there is no line, so the distance to ``a``
    is returned instead.
    """
    p = np.asarray(point, dtype=float)
    pa = np.asarray(a, dtype=float)
    pb = np.asarray(b, dtype=float)
    if is_degenerate(pa, pb):
        return euclid_len(p, pa)
    direction = pb - pa
    length = float(np.hypot(direction[0], direction[1]))
    numerator = direction[1] * p[0] - direction[0] * p[1] + pb[0] * pa[1] - pb[1] * pa[0]
    return float(abs(numerator) / length)


def angle_deg(a: Sequence[float], b: Sequence[float]) -> float:
    """Direction of the vector ``a -> b`` in degrees, in ``(-180, 180]``."""
    return math.degrees(math.atan2(float(b[1]) - float(a[1]), float(b[0]) - float(a[0])))


def offset(point: Sequence[float], dx: float, dy: float) -> Point:
    return (float(point[0]) + dx, float(point[1]) + dy)


def delta(p1: Sequence[float], p2: Sequence[float]) -> Point:
    """Return ``p2 - p1`` as a tuple."""
    return (float(p2[0]) - float(p1[0]), float(p2[1]) - float(p1[1]))


def total_length(segments: Sequence[Tuple[Point, Point]]) -> float:
    """Sum of the lengths of ``(start, end)`` pairs."""
    if not segments:
        return 0.0
    pts = np.asarray(segments, dtype=float)
    diff = pts[:, 1, :] - pts[:, 0, :]
    return float(np.sum(np.hypot(diff[:, 0], diff[:, 1])))


__all__ = [
    "Point",
    "EPS",
    "as_point",
    "euclid_len",
    "is_degenerate",
    "point_line_distance",
    "angle_deg",
    "offset",
    "delta",
    "total_length",
]
