# Geometry.py

from typing import Any, Optional, Sequence, Tuple
import numpy as np

Point = Tuple[float, float]


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation: `a` at t=0, `b` at t=1."""
    return a + (b - a) * t


def inv_lerp(a: float, b: float, v: float) -> float:
    """
    Inverse of `lerp`: where `v` sits between `a` and `b` (0 at `a`, 1 at `b`).
    A zero-length range (a == b) gives nan/inf instead of raising.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(v) - a, np.float64(b) - a))


def remap(old_a: float, old_b: float, new_a: float, new_b: float, v: float) -> float:
    return lerp(new_a, new_b, inv_lerp(old_a, old_b, v))


def remap_point(old_bounds: Any, new_bounds: Any, point: Sequence[float]) -> Point:
    """
    Map a point from one rectangle to another, axis by axis.
    x uses left/right and y uses top/bottom, so rectangles with opposite
    vertical orientation (pixel vs data space) map onto each other correctly.
    """
    return (
        remap(old_bounds.left, old_bounds.right, new_bounds.left, new_bounds.right, point[0]),
        remap(old_bounds.top, old_bounds.bottom, new_bounds.top, new_bounds.bottom, point[1]),
    )


def remap_points(old_bounds: Any, new_bounds: Any, points: Any) -> np.ndarray:
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    old_lo = np.array([old_bounds.left, old_bounds.top], dtype=float)
    old_hi = np.array([old_bounds.right, old_bounds.bottom], dtype=float)
    new_lo = np.array([new_bounds.left, new_bounds.top], dtype=float)
    new_hi = np.array([new_bounds.right, new_bounds.bottom], dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        t = (pts - old_lo) / (old_hi - old_lo)
        return new_lo + (new_hi - new_lo) * t


def add_points(p1: Sequence[float], p2: Sequence[float]) -> Point:
    return (p1[0] + p2[0], p1[1] + p2[1])


def subtract_points(p1: Sequence[float], p2: Sequence[float]) -> Point:
    return (p1[0] - p2[0], p1[1] - p2[1])


def scale_point(p: Sequence[float], scaler: float) -> Point:
    return (p[0] * scaler, p[1] * scaler)


def points_equal(p1: Sequence[float], p2: Sequence[float]) -> bool:
    return p1[0] == p2[0] and p1[1] == p2[1]


def distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    return float(np.hypot(p1[0] - p2[0], p1[1] - p2[1]))


def get_nearest(loc: Sequence[float], points: Any) -> Optional[int]:
    """
    Index of the point closest to `loc`, or None for an empty set.
    Exact ties resolve to the lowest index.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(pts) == 0:
        return None
    dists = np.hypot(pts[:, 0] - loc[0], pts[:, 1] - loc[1])
    # argmin returns the first minimum; a nan entry wins, so mask them out first
    finite = np.isfinite(dists)
    if not np.any(finite):
        return 0
    dists = np.where(finite, dists, np.inf)
    return int(np.argmin(dists))


def format_number(n: float, decimals: int = 0) -> str:
    return f"{n:.{decimals}f}"
