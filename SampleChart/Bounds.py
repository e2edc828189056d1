# Bounds.py

from dataclasses import dataclass
from typing import Any, Tuple
import numpy as np

from SampleChart.Geometry import lerp


@dataclass(frozen=True)
class Bounds:
    """
    Axis-aligned rectangle in pixel or data space.
    Pixel space grows downward (top < bottom), data space grows upward
    (top > bottom); nothing here assumes either orientation.
    """
    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def from_points(cls, points: Any) -> "Bounds":
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        if len(pts) == 0:
            # same as min/max over nothing: an inverted, infinite box
            return cls(left=np.inf, right=-np.inf, top=-np.inf, bottom=np.inf)
        xs, ys = pts[:, 0], pts[:, 1]
        return cls(
            left=float(xs.min()),
            right=float(xs.max()),
            top=float(ys.max()),
            bottom=float(ys.min()),
        )

    @classmethod
    def for_surface(cls, size: float, margin: float) -> "Bounds":
        return cls(left=margin, right=size - margin, top=margin, bottom=size - margin)

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    def translated(self, dx: float, dy: float) -> "Bounds":
        return Bounds(
            left=self.left + dx,
            right=self.right + dx,
            top=self.top + dy,
            bottom=self.bottom + dy,
        )

    def scaled_about_center(self, factor: float) -> "Bounds":
        cx, cy = self.center
        return Bounds(
            left=lerp(cx, self.left, factor),
            right=lerp(cx, self.right, factor),
            top=lerp(cy, self.top, factor),
            bottom=lerp(cy, self.bottom, factor),
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.left, self.right, self.top, self.bottom)
