# ViewTransform.py

from dataclasses import dataclass, replace
from typing import Any, Sequence, Tuple
import numpy as np

from SampleChart.Bounds import Bounds
from SampleChart.Geometry import Point, add_points, remap_point, remap_points


@dataclass(frozen=True)
class ViewTransform:
    """
    Mapping between the fixed pixel rectangle and the movable data window.

    The live data window is never stored: it is rebuilt from
    `default_window`, `offset` and `scale` every time it is needed, so pans
    and zooms cannot accumulate drift.
    """
    pixel_bounds: Bounds
    default_window: Bounds
    offset: Point = (0.0, 0.0)
    scale: float = 1.0

    @classmethod
    def create(cls, size: float, points: Any, margin_ratio: float = 0.11) -> "ViewTransform":
        margin = size * margin_ratio
        return cls(
            pixel_bounds=Bounds.for_surface(size, margin),
            default_window=Bounds.from_points(points),
        )

    @property
    def margin(self) -> float:
        return self.pixel_bounds.left

    def data_window(self) -> Bounds:
        """
        Current view window: the default window shifted by `offset`, then
        scaled about its own centre by scale**2.
        """
        moved = self.default_window.translated(self.offset[0], self.offset[1])
        return moved.scaled_about_center(self.scale ** 2)

    def to_pixel(self, point: Sequence[float]) -> Point:
        return remap_point(self.data_window(), self.pixel_bounds, point)

    def to_pixels(self, points: Any) -> np.ndarray:
        return remap_points(self.data_window(), self.pixel_bounds, points)

    def to_data(self, pixel: Sequence[float]) -> Point:
        # Pointer input is mapped against the default window, not the live one.
        # Drag deltas are taken in this fixed frame and rescaled by scale**2.
        return remap_point(self.pixel_bounds, self.default_window, pixel)

    def axis_extents(self) -> Tuple[Point, Point]:
        """Data coordinates shown at the bottom-left and top-right plot corners."""
        window = self.data_window()
        pb = self.pixel_bounds
        lo = remap_point(pb, window, (pb.left, pb.bottom))
        hi = remap_point(pb, window, (pb.right, pb.top))
        return lo, hi

    def apply_pan(self, delta: Sequence[float]) -> "ViewTransform":
        return replace(self, offset=add_points(self.offset, delta))

    def apply_zoom(self, direction: float, step: float, min_scale: float, max_scale: float) -> "ViewTransform":
        scale = self.scale + direction * step
        return replace(self, scale=max(min_scale, min(max_scale, scale)))

    def reset(self) -> "ViewTransform":
        return replace(self, offset=(0.0, 0.0), scale=1.0)
