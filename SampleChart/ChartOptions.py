# ChartOptions.py

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Hashable, Mapping, Tuple
import json

ICONS = ("point", "image", "text")

# original option names that differ from the attribute names
_ALIASES = {
    "axesLabels": "axes_labels",
    "marginRatio": "margin_ratio",
    "zoomStep": "zoom_step",
    "maxScale": "max_scale",
    "hoverColor": "hover_color",
    "selectionColor": "selection_color",
    "pointSize": "point_size",
    "textSize": "text_size",
    "axisColor": "axis_color",
}


@dataclass(frozen=True)
class ChartOptions:
    """
    Every chart setting and its default, in one place.

    `styles` maps a sample label to rendering hints
    ({"color": ..., "image": ..., "text": ...}); only the drawing code reads
    them, and `icon` picks which of the three it uses.
    """
    size: int = 400
    axes_labels: Tuple[str, str] = ("x", "y")
    styles: Mapping[Hashable, Mapping[str, Any]] = field(default_factory=dict)
    icon: str = "point"
    transparency: float = 1.0
    margin_ratio: float = 0.11
    zoom_step: float = 0.02
    max_scale: float = 2.0
    hover_color: str = "white"
    selection_color: str = "yellow"
    point_size: float = 8
    text_size: float = 20
    axis_color: str = "lightgray"
    background: str = "white"

    @property
    def margin(self) -> float:
        return self.size * self.margin_ratio

    @property
    def hit_radius(self) -> float:
        return self.margin / 2

    @property
    def min_scale(self) -> float:
        return self.zoom_step

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChartOptions":
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known or value is None:
                continue
            if name == "axes_labels":
                value = tuple(value)
            kwargs[name] = value
        return cls(**kwargs)

    def validate(self) -> "ChartOptions":
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if not 0 < self.transparency <= 1:
            raise ValueError(f"transparency must be in (0, 1], got {self.transparency}")
        if self.icon not in ICONS:
            raise ValueError(f"icon must be one of {ICONS}, got {self.icon!r}")
        if len(self.axes_labels) != 2:
            raise ValueError("axes_labels needs exactly two entries")
        return self


def load_options(path: str) -> ChartOptions:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return ChartOptions.from_dict(data).validate()
