# DataSource.py

from dataclasses import dataclass
from typing import Any, Hashable, Iterator, List, Optional, Sequence, Tuple
import numpy as np


@dataclass(frozen=True)
class Sample:
    point: Tuple[float, float]
    label: Hashable

    def __post_init__(self) -> None:
        x, y = self.point
        object.__setattr__(self, "point", (float(x), float(y)))


class DataSource:
    """
    Read-only, ordered collection of samples.
    Points are also kept as an (n, 2) float array so hit-testing and bounds
    can be computed in one numpy pass.
    """

    def __init__(self, samples: Optional[Sequence[Any]] = None) -> None:
        self._samples: Tuple[Sample, ...] = tuple(self._normalize(s) for s in (samples or ()))
        if self._samples:
            self._points = np.array([s.point for s in self._samples], dtype=float)
        else:
            self._points = np.empty((0, 2), dtype=float)
        self._points.setflags(write=False)

    def _normalize(self, item: Any) -> Sample:
        if isinstance(item, Sample):
            return item
        if isinstance(item, dict):
            return Sample(point=tuple(item["point"]), label=item["label"])
        if isinstance(item, (tuple, list)) and len(item) == 2:
            point, label = item
            return Sample(point=tuple(point), label=label)
        raise TypeError(f"DataSource expects Sample, mapping or (point, label) pair, got {type(item).__name__}")

    def get(self) -> np.ndarray:
        return self._points

    def labels(self) -> List[Hashable]:
        return [s.label for s in self._samples]

    def size(self) -> int:
        return len(self._samples)

    def index_of(self, sample: Optional[Sample]) -> Optional[int]:
        if sample is None:
            return None
        for i, s in enumerate(self._samples):
            if s is sample:
                return i
        for i, s in enumerate(self._samples):
            if s == sample:
                return i
        return None

    def __len__(self) -> int:
        return len(self._samples)

    def __getitem__(self, index: int) -> Sample:
        return self._samples[index]

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)
