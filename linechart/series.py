from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Sequence

import numpy as np

from linechart.errors import ChartDataError


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True, eq=False)
class Series:
    name: str
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ChartDataError("series name must be a non-empty string")
        x = np.asarray(self.x, dtype=np.float64)
        y = np.asarray(self.y, dtype=np.float64)
        if x.ndim != 1 or y.ndim != 1:
            raise ChartDataError(f"series {self.name!r}: x and y must be 1-D")
        if x.shape != y.shape:
            raise ChartDataError(f"series {self.name!r}: x and y length mismatch: {x.size} != {y.size}")
        if x.size == 0:
            raise ChartDataError(f"series {self.name!r}: empty series")
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise ChartDataError(f"series {self.name!r}: contains non-finite values")
        x = x.copy()
        y = y.copy()
        x.flags.writeable = False
        y.flags.writeable = False
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_points(cls, name: str, points: Sequence[tuple[float, float]]) -> "Series":
        arr = np.asarray(points, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ChartDataError(f"series {name!r}: points must be (x, y) pairs")
        return cls(name=name, x=arr[:, 0], y=arr[:, 1])

    def __len__(self) -> int:
        return int(self.x.size)

    def points(self) -> Iterator[Point]:
        for x, y in zip(self.x.tolist(), self.y.tolist()):
            yield Point(x, y)


@dataclass(frozen=True, eq=False)
class DataSet:
    """Ordered series collection; order drives default z-order and palette slot."""

    series: tuple[Series, ...] = ()

    def __post_init__(self) -> None:
        series = tuple(self.series)
        seen: set[str] = set()
        for item in series:
            if not isinstance(item, Series):
                raise ChartDataError(f"expected Series, got {type(item)!r}")
            if item.name in seen:
                raise ChartDataError(f"duplicate series name: {item.name}")
            seen.add(item.name)
        object.__setattr__(self, "series", series)

    def __len__(self) -> int:
        return len(self.series)

    def __iter__(self) -> Iterator[Series]:
        return iter(self.series)

    def __getitem__(self, index: int) -> Series:
        return self.series[index]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(s.name for s in self.series)

    def is_empty(self) -> bool:
        return not self.series


@dataclass(frozen=True, eq=False)
class NormalizedSeries:
    name: str
    series_index: int
    screen_x: np.ndarray
    screen_y: np.ndarray

    def __len__(self) -> int:
        return int(self.screen_x.size)

    def points(self) -> Iterator[Point]:
        for x, y in zip(self.screen_x.tolist(), self.screen_y.tolist()):
            yield Point(x, y)

    def point(self, index: int) -> Point:
        return Point(float(self.screen_x[index]), float(self.screen_y[index]))
