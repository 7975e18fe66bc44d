from __future__ import annotations

from typing import Protocol

import numpy as np

from linechart.series import DataSet, Series


class DataSetProvider(Protocol):
    def load(self) -> DataSet: ...


class StaticDataSetProvider:
    def __init__(self, dataset: DataSet) -> None:
        self._dataset = dataset

    def load(self) -> DataSet:
        return self._dataset


class UniformSampleProvider:
    """Random sample data: ``sets`` series of ``points`` samples at x = 1..points.

    Each y is ``floor(base + u * spread)`` with ``base = floor(v * base_range)``,
    so values fall in ``[0, base_range + spread)``.
    """

    def __init__(
        self,
        *,
        sets: int = 3,
        points: int = 25,
        base_range: float = 90.0,
        spread: float = 40.0,
        seed: int | None = None,
    ) -> None:
        if sets < 0:
            raise ValueError("sets must be >= 0")
        if points < 1:
            raise ValueError("points must be >= 1")
        if base_range < 0 or spread < 0:
            raise ValueError("base_range/spread must be >= 0")
        self._sets = sets
        self._points = points
        self._base_range = base_range
        self._spread = spread
        self._rng = np.random.default_rng(seed)

    def load(self) -> DataSet:
        x = np.arange(1, self._points + 1, dtype=np.float64)
        series = []
        for i in range(self._sets):
            base = np.floor(self._rng.random(self._points) * self._base_range)
            y = np.floor(base + self._rng.random(self._points) * self._spread)
            series.append(Series(name=f"set{i + 1}", x=x, y=y))
        return DataSet(tuple(series))
