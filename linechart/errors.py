from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linechart.scales import AxisBounds


class ChartError(Exception):
    """Base class for chart pipeline failures."""


class ChartDataError(ChartError, ValueError):
    """Input data cannot be turned into a valid data set."""


class RenderPreconditionError(ChartError):
    """Axis bounds give a degenerate scale, so no primitives can be drawn."""

    def __init__(self, message: str, *, bounds: "AxisBounds | None" = None) -> None:
        super().__init__(message)
        self.bounds = bounds
