from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

import numpy as np

from linechart.config import DEFAULT_AXIS_MARGIN, DEFAULT_CANVAS_SIZE, DEFAULT_PLOT_SIZE, ChartLayout
from linechart.errors import ChartDataError, RenderPreconditionError
from linechart.series import DataSet, NormalizedSeries


TICK_ROUNDING_STEP = 5


@dataclass(frozen=True)
class AxisBounds:
    max_x: float
    max_y: float


@dataclass(frozen=True)
class ScaleFactors:
    x_factor: float
    y_factor: float


def compute_axis_bounds(dataset: DataSet) -> AxisBounds:
    """Scan every point of every series for the axis maxima (minima are fixed at 0)."""
    if dataset.is_empty():
        raise ChartDataError("cannot compute axis bounds of an empty data set")
    max_x = -math.inf
    max_y = -math.inf
    for series in dataset:
        if float(np.min(series.x)) < 0.0 or float(np.min(series.y)) < 0.0:
            raise ChartDataError(f"series {series.name!r}: negative coordinates are not supported")
        max_x = max(max_x, float(np.max(series.x)))
        max_y = max(max_y, float(np.max(series.y)))
    return AxisBounds(max_x=max_x, max_y=max_y)


def build_scale_factors(bounds: AxisBounds, plot_width: float, plot_height: float) -> ScaleFactors:
    # x values are 1-based sample indices, so the x span is max_x - 1.
    if bounds.max_x <= 1.0:
        raise RenderPreconditionError(
            f"x axis is degenerate: max_x={bounds.max_x} leaves no span above the first sample",
            bounds=bounds,
        )
    if bounds.max_y <= 0.0:
        raise RenderPreconditionError(f"y axis is degenerate: max_y={bounds.max_y}", bounds=bounds)
    x_factor = plot_width / (bounds.max_x - 1.0)
    y_factor = plot_height / bounds.max_y
    if not (math.isfinite(x_factor) and math.isfinite(y_factor)) or x_factor <= 0 or y_factor <= 0:
        raise RenderPreconditionError(
            f"non-finite scale factors: x_factor={x_factor}, y_factor={y_factor}",
            bounds=bounds,
        )
    return ScaleFactors(x_factor=x_factor, y_factor=y_factor)


def normalize(
    dataset: DataSet,
    canvas_width: float = DEFAULT_CANVAS_SIZE[0],
    canvas_height: float = DEFAULT_CANVAS_SIZE[1],
    axis_margin: float = DEFAULT_AXIS_MARGIN,
    *,
    plot_width: float = DEFAULT_PLOT_SIZE[0],
    plot_height: float = DEFAULT_PLOT_SIZE[1],
) -> tuple[NormalizedSeries, ...]:
    """Rescale every series into canvas pixel space.

    ``screen_x = (x - 1) * x_factor + axis_margin`` and ``screen_y = y * y_factor``,
    with ``x_factor = plot_width / (max_x - 1)`` and ``y_factor = plot_height / max_y``.
    The vertical flip happens at draw time, so ``screen_y`` still grows upward.
    Raises ``RenderPreconditionError`` instead of producing non-finite points.
    """
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError("canvas width/height must be > 0")
    if plot_width <= 0 or plot_height <= 0:
        raise ValueError("plot width/height must be > 0")
    if axis_margin < 0:
        raise ValueError("axis_margin must be >= 0")
    if axis_margin + plot_width > canvas_width or plot_height > canvas_height:
        raise ValueError("plot area must fit inside the canvas")

    bounds = compute_axis_bounds(dataset)
    build_scale_factors(bounds, plot_width, plot_height)

    out: list[NormalizedSeries] = []
    for index, series in enumerate(dataset):
        # Same as multiplying by the factors, but the axis maxima land exactly on the plot edge.
        sx = (series.x - 1.0) / (bounds.max_x - 1.0) * plot_width + axis_margin
        sy = series.y / bounds.max_y * plot_height
        sx.flags.writeable = False
        sy.flags.writeable = False
        out.append(NormalizedSeries(name=series.name, series_index=index, screen_x=sx, screen_y=sy))
    return tuple(out)


def normalize_for_layout(dataset: DataSet, layout: ChartLayout) -> tuple[NormalizedSeries, ...]:
    return normalize(
        dataset,
        layout.canvas_width,
        layout.canvas_height,
        layout.axis_margin,
        plot_width=layout.plot_width,
        plot_height=layout.plot_height,
    )


def generate_floor_ticks(axis_max: float, count: int, step: int = TICK_ROUNDING_STEP) -> tuple[int, ...]:
    """Split ``[0, axis_max]`` into ``count - 1`` steps, each rounded down to a multiple of ``step``.

    Rounding is floor, not nearest, so small ranges repeat labels (``0, 0, 5, 5, ...``).
    """
    if count < 2:
        raise ValueError("count must be >= 2")
    if step <= 0:
        raise ValueError("step must be > 0")
    if not math.isfinite(axis_max) or axis_max < 0:
        raise ValueError("axis_max must be finite and >= 0")
    ticks: list[int] = []
    for i in range(count):
        value = math.floor(i * axis_max / (count - 1))
        ticks.append((value // step) * step)
    return tuple(ticks)


def scale_tick(value: float, axis_max: float, span: float) -> float:
    if axis_max <= 0:
        raise RenderPreconditionError(f"cannot place ticks on an axis with max={axis_max}")
    return value / axis_max * span


def format_coordinate(value: float) -> str:
    """Render a number the way JavaScript's ``Number.prototype.toString`` does.

    Integral values drop the ``.0``; magnitudes in ``[1e-6, 1e21)`` use plain
    decimal notation and anything else uses ``d.ddde+N`` exponent form.
    """
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0.0:
        return "0"
    sign, digit_tuple, exponent = Decimal(repr(number)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = k + exponent
    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"
    return f"-{text}" if sign else text
