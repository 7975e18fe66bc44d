from __future__ import annotations

from typing import Any

from linechart.adapters import coerce_dataset
from linechart.config import ChartLayout, ChartStyle
from linechart.controller import ChartController
from linechart.providers import DataSetProvider


def line_chart(
    data: Any = None,
    *,
    provider: DataSetProvider | None = None,
    layout: ChartLayout | None = None,
    style: ChartStyle | None = None,
) -> ChartController:
    """Create a controller and run the first render from ``data`` or ``provider``."""
    if data is not None and provider is not None:
        raise ValueError("pass either data or provider, not both")
    controller = ChartController(layout=layout, style=style)
    if provider is not None:
        controller.load(provider.load())
    elif data is not None:
        controller.load(coerce_dataset(data))
    else:
        controller.render()
    return controller
