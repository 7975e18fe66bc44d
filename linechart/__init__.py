from linechart.api import line_chart
from linechart.config import ChartLayout, ChartStyle
from linechart.controller import ChartController
from linechart.errors import ChartDataError, ChartError, RenderPreconditionError
from linechart.interaction import HoveredPoint, InteractionState, MarkerEnter, MarkerLeave, SeriesClick
from linechart.primitives import ChartScene
from linechart.providers import DataSetProvider, StaticDataSetProvider, UniformSampleProvider
from linechart.scales import AxisBounds, compute_axis_bounds, normalize
from linechart.series import DataSet, NormalizedSeries, Point, Series

__all__ = [
    "AxisBounds",
    "ChartController",
    "ChartDataError",
    "ChartError",
    "ChartLayout",
    "ChartScene",
    "ChartStyle",
    "DataSet",
    "DataSetProvider",
    "HoveredPoint",
    "InteractionState",
    "MarkerEnter",
    "MarkerLeave",
    "NormalizedSeries",
    "Point",
    "RenderPreconditionError",
    "Series",
    "SeriesClick",
    "StaticDataSetProvider",
    "UniformSampleProvider",
    "compute_axis_bounds",
    "line_chart",
    "normalize",
]
