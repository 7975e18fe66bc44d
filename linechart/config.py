from __future__ import annotations

from dataclasses import dataclass


DEFAULT_CANVAS_SIZE = (800, 400)
DEFAULT_PLOT_SIZE = (600, 200)
DEFAULT_AXIS_MARGIN = 60.0
DEFAULT_PALETTE = ("#FF5733", "#4287f5", "#A9A9A9")

Y_TICK_COUNT = 10
X_TICK_COUNT = 25


@dataclass(frozen=True)
class ChartLayout:
    """Fixed geometry of the chart surface, in drawing units."""

    canvas_width: int = DEFAULT_CANVAS_SIZE[0]
    canvas_height: int = DEFAULT_CANVAS_SIZE[1]
    plot_width: float = DEFAULT_PLOT_SIZE[0]
    plot_height: float = DEFAULT_PLOT_SIZE[1]
    axis_margin: float = DEFAULT_AXIS_MARGIN
    # Guide lines and tick labels sit on their own offsets, independent of the plot area.
    guide_x: float = 30.0
    guide_top: float = -100.0
    guide_right: float = 700.0
    y_label_x: float = 20.0
    y_label_span: float = 260.0
    x_label_y: float = 220.0
    x_label_span: float = 660.0
    x_label_offset: float = 30.0
    y_tick_count: int = Y_TICK_COUNT
    x_tick_count: int = X_TICK_COUNT
    tooltip_offset: tuple[float, float] = (10.0, -30.0)

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas width/height must be > 0")
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise ValueError("plot width/height must be > 0")
        if self.axis_margin < 0:
            raise ValueError("axis_margin must be >= 0")
        if self.axis_margin + self.plot_width > self.canvas_width or self.plot_height > self.canvas_height:
            raise ValueError("plot area must fit inside the canvas")
        if self.y_tick_count < 2 or self.x_tick_count < 2:
            raise ValueError("tick counts must be >= 2")


@dataclass(frozen=True)
class ChartStyle:
    palette: tuple[str, ...] = DEFAULT_PALETTE
    line_width: float = 2.0
    active_line_width: float = 3.0
    active_class: str = "active"
    marker_radius: float = 6.0
    hovered_marker_radius: float = 8.0
    font_size: float = 12.0
    text_color: str = "#000"
    guide_color: str = "#000"
    background: str = "#FFFFFF"
    tooltip_text_color: str = "#000"
    tooltip_background: str = "#FFFFFFE6"

    def __post_init__(self) -> None:
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        if self.line_width <= 0 or self.active_line_width <= 0:
            raise ValueError("line widths must be > 0")
        if self.marker_radius <= 0 or self.hovered_marker_radius <= 0:
            raise ValueError("marker radii must be > 0")
        if self.font_size <= 0:
            raise ValueError("font_size must be > 0")

    def series_color(self, series_index: int) -> str:
        # Positional: reordering the data set reassigns colors.
        return self.palette[series_index % len(self.palette)]
