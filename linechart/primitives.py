from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Union

from linechart.scales import format_coordinate


TextAnchor = Literal["start", "middle", "end"]


@dataclass(frozen=True)
class LinePath:
    """Stroked open polyline for one series, already flipped to screen-down y."""

    series_index: int
    name: str
    points: tuple[tuple[float, float], ...]
    color: str
    stroke_width: float
    style_class: str = ""

    @property
    def d(self) -> str:
        parts = []
        for i, (x, y) in enumerate(self.points):
            parts.append(f"{'M' if i == 0 else 'L'}{format_coordinate(x)},{format_coordinate(y)}")
        return " ".join(parts)


@dataclass(frozen=True)
class Marker:
    series_index: int
    point_index: int
    cx: float
    cy: float
    r: float
    color: str

    @property
    def key(self) -> str:
        return f"{self.series_index}-{self.point_index}"


@dataclass(frozen=True)
class TextLabel:
    axis: Literal["x", "y"]
    index: int
    x: float
    y: float
    text: str
    anchor: TextAnchor
    font_size: float
    color: str


@dataclass(frozen=True)
class GuideLine:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    stroke_width: float = 1.0


@dataclass(frozen=True)
class Tooltip:
    x: float
    y: float
    text: str
    color: str = "#000"
    background: str = "#FFFFFFE6"


Primitive = Union[LinePath, Marker, TextLabel, GuideLine]


@dataclass(frozen=True)
class ChartScene:
    width: int
    height: int
    lines: tuple[LinePath, ...] = ()
    markers: tuple[Marker, ...] = ()
    y_labels: tuple[TextLabel, ...] = ()
    x_labels: tuple[TextLabel, ...] = ()
    guides: tuple[GuideLine, ...] = ()
    tooltip: Tooltip | None = None
    background: str = "#FFFFFF"

    def primitives(self) -> Iterator[Primitive]:
        """Yield primitives in paint order."""
        yield from self.lines
        yield from self.markers
        yield from self.y_labels
        yield from self.x_labels
        yield from self.guides

    def line_for_series(self, series_index: int) -> LinePath | None:
        for line in self.lines:
            if line.series_index == series_index:
                return line
        return None

    def marker_at(self, series_index: int, point_index: int) -> Marker | None:
        for marker in self.markers:
            if marker.series_index == series_index and marker.point_index == point_index:
                return marker
        return None

