from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from linechart.scales import format_coordinate
from linechart.series import NormalizedSeries


@dataclass(frozen=True)
class HoveredPoint:
    """Pointer position and tooltip text for the marker under the pointer."""

    screen_x: float
    screen_y: float
    label: str
    series_index: int
    point_index: int


@dataclass(frozen=True)
class InteractionState:
    # Selection and hover are tracked independently.
    active_series_index: int | None = None
    hovered_point: HoveredPoint | None = None

    def __post_init__(self) -> None:
        if self.active_series_index is not None and self.active_series_index < 0:
            raise ValueError("active_series_index must be >= 0")


@dataclass(frozen=True)
class SeriesClick:
    series_index: int


@dataclass(frozen=True)
class MarkerEnter:
    series_index: int
    point_index: int
    pointer_x: float
    pointer_y: float


@dataclass(frozen=True)
class MarkerLeave:
    series_index: int
    point_index: int


ChartEvent = Union[SeriesClick, MarkerEnter, MarkerLeave]


def tooltip_label(screen_x: float, screen_y: float) -> str:
    """Tooltip text shows normalized screen coordinates, not data values."""
    return f"x: {format_coordinate(screen_x)}, y: {format_coordinate(screen_y)}"


def apply_event(
    state: InteractionState,
    event: ChartEvent,
    normalized: Sequence[NormalizedSeries],
) -> InteractionState:
    """Return the state that follows ``event``; targets outside ``normalized`` are ignored."""
    if isinstance(event, SeriesClick):
        if not 0 <= event.series_index < len(normalized):
            return state
        # Re-clicking the active series keeps it selected.
        return dataclasses.replace(state, active_series_index=event.series_index)

    if isinstance(event, MarkerEnter):
        if not _valid_point(normalized, event.series_index, event.point_index):
            return state
        point = normalized[event.series_index].point(event.point_index)
        hovered = HoveredPoint(
            screen_x=event.pointer_x,
            screen_y=event.pointer_y,
            label=tooltip_label(point.x, point.y),
            series_index=event.series_index,
            point_index=event.point_index,
        )
        return dataclasses.replace(state, hovered_point=hovered)

    if isinstance(event, MarkerLeave):
        if state.hovered_point is None:
            return state
        return dataclasses.replace(state, hovered_point=None)

    raise TypeError(f"unsupported chart event: {type(event)!r}")


def reconcile_state(state: InteractionState, normalized: Sequence[NormalizedSeries]) -> InteractionState:
    """Drop selection or hover targets that no longer exist in the current data."""
    active = state.active_series_index
    if active is not None and active >= len(normalized):
        active = None
    hovered = state.hovered_point
    if hovered is not None and not _valid_point(normalized, hovered.series_index, hovered.point_index):
        hovered = None
    if active == state.active_series_index and hovered is state.hovered_point:
        return state
    return InteractionState(active_series_index=active, hovered_point=hovered)


def marker_radius(
    state: InteractionState,
    series_index: int,
    point_index: int,
    *,
    base: float = 6.0,
    hovered: float = 8.0,
) -> float:
    hp = state.hovered_point
    if hp is not None and hp.series_index == series_index and hp.point_index == point_index:
        return hovered
    return base


def parse_pointer_event(event_type: str, payload: object) -> ChartEvent | None:
    """Parse a loosely typed pointer payload into a chart event.

    Recognized types are ``click``, ``pointer_enter`` and ``pointer_leave``.
    Anything malformed yields ``None`` rather than raising.
    """
    if not isinstance(payload, Mapping):
        return None
    series_index = _as_index(payload.get("series_index"))
    if series_index is None:
        return None
    if event_type == "click":
        return SeriesClick(series_index=series_index)

    point_index = _as_index(payload.get("point_index"))
    if point_index is None:
        return None
    if event_type == "pointer_leave":
        return MarkerLeave(series_index=series_index, point_index=point_index)
    if event_type == "pointer_enter":
        try:
            x = float(payload.get("x"))  # type: ignore[arg-type]
            y = float(payload.get("y"))  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        return MarkerEnter(series_index=series_index, point_index=point_index, pointer_x=x, pointer_y=y)
    return None


def _as_index(raw: object) -> int | None:
    if isinstance(raw, bool) or not isinstance(raw, int):
        return None
    if raw < 0:
        return None
    return raw


def _valid_point(normalized: Sequence[NormalizedSeries], series_index: int, point_index: int) -> bool:
    if not 0 <= series_index < len(normalized):
        return False
    return 0 <= point_index < len(normalized[series_index])
