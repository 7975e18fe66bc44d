from __future__ import annotations

import logging
from typing import Mapping

from linechart.config import ChartLayout, ChartStyle
from linechart.errors import ChartError
from linechart.hit_test import hit_test
from linechart.interaction import (
    ChartEvent,
    InteractionState,
    MarkerEnter,
    MarkerLeave,
    SeriesClick,
    apply_event,
    parse_pointer_event,
    reconcile_state,
)
from linechart.primitives import ChartScene
from linechart.renderer import render_chart
from linechart.scales import AxisBounds, compute_axis_bounds, normalize_for_layout
from linechart.series import DataSet, NormalizedSeries


LOGGER = logging.getLogger(__name__)


class ChartController:
    """Owns the interaction state for one chart and re-renders synchronously on every change."""

    def __init__(
        self,
        dataset: DataSet | None = None,
        *,
        layout: ChartLayout | None = None,
        style: ChartStyle | None = None,
    ) -> None:
        self._layout = layout or ChartLayout()
        self._style = style or ChartStyle()
        self._dataset = dataset if dataset is not None else DataSet()
        self._state = InteractionState()
        self._normalized: tuple[NormalizedSeries, ...] = ()
        self._bounds: AxisBounds | None = None
        self._last_scene: ChartScene | None = None

    @property
    def layout(self) -> ChartLayout:
        return self._layout

    @property
    def style(self) -> ChartStyle:
        return self._style

    @property
    def dataset(self) -> DataSet:
        return self._dataset

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def normalized(self) -> tuple[NormalizedSeries, ...]:
        return self._normalized

    @property
    def bounds(self) -> AxisBounds | None:
        return self._bounds

    @property
    def last_scene(self) -> ChartScene | None:
        return self._last_scene

    def load(self, dataset: DataSet) -> ChartScene:
        """Full data refresh: replace the data set, reset interaction state and render."""
        LOGGER.debug("loading data set with %d series: %s", len(dataset), ", ".join(dataset.names))
        self._dataset = dataset
        self._state = InteractionState()
        return self.render()

    def render(self) -> ChartScene:
        if self._dataset.is_empty():
            self._bounds = None
            self._normalized = ()
        else:
            try:
                bounds = compute_axis_bounds(self._dataset)
                normalized = normalize_for_layout(self._dataset, self._layout)
            except ChartError as exc:
                LOGGER.warning("chart render precondition failed: %s", exc)
                self._bounds = None
                self._normalized = ()
                self._last_scene = None
                raise
            self._bounds = bounds
            self._normalized = normalized
        reconciled = reconcile_state(self._state, self._normalized)
        if reconciled is not self._state:
            LOGGER.debug("cleared stale interaction state: %s -> %s", self._state, reconciled)
            self._state = reconciled
        self._last_scene = render_chart(
            self._normalized,
            self._state,
            bounds=self._bounds,
            layout=self._layout,
            style=self._style,
        )
        return self._last_scene

    def dispatch(self, event: ChartEvent) -> ChartScene:
        if self._last_scene is None:
            self.render()
        updated = apply_event(self._state, event, self._normalized)
        if updated is not self._state:
            LOGGER.debug("interaction %s: %s -> %s", type(event).__name__, self._state, updated)
        self._state = updated
        return self.render()

    def click_series(self, series_index: int) -> ChartScene:
        return self.dispatch(SeriesClick(series_index=series_index))

    def pointer_enter(self, series_index: int, point_index: int, pointer_x: float, pointer_y: float) -> ChartScene:
        return self.dispatch(
            MarkerEnter(series_index=series_index, point_index=point_index, pointer_x=pointer_x, pointer_y=pointer_y)
        )

    def pointer_leave(self, series_index: int, point_index: int) -> ChartScene:
        return self.dispatch(MarkerLeave(series_index=series_index, point_index=point_index))

    def handle_payload(self, event_type: str, payload: Mapping[str, object]) -> ChartScene | None:
        event = parse_pointer_event(event_type, payload)
        if event is None:
            LOGGER.debug("ignored pointer payload %s: %r", event_type, payload)
            return None
        return self.dispatch(event)

    def pointer_move(self, x: float, y: float) -> ChartScene:
        """Translate a raw pointer position into marker enter/leave events."""
        scene = self._last_scene or self.render()
        target = hit_test(scene, x, y)
        hovered = self._state.hovered_point
        over_marker = target is not None and target.kind == "marker"
        if hovered is not None:
            same = over_marker and (target.series_index, target.point_index) == (hovered.series_index, hovered.point_index)
            if same:
                return scene
            scene = self.pointer_leave(hovered.series_index, hovered.point_index)
        if over_marker:
            assert target is not None and target.point_index is not None
            scene = self.pointer_enter(target.series_index, target.point_index, x, y)
        return scene

    def pointer_down(self, x: float, y: float) -> ChartScene:
        """Select the series whose line or marker lies under the pointer."""
        scene = self._last_scene or self.render()
        target = hit_test(scene, x, y)
        if target is None:
            return scene
        return self.click_series(target.series_index)
