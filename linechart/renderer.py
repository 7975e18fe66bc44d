from __future__ import annotations

from typing import Sequence

from linechart.config import ChartLayout, ChartStyle
from linechart.interaction import InteractionState, marker_radius
from linechart.primitives import ChartScene, GuideLine, LinePath, Marker, TextLabel, Tooltip
from linechart.scales import AxisBounds, generate_floor_ticks, scale_tick
from linechart.series import NormalizedSeries


def render_chart(
    normalized: Sequence[NormalizedSeries],
    state: InteractionState,
    *,
    bounds: AxisBounds | None,
    layout: ChartLayout | None = None,
    style: ChartStyle | None = None,
) -> ChartScene:
    """Build the draw primitives for one render cycle.

    An empty ``normalized`` sequence renders only the two guide lines.
    """
    lay = layout or ChartLayout()
    sty = style or ChartStyle()
    guides = build_guide_lines(lay, sty)
    if not normalized:
        return ChartScene(width=lay.canvas_width, height=lay.canvas_height, guides=guides, background=sty.background)
    if bounds is None:
        raise ValueError("bounds are required when rendering series")

    lines = promote_active_line(build_line_paths(normalized, state, lay, sty), state.active_series_index)
    return ChartScene(
        width=lay.canvas_width,
        height=lay.canvas_height,
        lines=lines,
        markers=build_markers(normalized, state, lay, sty),
        y_labels=build_y_labels(bounds, lay, sty),
        x_labels=build_x_labels(bounds, lay, sty),
        guides=guides,
        tooltip=build_tooltip(state, lay, sty),
        background=sty.background,
    )


def build_line_paths(
    normalized: Sequence[NormalizedSeries],
    state: InteractionState,
    layout: ChartLayout,
    style: ChartStyle,
) -> tuple[LinePath, ...]:
    out: list[LinePath] = []
    for ns in normalized:
        active = state.active_series_index == ns.series_index
        points = tuple((x, layout.plot_height - y) for x, y in ns.points())
        out.append(
            LinePath(
                series_index=ns.series_index,
                name=ns.name,
                points=points,
                color=style.series_color(ns.series_index),
                stroke_width=style.active_line_width if active else style.line_width,
                style_class=style.active_class if active else "",
            )
        )
    return tuple(out)


def promote_active_line(lines: Sequence[LinePath], active_series_index: int | None) -> tuple[LinePath, ...]:
    """Move the active series' line to the end of the paint order, keeping the rest in place."""
    if active_series_index is None:
        return tuple(lines)
    rest = [line for line in lines if line.series_index != active_series_index]
    promoted = [line for line in lines if line.series_index == active_series_index]
    return tuple(rest + promoted)


def build_markers(
    normalized: Sequence[NormalizedSeries],
    state: InteractionState,
    layout: ChartLayout,
    style: ChartStyle,
) -> tuple[Marker, ...]:
    out: list[Marker] = []
    for ns in normalized:
        color = style.series_color(ns.series_index)
        for point_index, (x, y) in enumerate(ns.points()):
            out.append(
                Marker(
                    series_index=ns.series_index,
                    point_index=point_index,
                    cx=x,
                    cy=layout.plot_height - y,
                    r=marker_radius(
                        state,
                        ns.series_index,
                        point_index,
                        base=style.marker_radius,
                        hovered=style.hovered_marker_radius,
                    ),
                    color=color,
                )
            )
    return tuple(out)


def build_y_labels(bounds: AxisBounds, layout: ChartLayout, style: ChartStyle) -> tuple[TextLabel, ...]:
    ticks = generate_floor_ticks(bounds.max_y, layout.y_tick_count)
    return tuple(
        TextLabel(
            axis="y",
            index=i,
            x=layout.y_label_x,
            y=layout.plot_height - scale_tick(value, bounds.max_y, layout.y_label_span),
            text=str(value),
            anchor="end",
            font_size=style.font_size,
            color=style.text_color,
        )
        for i, value in enumerate(ticks)
    )


def build_x_labels(bounds: AxisBounds, layout: ChartLayout, style: ChartStyle) -> tuple[TextLabel, ...]:
    ticks = generate_floor_ticks(bounds.max_x, layout.x_tick_count)
    return tuple(
        TextLabel(
            axis="x",
            index=i,
            x=scale_tick(value, bounds.max_x, layout.x_label_span) + layout.x_label_offset,
            y=layout.x_label_y,
            text=str(value),
            anchor="middle",
            font_size=style.font_size,
            color=style.text_color,
        )
        for i, value in enumerate(ticks)
    )


def build_guide_lines(layout: ChartLayout, style: ChartStyle) -> tuple[GuideLine, GuideLine]:
    vertical = GuideLine(
        x1=layout.guide_x,
        y1=layout.guide_top,
        x2=layout.guide_x,
        y2=layout.plot_height,
        color=style.guide_color,
    )
    horizontal = GuideLine(
        x1=layout.guide_x,
        y1=layout.plot_height,
        x2=layout.guide_right,
        y2=layout.plot_height,
        color=style.guide_color,
    )
    return (vertical, horizontal)


def build_tooltip(state: InteractionState, layout: ChartLayout, style: ChartStyle | None = None) -> Tooltip | None:
    hovered = state.hovered_point
    if hovered is None:
        return None
    dx, dy = layout.tooltip_offset
    sty = style or ChartStyle()
    return Tooltip(
        x=hovered.screen_x + dx,
        y=hovered.screen_y + dy,
        text=hovered.label,
        color=sty.tooltip_text_color,
        background=sty.tooltip_background,
    )
