from __future__ import annotations

import unittest

from linechart.config import ChartLayout, ChartStyle
from linechart.interaction import HoveredPoint, InteractionState
from linechart.primitives import GuideLine, LinePath
from linechart.renderer import promote_active_line, render_chart
from linechart.scales import compute_axis_bounds, normalize
from linechart.series import DataSet, Series


def _scene_inputs(n_series: int = 2):
    ds = DataSet(
        tuple(
            Series.from_points(f"set{i + 1}", [(1, 10 + i), (2, 20 + i), (3, 30 + i)])
            for i in range(n_series)
        )
    )
    return normalize(ds), compute_axis_bounds(ds)


class ChartRendererTests(unittest.TestCase):
    def test_one_line_per_series_with_flipped_y(self) -> None:
        normalized, bounds = _scene_inputs(1)
        scene = render_chart(normalized, InteractionState(), bounds=bounds)
        self.assertEqual(len(scene.lines), 1)
        line = scene.lines[0]
        self.assertEqual(len(line.points), 3)
        self.assertEqual(line.points[-1], (660.0, 0.0))
        self.assertTrue(line.d.startswith("M60,"))
        self.assertIn(" L360,", line.d)
        self.assertIn(" L660,0", line.d)
        self.assertEqual(line.d.count("L"), 2)

    def test_active_series_is_painted_last(self) -> None:
        normalized, bounds = _scene_inputs(2)
        scene = render_chart(normalized, InteractionState(active_series_index=0), bounds=bounds)
        self.assertEqual([line.series_index for line in scene.lines], [1, 0])

        scene = render_chart(normalized, InteractionState(active_series_index=1), bounds=bounds)
        self.assertEqual(scene.lines[-1].series_index, 1)

    def test_promotion_keeps_relative_order_of_other_lines(self) -> None:
        normalized, bounds = _scene_inputs(4)
        scene = render_chart(normalized, InteractionState(active_series_index=1), bounds=bounds)
        self.assertEqual([line.series_index for line in scene.lines], [0, 2, 3, 1])

    def test_promote_active_line_is_pure(self) -> None:
        lines = [
            LinePath(series_index=i, name=f"s{i}", points=((0.0, 0.0), (1.0, 1.0)), color="#000", stroke_width=2)
            for i in range(3)
        ]
        promoted = promote_active_line(lines, 0)
        self.assertEqual([line.series_index for line in promoted], [1, 2, 0])
        self.assertEqual([line.series_index for line in lines], [0, 1, 2])
        self.assertEqual(promote_active_line(lines, None), tuple(lines))

    def test_active_line_styling(self) -> None:
        normalized, bounds = _scene_inputs(3)
        scene = render_chart(normalized, InteractionState(active_series_index=2), bounds=bounds)
        active = scene.line_for_series(2)
        other = scene.line_for_series(0)
        assert active is not None and other is not None
        self.assertEqual(active.stroke_width, 3.0)
        self.assertEqual(active.style_class, "active")
        self.assertEqual(other.stroke_width, 2.0)
        self.assertEqual(other.style_class, "")
        self.assertEqual(active.color, "#A9A9A9")

    def test_colors_follow_position_and_wrap_palette(self) -> None:
        normalized, bounds = _scene_inputs(4)
        scene = render_chart(normalized, InteractionState(), bounds=bounds)
        self.assertEqual(
            [line.color for line in scene.lines],
            ["#FF5733", "#4287f5", "#A9A9A9", "#FF5733"],
        )

    def test_markers_are_flattened_and_not_reordered(self) -> None:
        normalized, bounds = _scene_inputs(2)
        scene = render_chart(normalized, InteractionState(active_series_index=0), bounds=bounds)
        self.assertEqual(len(scene.markers), 6)
        self.assertEqual(
            [(m.series_index, m.point_index) for m in scene.markers],
            [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)],
        )
        self.assertTrue(all(m.r == 6.0 for m in scene.markers))

    def test_hovered_marker_is_enlarged(self) -> None:
        normalized, bounds = _scene_inputs(2)
        hovered = HoveredPoint(screen_x=100.0, screen_y=50.0, label="x: 1, y: 2", series_index=1, point_index=2)
        scene = render_chart(normalized, InteractionState(hovered_point=hovered), bounds=bounds)
        marker = scene.marker_at(1, 2)
        assert marker is not None
        self.assertEqual(marker.r, 8.0)
        self.assertEqual(sum(1 for m in scene.markers if m.r == 8.0), 1)
        assert scene.tooltip is not None
        self.assertEqual((scene.tooltip.x, scene.tooltip.y), (110.0, 20.0))
        self.assertEqual(scene.tooltip.text, "x: 1, y: 2")
        self.assertEqual((scene.tooltip.color, scene.tooltip.background), ("#000", "#FFFFFFE6"))

    def test_tooltip_colors_come_from_style(self) -> None:
        normalized, bounds = _scene_inputs(1)
        hovered = HoveredPoint(screen_x=100.0, screen_y=50.0, label="x: 1, y: 2", series_index=0, point_index=0)
        style = ChartStyle(tooltip_text_color="#FFFFFF", tooltip_background="#222222")
        scene = render_chart(normalized, InteractionState(hovered_point=hovered), bounds=bounds, style=style)
        assert scene.tooltip is not None
        self.assertEqual((scene.tooltip.color, scene.tooltip.background), ("#FFFFFF", "#222222"))

    def test_tick_labels(self) -> None:
        normalized, bounds = _scene_inputs(1)
        scene = render_chart(normalized, InteractionState(), bounds=bounds)
        self.assertEqual(len(scene.y_labels), 10)
        self.assertEqual(len(scene.x_labels), 25)
        self.assertEqual(
            [label.text for label in scene.y_labels],
            ["0", "0", "5", "10", "10", "15", "20", "20", "25", "30"],
        )
        top = scene.y_labels[-1]
        self.assertEqual((top.x, top.y, top.anchor), (20.0, -60.0, "end"))
        # max_x == 3 rounds every x label down to 0.
        self.assertTrue(all(label.text == "0" for label in scene.x_labels))
        self.assertTrue(all((label.x, label.y) == (30.0, 220.0) for label in scene.x_labels))
        self.assertTrue(all(label.anchor == "middle" for label in scene.x_labels))
        self.assertTrue(all(label.font_size == 12.0 for label in scene.y_labels + scene.x_labels))

    def test_empty_dataset_renders_only_guides(self) -> None:
        scene = render_chart((), InteractionState(), bounds=None)
        primitives = list(scene.primitives())
        self.assertEqual(len(primitives), 2)
        self.assertTrue(all(isinstance(p, GuideLine) for p in primitives))
        vertical, horizontal = scene.guides
        self.assertEqual((vertical.x1, vertical.y1, vertical.x2, vertical.y2), (30.0, -100.0, 30.0, 200.0))
        self.assertEqual((horizontal.x1, horizontal.y1, horizontal.x2, horizontal.y2), (30.0, 200.0, 700.0, 200.0))
        self.assertIsNone(scene.tooltip)

    def test_series_without_bounds_is_rejected(self) -> None:
        normalized, _ = _scene_inputs(1)
        with self.assertRaises(ValueError):
            render_chart(normalized, InteractionState(), bounds=None)

    def test_custom_style_and_layout(self) -> None:
        normalized, bounds = _scene_inputs(2)
        style = ChartStyle(palette=("#111111",), marker_radius=4.0)
        layout = ChartLayout(y_tick_count=5, x_tick_count=3)
        scene = render_chart(normalized, InteractionState(), bounds=bounds, layout=layout, style=style)
        self.assertEqual({line.color for line in scene.lines}, {"#111111"})
        self.assertTrue(all(m.r == 4.0 for m in scene.markers))
        self.assertEqual((len(scene.y_labels), len(scene.x_labels)), (5, 3))


class ConfigTests(unittest.TestCase):
    def test_layout_validation(self) -> None:
        with self.assertRaises(ValueError):
            ChartLayout(canvas_width=0)
        with self.assertRaises(ValueError):
            ChartLayout(plot_width=900)
        with self.assertRaises(ValueError):
            ChartLayout(y_tick_count=1)

    def test_style_validation(self) -> None:
        with self.assertRaises(ValueError):
            ChartStyle(palette=())
        with self.assertRaises(ValueError):
            ChartStyle(marker_radius=0)


if __name__ == "__main__":
    unittest.main()
