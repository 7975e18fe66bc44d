from __future__ import annotations

import math
import unittest

import numpy as np

from linechart.errors import ChartDataError, RenderPreconditionError
from linechart.interaction import tooltip_label
from linechart.providers import UniformSampleProvider
from linechart.scales import (
    AxisBounds,
    build_scale_factors,
    compute_axis_bounds,
    format_coordinate,
    generate_floor_ticks,
    normalize,
)
from linechart.series import DataSet, Series


def _dataset(*series: Series) -> DataSet:
    return DataSet(tuple(series))


class CoordinateMapperTests(unittest.TestCase):
    def test_single_series_maps_first_sample_onto_margin(self) -> None:
        ds = _dataset(Series.from_points("a", [(1, 10), (2, 20), (3, 30)]))
        (ns,) = normalize(ds)
        self.assertEqual(ns.name, "a")
        self.assertEqual(len(ns), 3)
        self.assertEqual(ns.screen_x.tolist(), [60.0, 360.0, 660.0])
        self.assertTrue(np.all(np.diff(ns.screen_x) > 0))
        self.assertTrue(np.all(np.diff(ns.screen_y) > 0))
        self.assertEqual(float(ns.screen_y[-1]), 200.0)

    def test_points_stay_inside_plot_area(self) -> None:
        ds = UniformSampleProvider(seed=7).load()
        out = normalize(ds, 800, 400, 60)
        self.assertEqual(len(out), len(ds))
        for source, ns in zip(ds, out):
            self.assertEqual(len(ns), len(source))
            self.assertTrue(np.all(np.isfinite(ns.screen_x)))
            self.assertTrue(np.all(np.isfinite(ns.screen_y)))
            self.assertGreaterEqual(float(np.min(ns.screen_x)), 60.0)
            self.assertLessEqual(float(np.max(ns.screen_x)), 660.0)
            self.assertGreaterEqual(float(np.min(ns.screen_y)), 0.0)
            self.assertLessEqual(float(np.max(ns.screen_y)), 200.0)

    def test_normalize_is_deterministic(self) -> None:
        ds = UniformSampleProvider(seed=3).load()
        first = normalize(ds)
        second = normalize(ds)
        for a, b in zip(first, second):
            self.assertEqual(a.name, b.name)
            self.assertTrue(np.array_equal(a.screen_x, b.screen_x))
            self.assertTrue(np.array_equal(a.screen_y, b.screen_y))

    def test_series_index_follows_insertion_order(self) -> None:
        ds = _dataset(
            Series.from_points("b", [(1, 1), (2, 2)]),
            Series.from_points("a", [(1, 3), (2, 4)]),
        )
        out = normalize(ds)
        self.assertEqual([(ns.name, ns.series_index) for ns in out], [("b", 0), ("a", 1)])

    def test_all_zero_y_is_a_render_precondition_failure(self) -> None:
        ds = _dataset(Series.from_points("flat", [(1, 0), (2, 0), (3, 0)]))
        with self.assertRaises(RenderPreconditionError) as ctx:
            normalize(ds)
        self.assertEqual(ctx.exception.bounds, AxisBounds(max_x=3.0, max_y=0.0))

    def test_single_sample_is_a_render_precondition_failure(self) -> None:
        ds = _dataset(Series.from_points("one", [(1, 5)]))
        with self.assertRaises(RenderPreconditionError):
            normalize(ds)

    def test_empty_dataset_is_rejected(self) -> None:
        with self.assertRaises(ChartDataError):
            normalize(DataSet())

    def test_negative_coordinates_are_rejected(self) -> None:
        ds = _dataset(Series.from_points("neg", [(1, 5), (2, -1)]))
        with self.assertRaises(ChartDataError):
            normalize(ds)

    def test_invalid_canvas_is_rejected(self) -> None:
        ds = _dataset(Series.from_points("a", [(1, 1), (2, 2)]))
        with self.assertRaises(ValueError):
            normalize(ds, 0, 400, 60)
        with self.assertRaises(ValueError):
            normalize(ds, 500, 400, 60)

    def test_axis_bounds_cover_every_series(self) -> None:
        ds = _dataset(
            Series.from_points("a", [(1, 10), (4, 2)]),
            Series.from_points("b", [(1, 90), (2, 0)]),
        )
        self.assertEqual(compute_axis_bounds(ds), AxisBounds(max_x=4.0, max_y=90.0))

    def test_scale_factors(self) -> None:
        factors = build_scale_factors(AxisBounds(max_x=25.0, max_y=100.0), 600, 200)
        self.assertAlmostEqual(factors.x_factor, 25.0)
        self.assertAlmostEqual(factors.y_factor, 2.0)


class TickTests(unittest.TestCase):
    def test_y_ticks_are_non_decreasing_multiples_of_five(self) -> None:
        ticks = generate_floor_ticks(90, 10)
        self.assertEqual(len(ticks), 10)
        self.assertEqual(ticks, (0, 10, 20, 30, 40, 50, 60, 70, 80, 90))
        self.assertTrue(all(t % 5 == 0 for t in ticks))
        self.assertTrue(all(a <= b for a, b in zip(ticks, ticks[1:])))

    def test_small_range_repeats_labels(self) -> None:
        self.assertEqual(generate_floor_ticks(12, 10), (0, 0, 0, 0, 5, 5, 5, 5, 10, 10))

    def test_x_ticks_for_default_sample_count(self) -> None:
        ticks = generate_floor_ticks(25, 25)
        self.assertEqual(len(ticks), 25)
        self.assertEqual(ticks[:6], (0, 0, 0, 0, 0, 5))
        self.assertEqual(ticks[-1], 25)

    def test_rounds_down_not_to_nearest(self) -> None:
        self.assertEqual(generate_floor_ticks(9, 2), (0, 5))

    def test_invalid_tick_arguments(self) -> None:
        with self.assertRaises(ValueError):
            generate_floor_ticks(90, 1)
        with self.assertRaises(ValueError):
            generate_floor_ticks(math.nan, 10)


class FormatCoordinateTests(unittest.TestCase):
    def test_integral_values_drop_decimal_suffix(self) -> None:
        self.assertEqual(format_coordinate(60.0), "60")
        self.assertEqual(format_coordinate(0.0), "0")

    def test_fractional_values_use_shortest_repr(self) -> None:
        self.assertEqual(format_coordinate(85.5), "85.5")
        self.assertEqual(format_coordinate(200 / 3), "66.66666666666667")

    def test_small_and_large_magnitudes_follow_javascript_notation(self) -> None:
        self.assertEqual(format_coordinate(2e-05), "0.00002")
        self.assertEqual(format_coordinate(1e-06), "0.000001")
        self.assertEqual(format_coordinate(1.5e-07), "1.5e-7")
        self.assertEqual(format_coordinate(-0.000125), "-0.000125")
        self.assertEqual(format_coordinate(1e21), "1e+21")
        self.assertEqual(format_coordinate(123456789012.5), "123456789012.5")
        self.assertEqual(format_coordinate(float("inf")), "Infinity")
        self.assertEqual(format_coordinate(-0.0), "0")

    def test_tooltip_label_uses_plain_notation(self) -> None:
        self.assertEqual(tooltip_label(60.0, 2e-05), "x: 60, y: 0.00002")


if __name__ == "__main__":
    unittest.main()
