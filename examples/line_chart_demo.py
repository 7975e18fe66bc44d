from __future__ import annotations

from pathlib import Path

from linechart import UniformSampleProvider, line_chart
from linechart.export import write_svg
from linechart.raster import write_png


def main() -> None:
    out_dir = Path(__file__).resolve().parent / "out"
    out_dir.mkdir(parents=True, exist_ok=True)

    chart = line_chart(provider=UniformSampleProvider(seed=2024))
    default_scene = chart.last_scene
    assert default_scene is not None

    # Select the second series, then hover its tenth sample.
    chart.click_series(1)
    marker = chart.last_scene.marker_at(1, 9)  # type: ignore[union-attr]
    assert marker is not None
    hovered_scene = chart.pointer_move(marker.cx, marker.cy)

    paths = [
        write_svg(default_scene, out_dir / "line_chart_default.svg"),
        write_png(default_scene, out_dir / "line_chart_default.png"),
        write_svg(hovered_scene, out_dir / "line_chart_hovered.svg"),
        write_png(hovered_scene, out_dir / "line_chart_hovered.png"),
    ]
    for path in paths:
        print(f"wrote {path}")


if __name__ == "__main__":
    main()
