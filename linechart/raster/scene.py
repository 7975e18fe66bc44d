from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from linechart.primitives import ChartScene
from linechart.raster.canvas import draw_hline, draw_vline, new_canvas, parse_hex_color
from linechart.raster.draw_lines import draw_polyline
from linechart.raster.draw_markers import draw_circle
from linechart.raster.draw_text import draw_text


def rasterize_scene(scene: ChartScene) -> np.ndarray:
    """Paint ``scene`` into an ``(H, W, 4)`` uint8 RGBA array; off-canvas geometry is clipped."""
    canvas = new_canvas(scene.width, scene.height, parse_hex_color(scene.background))
    for line in scene.lines:
        draw_polyline(canvas, line.points, parse_hex_color(line.color), width=line.stroke_width)
    for marker in scene.markers:
        draw_circle(canvas, marker.cx, marker.cy, marker.r, parse_hex_color(marker.color))
    for label in scene.y_labels + scene.x_labels:
        draw_text(
            canvas,
            label.x,
            label.y,
            label.text,
            parse_hex_color(label.color),
            anchor=label.anchor,
            font_size_px=label.font_size,
        )
    for guide in scene.guides:
        color = parse_hex_color(guide.color)
        if guide.x1 == guide.x2:
            draw_vline(canvas, int(round(guide.x1)), int(round(guide.y1)), int(round(guide.y2)), color)
        elif guide.y1 == guide.y2:
            draw_hline(canvas, int(round(guide.x1)), int(round(guide.x2)), int(round(guide.y1)), color)
        else:
            draw_polyline(canvas, ((guide.x1, guide.y1), (guide.x2, guide.y2)), color, width=guide.stroke_width)
    if scene.tooltip is not None:
        draw_text(
            canvas,
            scene.tooltip.x,
            scene.tooltip.y,
            scene.tooltip.text,
            parse_hex_color(scene.tooltip.color),
            background_color=parse_hex_color(scene.tooltip.background),
            padding=4,
        )
    return canvas


def write_png(scene: ChartScene, path: Path | str) -> Path:
    out = Path(path)
    Image.fromarray(rasterize_scene(scene)).save(out, format="PNG")
    return out
