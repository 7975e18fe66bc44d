from __future__ import annotations

from pathlib import Path
import xml.etree.ElementTree as ET

from linechart.primitives import ChartScene
from linechart.scales import format_coordinate


SVG_NS = "http://www.w3.org/2000/svg"


def scene_to_element(scene: ChartScene) -> ET.Element:
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": str(scene.width),
            "height": str(scene.height),
            "viewBox": f"0 0 {scene.width} {scene.height}",
            "style": "overflow: visible",
        },
    )
    for line in scene.lines:
        attrs = {
            "d": line.d,
            "fill": "none",
            "stroke": line.color,
            "stroke-width": format_coordinate(line.stroke_width),
            "data-series": str(line.series_index),
            "data-name": line.name,
        }
        if line.style_class:
            attrs["class"] = line.style_class
        ET.SubElement(root, "path", attrs)
    for marker in scene.markers:
        ET.SubElement(
            root,
            "circle",
            {
                "cx": format_coordinate(marker.cx),
                "cy": format_coordinate(marker.cy),
                "r": format_coordinate(marker.r),
                "fill": marker.color,
                "data-series": str(marker.series_index),
                "data-point": str(marker.point_index),
            },
        )
    for label in scene.y_labels + scene.x_labels:
        text = ET.SubElement(
            root,
            "text",
            {
                "x": format_coordinate(label.x),
                "y": format_coordinate(label.y),
                "fill": label.color,
                "font-size": format_coordinate(label.font_size),
                "text-anchor": label.anchor,
            },
        )
        text.text = label.text
    for guide in scene.guides:
        ET.SubElement(
            root,
            "line",
            {
                "x1": format_coordinate(guide.x1),
                "y1": format_coordinate(guide.y1),
                "x2": format_coordinate(guide.x2),
                "y2": format_coordinate(guide.y2),
                "stroke": guide.color,
                "stroke-width": format_coordinate(guide.stroke_width),
            },
        )
    if scene.tooltip is not None:
        group = ET.SubElement(root, "g", {"class": "tooltip active"})
        text = ET.SubElement(
            group,
            "text",
            {
                "x": format_coordinate(scene.tooltip.x),
                "y": format_coordinate(scene.tooltip.y),
                "fill": scene.tooltip.color,
            },
        )
        text.text = scene.tooltip.text
    return root


def scene_to_svg(scene: ChartScene) -> str:
    return ET.tostring(scene_to_element(scene), encoding="unicode")


def write_svg(scene: ChartScene, path: Path | str) -> Path:
    out = Path(path)
    out.write_text(scene_to_svg(scene), encoding="utf-8")
    return out
