from .canvas import draw_hline, draw_vline, fill_rect, new_canvas, parse_hex_color
from .draw_lines import draw_polyline
from .draw_markers import draw_circle
from .draw_text import draw_text, text_size
from .scene import rasterize_scene, write_png

__all__ = [
    "draw_circle",
    "draw_hline",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "fill_rect",
    "new_canvas",
    "parse_hex_color",
    "rasterize_scene",
    "text_size",
    "write_png",
]
