from __future__ import annotations

import numpy as np

from linechart.raster.canvas import RGBA


def draw_circle(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA) -> None:
    """Fill a disc of ``radius`` centred at ``(cx, cy)``, clipped to the canvas."""
    if radius <= 0:
        return
    h, w = dst.shape[0], dst.shape[1]
    x0 = max(0, int(np.floor(cx - radius)))
    x1 = min(w - 1, int(np.ceil(cx + radius)))
    y0 = max(0, int(np.floor(cy - radius)))
    y1 = min(h - 1, int(np.ceil(cy + radius)))
    if x0 > x1 or y0 > y1:
        return
    yy, xx = np.mgrid[y0 : y1 + 1, x0 : x1 + 1]
    inside = (xx + 0.5 - cx) ** 2 + (yy + 0.5 - cy) ** 2 <= radius * radius
    if not np.any(inside):
        return
    patch = dst[y0 : y1 + 1, x0 : x1 + 1]
    a = color[3] / 255.0
    blended = np.asarray(color[0:3], dtype=np.float32) * a + patch[:, :, :3].astype(np.float32) * (1.0 - a)
    patch[inside, :3] = blended[inside].astype(np.uint8)
    patch[inside, 3] = 255
