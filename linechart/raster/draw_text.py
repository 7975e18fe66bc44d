from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from linechart.raster.canvas import RGBA, fill_rect


DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 12.0
FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "dejavu sans",
    "helvetica",
    "arial",
    "liberationsans",
)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    *,
    anchor: str = "start",
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    background_color: RGBA | None = None,
    padding: int = 0,
) -> None:
    """Draw ``text`` with ``(x, y)`` on the baseline, aligned like SVG ``text-anchor``."""
    if not text:
        return
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    mask = _render_mask(text, font)
    h, w = mask.shape
    left = int(round(x - _anchor_shift(anchor, w)))
    top = int(round(y)) - _ascent(font)
    if background_color is not None:
        fill_rect(dst, left - padding, top - padding, left + w - 1 + padding, top + h - 1 + padding, background_color)
    _blend_mask(dst, left, top, mask, color)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> tuple[int, int]:
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    if not text:
        return (0, _line_height(font))
    mask = _render_mask(text, font)
    return (int(mask.shape[1]), int(mask.shape[0]))


def _anchor_shift(anchor: str, width: int) -> float:
    if anchor == "start":
        return 0.0
    if anchor == "middle":
        return width / 2.0
    if anchor == "end":
        return float(width)
    raise ValueError(f"unsupported text anchor: {anchor}")


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    src_alpha = (color[3] / 255.0) * cov
    if not np.any(src_alpha > 0):
        return
    patch = dst[y0:y1, x0:x1]
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out_rgb = src_rgb * src_alpha[:, :, None] + patch[:, :, :3].astype(np.float32) * (1.0 - src_alpha[:, :, None])
    patch[:, :, :3] = np.clip(out_rgb, 0, 255).astype(np.uint8)
    patch[:, :, 3] = 255


@lru_cache(maxsize=256)
def _render_mask(text: str, font: Font) -> np.ndarray:
    # Rendered from the ascender line so row ``ascent`` is the baseline.
    right = int(np.ceil(font.getbbox(text)[2]))
    image = Image.new("L", (max(1, right), _line_height(font)), 0)
    ImageDraw.Draw(image).text((0, 0), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


def _ascent(font: Font) -> int:
    if hasattr(font, "getmetrics"):
        return int(font.getmetrics()[0])
    return int(font.getbbox("Ag")[3])


def _line_height(font: Font) -> int:
    if hasattr(font, "getmetrics"):
        ascent, descent = font.getmetrics()
        return max(1, int(ascent + descent))
    return max(1, int(font.getbbox("Ag")[3]))


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> Font:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        return ImageFont.load_default(size=size)
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError:
        return ImageFont.load_default(size=size)


@lru_cache(maxsize=16)
def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() or DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + FONT_FALLBACK_PATTERNS

    font_dirs = [
        Path.home() / "Library" / "Fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
    ]
    candidates: list[Path] = []
    for base in font_dirs:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            if p == path.stem.lower().replace(" ", "").replace("-", ""):
                return path
        for path in candidates:
            if p in path.stem.lower().replace(" ", ""):
                return path
    return None
