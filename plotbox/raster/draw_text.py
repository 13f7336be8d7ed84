from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from plotbox.colors import RGBA
from plotbox.raster.canvas import Clip, clip_bounds


DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 12.0

# Tried in order after the requested family.
SANS_FALLBACKS = ("dejavusans", "liberationsans", "arial", "helvetica", "freesans")
FONT_DIRS = (
    Path.home() / ".fonts",
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
    Path("C:/Windows/Fonts"),
)

_TRANSPOSE = {
    1: Image.Transpose.ROTATE_90,
    2: Image.Transpose.ROTATE_180,
    3: Image.Transpose.ROTATE_270,
}

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


@dataclass(frozen=True)
class Glyphs:
    """Coverage mask of one rendered string, 0..255 per pixel."""

    mask: np.ndarray

    @property
    def size(self) -> tuple[int, int]:
        return (int(self.mask.shape[1]), int(self.mask.shape[0]))


def draw_text(
    dst: np.ndarray,
    x: int,
    y: int,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    rotate_deg: int = 0,
    clip: Clip | None = None,
) -> None:
    """Blend ``text`` onto ``dst`` with the top-left of its bounding box at ``(x, y)``.

    ``rotate_deg`` turns the text counter-clockwise in quarter turns, so 90
    reads bottom-up as a left-side axis label does.
    """
    if not text:
        return
    glyphs = render_glyphs(text, font_family, float(font_size_px), _quarter_turns(rotate_deg))
    _composite(dst, x, y, glyphs.mask, color, clip_bounds(dst, clip))


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    rotate_deg: int = 0,
) -> tuple[int, int]:
    turns = _quarter_turns(rotate_deg)
    if not text:
        ascent, descent = load_font(font_family, float(font_size_px)).getmetrics()
        line = max(1, int(ascent + descent))
        return (line, 0) if turns % 2 else (0, line)
    return render_glyphs(text, font_family, float(font_size_px), turns).size


@lru_cache(maxsize=512)
def render_glyphs(text: str, font_family: str, font_size_px: float, quarter_turns: int = 0) -> Glyphs:
    font = load_font(font_family, font_size_px)
    left, top, right, bottom = font.getbbox(text)
    image = Image.new("L", (max(1, int(right - left)), max(1, int(bottom - top))), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    if quarter_turns:
        image = image.transpose(_TRANSPOSE[quarter_turns])
    mask = np.asarray(image, dtype=np.uint8)
    mask.setflags(write=False)
    return Glyphs(mask=mask)


@lru_cache(maxsize=32)
def load_font(font_family: str, font_size_px: float) -> Font:
    size = max(1, int(round(font_size_px)))
    path = find_font_file(font_family)
    if path is not None:
        try:
            return ImageFont.truetype(str(path), size=size)
        except OSError:
            pass
    return ImageFont.load_default(size=size)


@lru_cache(maxsize=16)
def find_font_file(font_family: str) -> Path | None:
    wanted = font_family.replace(" ", "").lower() or DEFAULT_FONT_FAMILY.replace(" ", "").lower()
    index = _font_index()
    for key in (wanted,) + SANS_FALLBACKS:
        for stem, path in index:
            if key in stem:
                return path
    return None


@lru_cache(maxsize=1)
def _font_index() -> tuple[tuple[str, Path], ...]:
    found: list[tuple[str, Path]] = []
    for base in FONT_DIRS:
        if not base.is_dir():
            continue
        for pattern in ("*.ttf", "*.otf"):
            found.extend((p.stem.replace(" ", "").lower(), p) for p in base.rglob(pattern))
    # regular faces before bold/italic variants sharing the family prefix
    found.sort(key=lambda item: (len(item[0]), item[0]))
    return tuple(found)


def _quarter_turns(rotate_deg: int) -> int:
    if rotate_deg % 90 != 0:
        raise ValueError("rotate_deg must be a multiple of 90")
    return (rotate_deg // 90) % 4


def _composite(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA, bounds: Clip) -> None:
    left, top, right, bottom = bounds
    h, w = mask.shape
    x0, y0 = max(left, x), max(top, y)
    x1, y1 = min(right + 1, x + w), min(bottom + 1, y + h)
    if x0 >= x1 or y0 >= y1:
        return
    alpha = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) * (color[3] / (255.0 * 255.0))
    if not alpha.any():
        return
    region = dst[y0:y1, x0:x1]
    a = alpha[:, :, None]
    src = np.asarray(color[:3], dtype=np.float32)
    region[:, :, :3] = np.rint(src * a + region[:, :, :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    dst_a = region[:, :, 3].astype(np.float32) / 255.0
    region[:, :, 3] = np.rint((alpha + dst_a * (1.0 - alpha)) * 255.0).astype(np.uint8)
