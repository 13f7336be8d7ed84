from __future__ import annotations

from typing import Protocol

import numpy as np

from plotbox.colors import RGBA, WHITE
from plotbox.raster import Clip, draw_hline, draw_segment, draw_text, draw_vline, fill_rect, new_canvas, text_size
from plotbox.raster.draw_text import DEFAULT_FONT_SIZE_PX


class DrawingSurface(Protocol):
    """What :func:`plotbox.render.render_box` needs from a toolkit canvas.

    Coordinates are integer pixels with the origin at the top-left corner.
    ``set_clip`` takes inclusive ``(left, top, right, bottom)`` bounds, or
    ``None`` to drop clipping.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int = 1) -> None: ...

    def draw_rect(self, left: int, top: int, right: int, bottom: int, color: RGBA) -> None: ...

    def fill_rect(self, left: int, top: int, right: int, bottom: int, color: RGBA) -> None: ...

    def draw_text(self, x: int, y: int, text: str, color: RGBA, *, rotate_deg: int = 0) -> None: ...

    def text_size(self, text: str, *, rotate_deg: int = 0) -> tuple[int, int]: ...

    def set_clip(self, clip: Clip | None) -> None: ...


class RasterSurface:
    """RGBA numpy canvas implementing :class:`DrawingSurface`."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: RGBA = WHITE,
        font_size_px: float = DEFAULT_FONT_SIZE_PX,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self._canvas = new_canvas(width, height, color=background)
        self._clip: Clip | None = None
        self.font_size_px = float(font_size_px)

    @property
    def width(self) -> int:
        return int(self._canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self._canvas.shape[0])

    @property
    def clip(self) -> Clip | None:
        return self._clip

    def set_clip(self, clip: Clip | None) -> None:
        self._clip = clip

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int = 1) -> None:
        draw_segment(self._canvas, int(x0), int(y0), int(x1), int(y1), color, width=width, clip=self._clip)

    def draw_rect(self, left: int, top: int, right: int, bottom: int, color: RGBA) -> None:
        draw_hline(self._canvas, left, right, top, color, self._clip)
        draw_hline(self._canvas, left, right, bottom, color, self._clip)
        draw_vline(self._canvas, left, top, bottom, color, self._clip)
        draw_vline(self._canvas, right, top, bottom, color, self._clip)

    def fill_rect(self, left: int, top: int, right: int, bottom: int, color: RGBA) -> None:
        fill_rect(self._canvas, left, top, right, bottom, color, self._clip)

    def draw_text(self, x: int, y: int, text: str, color: RGBA, *, rotate_deg: int = 0) -> None:
        draw_text(
            self._canvas,
            int(x),
            int(y),
            text,
            color,
            font_size_px=self.font_size_px,
            rotate_deg=rotate_deg,
            clip=self._clip,
        )

    def text_size(self, text: str, *, rotate_deg: int = 0) -> tuple[int, int]:
        return text_size(text, font_size_px=self.font_size_px, rotate_deg=rotate_deg)

    def to_rgba(self) -> np.ndarray:
        return self._canvas.copy()
