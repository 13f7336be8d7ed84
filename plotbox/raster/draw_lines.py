from __future__ import annotations

import numpy as np

from plotbox.colors import RGBA
from plotbox.raster.canvas import Clip, clip_bounds, draw_hline, draw_pixel, draw_vline


def draw_segment(
    dst: np.ndarray,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: RGBA,
    width: int = 1,
    clip: Clip | None = None,
) -> None:
    clipped = clip_segment(x0, y0, x1, y1, clip_bounds(dst, clip))
    if clipped is None:
        return
    x0, y0, x1, y1 = clipped
    if width <= 1 and y0 == y1:
        draw_hline(dst, x0, x1, y0, color, clip)
        return
    if width <= 1 and x0 == x1:
        draw_vline(dst, x0, y0, y1, color, clip)
        return
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width, clip=clip)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int, clip: Clip | None) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color, clip)


def clip_segment(x0: int, y0: int, x1: int, y1: int, bounds: Clip) -> tuple[int, int, int, int] | None:
    """Liang-Barsky clip of a segment to inclusive ``bounds``; ``None`` when nothing is left."""
    left, top, right, bottom = bounds
    if left > right or top > bottom:
        return None
    dx = float(x1 - x0)
    dy = float(y1 - y0)
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - left), (dx, right - x0), (-dy, y0 - top), (dy, bottom - y0)):
        if p == 0.0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (
        int(round(x0 + t0 * dx)),
        int(round(y0 + t0 * dy)),
        int(round(x0 + t1 * dx)),
        int(round(y0 + t1 * dy)),
    )
