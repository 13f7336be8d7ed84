from __future__ import annotations

import numpy as np

from plotbox.colors import RGBA


# Inclusive pixel bounds (left, top, right, bottom).
Clip = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def clip_bounds(dst: np.ndarray, clip: Clip | None) -> Clip:
    right = dst.shape[1] - 1
    bottom = dst.shape[0] - 1
    if clip is None:
        return (0, 0, right, bottom)
    left, top, clip_right, clip_bottom = clip
    return (max(0, left), max(0, top), min(right, clip_right), min(bottom, clip_bottom))


def _blend(segment: np.ndarray, color: RGBA) -> None:
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[..., :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[..., :3].astype(np.float32) * inv).astype(np.uint8)
    segment[..., 3] = 255


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA, clip: Clip | None = None) -> None:
    left, top, right, bottom = clip_bounds(dst, clip)
    if x < left or x > right or y < top or y > bottom:
        return
    _blend(dst[y : y + 1, x : x + 1], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA, clip: Clip | None = None) -> None:
    left, top, right, bottom = clip_bounds(dst, clip)
    if y < top or y > bottom:
        return
    xa = max(left, min(x0, x1))
    xb = min(right, max(x0, x1))
    if xa > xb:
        return
    _blend(dst[y, xa : xb + 1], color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA, clip: Clip | None = None) -> None:
    left, top, right, bottom = clip_bounds(dst, clip)
    if x < left or x > right:
        return
    ya = max(top, min(y0, y1))
    yb = min(bottom, max(y0, y1))
    if ya > yb:
        return
    _blend(dst[ya : yb + 1, x], color)


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, clip: Clip | None = None) -> None:
    left, top, right, bottom = clip_bounds(dst, clip)
    xa = max(left, min(x0, x1))
    xb = min(right, max(x0, x1))
    ya = max(top, min(y0, y1))
    yb = min(bottom, max(y0, y1))
    if xa > xb or ya > yb:
        return
    _blend(dst[ya : yb + 1, xa : xb + 1], color)
