"""Limit arithmetic for zoom and pan gestures.

Every function only reads the rulers it is given and returns the limits a
caller should apply, or ``None`` where the gesture would leave an axis with
a non-positive (or non-finite) range.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from plotbox.ruler import Ruler


LOGGER = logging.getLogger(__name__)

Limits = tuple[float, float]


@dataclass(frozen=True)
class GestureResult:
    x: Limits | None
    y: Limits | None


def _accept(lo: float, hi: float, gesture: str) -> Limits | None:
    if math.isfinite(lo) and math.isfinite(hi) and lo < hi:
        return (lo, hi)
    LOGGER.debug("rejecting %s result lo=%r hi=%r", gesture, lo, hi)
    return None


def _usable(ruler: Ruler, gesture: str) -> bool:
    if ruler.pixel_start == ruler.pixel_end or not ruler.span > 0.0:
        LOGGER.debug("ignoring %s on ruler without layout or range", gesture)
        return False
    return True


def zoom_range(ruler: Ruler, start_px: float, end_px: float) -> Limits | None:
    if not _usable(ruler, "zoom box"):
        return None
    v1 = ruler.to_value(start_px)
    v2 = ruler.to_value(end_px)
    return _accept(min(v1, v2), max(v1, v2), "zoom box")


def zoom_box(
    x_ruler: Ruler,
    y_ruler: Ruler,
    start_px: tuple[float, float],
    end_px: tuple[float, float],
) -> GestureResult:
    return GestureResult(
        x=zoom_range(x_ruler, start_px[0], end_px[0]),
        y=zoom_range(y_ruler, start_px[1], end_px[1]),
    )


def zoom_at_point(ruler: Ruler, pixel: float, factor: float) -> Limits | None:
    """Scale the range by ``factor`` keeping the value under ``pixel`` in place."""
    if not _usable(ruler, "zoom at point"):
        return None
    lo, hi = ruler.limits
    value = ruler.to_value(pixel)
    span = hi - lo
    new_span = span * factor
    ratio = (value - lo) / span
    return _accept(value - new_span * ratio, value + new_span * (1.0 - ratio), "zoom at point")


def pan_ruler(ruler: Ruler, pixel_delta: float) -> Limits | None:
    if not _usable(ruler, "pan"):
        return None
    lo, hi = ruler.limits
    delta = pixel_delta * (hi - lo) / (ruler.pixel_end - ruler.pixel_start)
    return _accept(lo - delta, hi - delta, "pan")


def pan(x_ruler: Ruler, y_ruler: Ruler, pixel_dx: float, pixel_dy: float) -> GestureResult:
    return GestureResult(x=pan_ruler(x_ruler, pixel_dx), y=pan_ruler(y_ruler, pixel_dy))
