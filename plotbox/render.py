from __future__ import annotations

import logging
import math

from plotbox.box import PixelRect, PlotBox
from plotbox.colors import BLUE, RGBA, SELECTION_BLUE
from plotbox.ruler import Ruler
from plotbox.series import Series
from plotbox.surface import DrawingSurface


LOGGER = logging.getLogger(__name__)

TICK_LABEL_GAP = 5
AXIS_LABEL_GAP = 6


def _drawable(ruler: Ruler) -> bool:
    span = ruler.span
    return math.isfinite(span) and span != 0.0


def _tick_offsets(ruler: Ruler) -> tuple[int, ...]:
    """Signed tick lengths along the pixel axis across the ruler line.

    Positive offsets point right (Y rulers) or down (X ruler).
    """
    n = ruler.tick_length
    if ruler.tick_direction == "both":
        return (-n, n)
    if ruler.location == "origin":
        inward = True
    else:
        inward = ruler.tick_direction == "in"
    if ruler.axis == "x":
        # the box lies above a bottom ruler and below a top ruler
        toward_box = -n if ruler.location != "end" else n
    else:
        toward_box = n if ruler.location != "end" else -n
    return (toward_box,) if inward else (-toward_box,)


def render_x_ruler(ruler: Ruler, surface: DrawingSurface) -> None:
    start, end = ruler.pixel_range
    y = ruler.placement
    surface.draw_line(start, y, end, y, ruler.color)
    pixels = ruler.tick_pixels()
    labels = ruler.tick_labels
    offsets = _tick_offsets(ruler)
    label_h = 0
    for idx in ruler.visible_tick_indices():
        px = pixels[idx]
        for off in offsets:
            surface.draw_line(px, y, px, y + off, ruler.color)
        w, h = surface.text_size(labels[idx])
        label_h = max(label_h, h)
        if ruler.location == "end":
            surface.draw_text(px - w // 2, y - TICK_LABEL_GAP - h, labels[idx], ruler.color)
        else:
            surface.draw_text(px - w // 2, y + TICK_LABEL_GAP, labels[idx], ruler.color)
    if ruler.label:
        w, h = surface.text_size(ruler.label)
        x = start + (end - start) // 2 - w // 2
        if ruler.location == "end":
            surface.draw_text(x, y - TICK_LABEL_GAP - label_h - AXIS_LABEL_GAP - h, ruler.label, ruler.color)
        else:
            surface.draw_text(x, y + TICK_LABEL_GAP + label_h + AXIS_LABEL_GAP, ruler.label, ruler.color)


def render_y_ruler(ruler: Ruler, surface: DrawingSurface) -> None:
    start, end = ruler.pixel_range
    x = ruler.placement
    surface.draw_line(x, start, x, end, ruler.color)
    pixels = ruler.tick_pixels()
    labels = ruler.tick_labels
    offsets = _tick_offsets(ruler)
    right_side = ruler.location == "end"
    outer = x + TICK_LABEL_GAP if right_side else x - TICK_LABEL_GAP
    for idx in ruler.visible_tick_indices():
        py = pixels[idx]
        for off in offsets:
            surface.draw_line(x, py, x + off, py, ruler.color)
        w, h = surface.text_size(labels[idx])
        if right_side:
            surface.draw_text(x + TICK_LABEL_GAP, py - h // 2, labels[idx], ruler.color)
            outer = max(outer, x + TICK_LABEL_GAP + w)
        else:
            surface.draw_text(x - TICK_LABEL_GAP - w, py - h // 2, labels[idx], ruler.color)
            outer = min(outer, x - TICK_LABEL_GAP - w)
    if ruler.label:
        w, h = surface.text_size(ruler.label, rotate_deg=90)
        y = end + (start - end) // 2 - h // 2
        if right_side:
            surface.draw_text(max(outer + 3, x), y, ruler.label, ruler.color, rotate_deg=90)
        else:
            surface.draw_text(min(outer - 3, x) - w, y, ruler.label, ruler.color, rotate_deg=90)


def render_series(series: Series, x_ruler: Ruler, y_ruler: Ruler, surface: DrawingSurface) -> None:
    """Draw the polyline; segments touching a non-finite sample are left out entirely."""
    color = series.color if series.color is not None else BLUE
    xs = series.x
    ys = series.y
    for i, j in series.segments():
        surface.draw_line(
            x_ruler.to_pixel(float(xs[i])),
            y_ruler.to_pixel(float(ys[i])),
            x_ruler.to_pixel(float(xs[j])),
            y_ruler.to_pixel(float(ys[j])),
            color,
            series.line_width,
        )


def render_selection(rect: PixelRect, surface: DrawingSurface, color: RGBA = SELECTION_BLUE) -> None:
    """Outline of a rubber-band zoom rectangle, drawn over everything else."""
    surface.draw_rect(rect.left, rect.top, rect.right, rect.bottom, color)


def render_frame(box: PlotBox, rect: PixelRect, surface: DrawingSurface) -> None:
    if rect.height > 2 and rect.width > 2:
        surface.fill_rect(rect.left + 1, rect.top + 1, rect.right - 1, rect.bottom - 1, box.background)
    surface.draw_rect(rect.left, rect.top, rect.right, rect.bottom, box.edge_color)


def render_box(box: PlotBox, surface: DrawingSurface, parent_width: float, parent_height: float) -> PixelRect:
    """Lay out ``box`` for the given parent size and draw it onto ``surface``.

    Draw order: frame, X ruler, Y rulers in index order, then the series of
    each Y ruler in index order, clipped to the box.
    """
    rect = box.compute_pixel_rect(parent_width, parent_height)
    if not box.visible:
        return rect
    render_frame(box, rect, surface)

    x_ok = _drawable(box.x_ruler)
    if not x_ok:
        LOGGER.debug("skipping x ruler with zero-width limits %r", box.x_ruler.limits)
    elif box.x_ruler.visible:
        render_x_ruler(box.x_ruler, surface)

    y_ok = []
    for idx, ruler in enumerate(box.y_rulers):
        ok = _drawable(ruler)
        y_ok.append(ok)
        if not ok:
            LOGGER.debug("skipping y ruler %d with zero-width limits %r", idx, ruler.limits)
        elif ruler.visible:
            render_y_ruler(ruler, surface)

    if not x_ok:
        return rect
    surface.set_clip((rect.left, rect.top, rect.right, rect.bottom))
    try:
        for idx, ruler in enumerate(box.y_rulers):
            if not y_ok[idx]:
                continue
            for series in box.series_on(idx):
                render_series(series, box.x_ruler, ruler, surface)
    finally:
        surface.set_clip(None)
    return rect
