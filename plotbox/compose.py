"""Placement rules for boxes carrying one, two or more Y rulers.

One box type covers all three topologies; the strategy is picked from the
ruler count:

* ``single``: ruler 0 on the left edge.
* ``dual``: ruler 0 left, ruler 1 on the right edge.
* ``stacked``: as ``dual``, plus rulers 2..N-1 stacked further left, one
  ``spacing`` fraction of the parent width apart. The box itself shrinks by
  the same amount so that the outer position still bounds everything.
"""

from __future__ import annotations

from typing import Literal, Sequence

from plotbox.colors import BLACK, RGBA, palette_color
from plotbox.config import Position
from plotbox.ruler import Ruler


Strategy = Literal["single", "dual", "stacked"]


def strategy_for(ruler_count: int) -> Strategy:
    if ruler_count <= 1:
        return "single"
    if ruler_count == 2:
        return "dual"
    return "stacked"


def extra_ruler_count(ruler_count: int) -> int:
    return max(0, ruler_count - 2)


def default_ruler_color(index: int, ruler_count: int = 2) -> RGBA:
    """Palette color by ruler position; a lone Y ruler stays black."""
    if ruler_count <= 1:
        return BLACK
    return palette_color(index)


def new_y_ruler(index: int, *, ruler_count: int = 2, tick_length: int = 5) -> Ruler:
    ruler = Ruler("y", location="end" if index == 1 else "start", tick_length=tick_length)
    ruler.color = default_ruler_color(index, ruler_count)
    return ruler


def inner_position(outer: Position, ruler_count: int, spacing: float) -> Position:
    x, y, w, h = outer
    inset = spacing * float(extra_ruler_count(ruler_count))
    return (x + inset, y, w - inset, h)


def stacked_placement(x_ruler: Ruler, extra_index: int, parent_width: float, spacing: float) -> int:
    return x_ruler.pixel_start - int(parent_width * (spacing * float(extra_index + 1)))


def place_y_rulers(
    x_ruler: Ruler,
    y_rulers: Sequence[Ruler],
    parent_width: float,
    spacing: float,
) -> None:
    """Resolve the X placement of every Y ruler.

    Must run after the X ruler received its pixel range; stacked rulers are
    positioned relative to its start.
    """
    x_ruler.placement_from(y_rulers[0])
    for idx, ruler in enumerate(y_rulers):
        if idx < 2:
            ruler.placement_from(x_ruler)
        else:
            ruler.placement = stacked_placement(x_ruler, idx - 2, parent_width, spacing)
