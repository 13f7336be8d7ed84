"""Mouse navigation over a :class:`~plotbox.figure.Figure`, independent of any GUI toolkit.

A host window forwards its pointer events here and redraws whenever a method
returns ``True``. Pixel coordinates are those of the last layout, so the
figure must have been rendered (or :meth:`Figure.layout` called) first.

- left drag: rubber-band rectangle, clamped to the pressed box, zooms on release
- right drag: pans by the pointer movement since the previous event
- wheel: zooms around the pointer
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal

from plotbox.box import PixelRect, PlotBox
from plotbox.config import PlotConfig
from plotbox.figure import Figure


LOGGER = logging.getLogger(__name__)

Button = Literal["left", "right"]


@dataclass
class _Drag:
    button: Button
    box: PlotBox
    anchor: tuple[int, int]
    current: tuple[int, int]


def _clamp(px: float, py: float, rect: PixelRect) -> tuple[int, int]:
    x = min(max(int(px), rect.left), rect.right)
    y = min(max(int(py), rect.top), rect.bottom)
    return (x, y)


class PointerNavigator:
    def __init__(self, figure: Figure, config: PlotConfig | None = None) -> None:
        self.figure = figure
        self.config = config or figure.config
        self._drag: _Drag | None = None

    @property
    def active_box(self) -> PlotBox | None:
        return self._drag.box if self._drag is not None else None

    @property
    def selection_rect(self) -> PixelRect | None:
        """Normalized rubber-band rectangle while a left drag is in progress."""
        if self._drag is None or self._drag.button != "left":
            return None
        (x0, y0), (x1, y1) = self._drag.anchor, self._drag.current
        return PixelRect(min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))

    def press(self, button: str, px: float, py: float) -> bool:
        if button not in ("left", "right"):
            return False
        box = self.figure.box_at(px, py)
        if box is None or box.pixel_rect is None:
            self._drag = None
            return False
        point = _clamp(px, py, box.pixel_rect)
        self._drag = _Drag(button=button, box=box, anchor=point, current=point)  # type: ignore[arg-type]
        return False

    def drag(self, px: float, py: float) -> bool:
        state = self._drag
        if state is None or state.box.pixel_rect is None:
            return False
        if state.button == "left":
            state.current = _clamp(px, py, state.box.pixel_rect)
            return True
        dx = int(px) - state.current[0]
        dy = int(py) - state.current[1]
        state.current = (int(px), int(py))
        if dx == 0 and dy == 0:
            return False
        state.box.apply_pan(dx, dy)
        return True

    def release(self, button: str, px: float, py: float) -> bool:
        state = self._drag
        if state is None or state.button != button:
            return False
        changed = self.drag(px, py)
        self._drag = None
        if state.button == "right":
            return changed
        (x0, y0), (x1, y1) = state.anchor, state.current
        min_px = self.config.min_zoom_box_px
        if abs(x1 - x0) <= min_px or abs(y1 - y0) <= min_px:
            LOGGER.debug("selection %dx%d too small to zoom", abs(x1 - x0), abs(y1 - y0))
            return True
        state.box.apply_zoom_box(state.anchor, state.current)
        return True

    def wheel(self, rotation: float, px: float, py: float) -> bool:
        box = self.figure.box_at(px, py)
        if box is None:
            return False
        factor = self.config.wheel_zoom_in if rotation < 0 else self.config.wheel_zoom_out
        box.apply_zoom_at_point(px, py, factor)
        return True
