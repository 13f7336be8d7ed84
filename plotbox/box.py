from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from plotbox.colors import LIGHT_GRAY, RGBA, WHITE, palette_color
from plotbox.compose import Strategy, default_ruler_color, inner_position, new_y_ruler, place_y_rulers, strategy_for
from plotbox.config import PlotConfig, Position
from plotbox.errors import InvalidArgumentError
from plotbox.interaction import pan_ruler, zoom_at_point, zoom_range
from plotbox.ruler import Ruler
from plotbox.series import Series
from plotbox.ticks import DEGENERATE_SPAN


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PixelRect:
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def contains(self, px: float, py: float) -> bool:
        return self.left <= px <= self.right and self.top <= py <= self.bottom


def _as_position(values: Sequence[float]) -> Position:
    if len(values) != 4:
        raise InvalidArgumentError(f"position needs 4 values, got {len(values)}")
    x, y, w, h = (float(v) for v in values)
    return (x, y, w, h)


class PlotBox:
    """Rectangular plot area holding one X ruler, one or more Y rulers and the series drawn in it.

    ``position`` is ``(x, y, width, height)`` in figure-normalized units with
    ``y`` measured from the bottom. With more than two Y rulers the drawn box
    is inset from ``position`` to make room for the stacked rulers, see
    :mod:`plotbox.compose`.

    With ``hold`` off (the default) every :meth:`add_series` replaces the
    previous series and rescales. With ``hold`` on series accumulate and the
    limits stay where the caller put them.
    """

    def __init__(
        self,
        position: Sequence[float] | None = None,
        *,
        y_rulers: int = 1,
        config: PlotConfig | None = None,
    ) -> None:
        self.config = config or PlotConfig()
        self._position = _as_position(position if position is not None else self.config.box_position)
        self.x_ruler = Ruler("x", tick_length=self.config.tick_length_px)
        self._y_rulers: list[Ruler] = []
        self._series: list[tuple[Series, int]] = []
        self._hold = False
        self._pixel_rect: PixelRect | None = None
        self.visible = True
        self.background: RGBA = WHITE
        self.edge_color: RGBA = LIGHT_GRAY
        self.ensure_y_rulers(max(1, int(y_rulers)))

    @property
    def y_rulers(self) -> tuple[Ruler, ...]:
        return tuple(self._y_rulers)

    @property
    def y_ruler(self) -> Ruler:
        return self._y_rulers[0]

    @property
    def strategy(self) -> Strategy:
        return strategy_for(len(self._y_rulers))

    def ensure_y_rulers(self, count: int) -> None:
        had = len(self._y_rulers)
        for idx in range(had, count):
            self._y_rulers.append(new_y_ruler(idx, ruler_count=count, tick_length=self.config.tick_length_px))
        # the primary ruler leaves its single-ruler black once a second one exists
        if had == 1 and count > 1 and self._y_rulers[0].color == default_ruler_color(0, 1):
            self._y_rulers[0].color = default_ruler_color(0, count)

    def get_y_ruler(self, index: int = 0) -> Ruler:
        """Y ruler ``index``, creating every missing ruler up to it."""
        self._check_ruler_index(index)
        self.ensure_y_rulers(index + 1)
        return self._y_rulers[index]

    def _check_ruler_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise InvalidArgumentError(f"invalid ruler index: {index!r}")

    @property
    def position(self) -> Position:
        return self._position

    @property
    def inner_position(self) -> Position:
        return inner_position(self._position, len(self._y_rulers), self.config.multi_y_spacing)

    def set_position(self, *values: float | Sequence[float]) -> None:
        if len(values) == 1 and isinstance(values[0], Sequence):
            self._position = _as_position(values[0])
        else:
            self._position = _as_position(values)  # type: ignore[arg-type]

    @property
    def pixel_rect(self) -> PixelRect | None:
        return self._pixel_rect

    def compute_pixel_rect(self, parent_width: float, parent_height: float) -> PixelRect:
        """Map the normalized position to parent pixels and lay out all rulers.

        Normalized ``y`` grows upwards while pixel rows grow downwards, hence
        the ``1 - y - h`` and ``1 - y`` flips.
        """
        x, y, w, h = self.inner_position
        rect = PixelRect(
            left=int(parent_width * x),
            top=int(parent_height * (1.0 - y - h)),
            right=int(parent_width * (x + w)),
            bottom=int(parent_height * (1.0 - y)),
        )
        self._pixel_rect = rect
        self.x_ruler.set_pixel_range(rect.left, rect.right)
        for ruler in self._y_rulers:
            ruler.set_pixel_range(rect.bottom, rect.top)
        place_y_rulers(self.x_ruler, self._y_rulers, parent_width, self.config.multi_y_spacing)
        return rect

    def contains_point(self, px: float, py: float) -> bool:
        if self._pixel_rect is None:
            return False
        return self._pixel_rect.contains(px, py)

    @property
    def hold(self) -> bool:
        return self._hold

    @hold.setter
    def hold(self, value: bool) -> None:
        self._hold = bool(value)

    def set_hold(self, value: bool) -> None:
        self.hold = value

    @property
    def series(self) -> tuple[tuple[Series, int], ...]:
        return tuple(self._series)

    def series_on(self, ruler_index: int) -> list[Series]:
        return [s for s, idx in self._series if idx == ruler_index]

    def clear(self) -> None:
        self._series.clear()

    def add_series(self, series: Series, ruler_index: int = 0) -> Series:
        y_ruler = self.get_y_ruler(ruler_index)
        if not self._hold:
            self._series.clear()
        if series.color is None:
            series.color = palette_color(len(self.series_on(ruler_index)))
        self._series.append((series, ruler_index))
        if self._hold:
            return series

        self.autoscale_x()
        self.autoscale_y(ruler_index)
        if series.has_finite_x:
            lo, hi = series.x_min, series.x_max
            if hi - lo < DEGENERATE_SPAN:
                self.x_ruler.set_ticks(lo - 0.5, 0.5, hi + 0.5)
            else:
                self.x_ruler.set_ticks(lo, (hi - lo) / 5.0, hi)
        if series.has_finite_y:
            lo, hi = series.y_min, series.y_max
            if hi - lo < DEGENERATE_SPAN:
                y_ruler.set_ticks(lo - 0.5, 0.5, hi + 0.5)
            else:
                y_ruler.set_ticks(lo, (hi - lo) / 10.0, hi)
        return series

    def set_xlim(self, lo: float, hi: float) -> None:
        self.x_ruler.set_limits(lo, hi)
        self.x_ruler.set_ticks(lo, (hi - lo) / 10.0, hi)

    def set_ylim(self, lo: float, hi: float, ruler_index: int = 0) -> None:
        ruler = self.get_y_ruler(ruler_index)
        ruler.set_limits(lo, hi)
        ruler.set_ticks(lo, (hi - lo) / 10.0, hi)

    def set_xlabel(self, text: str | None) -> None:
        self.x_ruler.set_label(text)

    def set_ylabel(self, text: str | None, ruler_index: int = 0) -> None:
        self.get_y_ruler(ruler_index).set_label(text)

    def autoscale_x(self) -> bool:
        found = False
        lo = hi = 0.0
        for series, _ in self._series:
            ext = series.x_extrema()
            if not ext.finite:
                continue
            if not found:
                lo, hi = ext.lo, ext.hi
                found = True
                continue
            lo = min(lo, ext.lo)
            hi = max(hi, ext.hi)
        if found:
            self.set_xlim(lo, hi)
        else:
            LOGGER.debug("autoscale_x found no finite data")
        return found

    def autoscale_y(self, ruler_index: int = 0) -> bool:
        self._check_ruler_index(ruler_index)
        found = False
        lo = hi = 0.0
        for series, idx in self._series:
            if idx != ruler_index:
                continue
            ext = series.y_extrema()
            if not ext.finite:
                continue
            if not found:
                lo, hi = ext.lo, ext.hi
                found = True
                continue
            lo = min(lo, ext.lo)
            hi = max(hi, ext.hi)
        if not found:
            LOGGER.debug("autoscale_y(%d) found no finite data", ruler_index)
            return False
        if lo == hi:
            lo -= 1.0
            hi += 1.0
        self.set_ylim(lo, hi, ruler_index)
        return True

    def autoscale(self) -> None:
        self.autoscale_x()
        for idx in range(len(self._y_rulers)):
            self.autoscale_y(idx)

    def apply_zoom_box(self, start_px: tuple[float, float], end_px: tuple[float, float]) -> None:
        x_limits = zoom_range(self.x_ruler, start_px[0], end_px[0])
        y_limits = [zoom_range(ruler, start_px[1], end_px[1]) for ruler in self._y_rulers]
        self._apply_limits(x_limits, y_limits)

    def apply_zoom_at_point(self, px: float, py: float, factor: float) -> None:
        x_limits = zoom_at_point(self.x_ruler, px, factor)
        y_limits = [zoom_at_point(ruler, py, factor) for ruler in self._y_rulers]
        self._apply_limits(x_limits, y_limits)

    def apply_pan(self, dx: float, dy: float) -> None:
        x_limits = pan_ruler(self.x_ruler, dx)
        y_limits = [pan_ruler(ruler, dy) for ruler in self._y_rulers]
        self._apply_limits(x_limits, y_limits)

    def _apply_limits(
        self,
        x_limits: tuple[float, float] | None,
        y_limits: list[tuple[float, float] | None],
    ) -> None:
        if x_limits is not None:
            self.set_xlim(*x_limits)
        for idx, limits in enumerate(y_limits):
            if limits is not None:
                self.set_ylim(limits[0], limits[1], idx)
