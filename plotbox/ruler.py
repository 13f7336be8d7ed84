from __future__ import annotations

import logging
from typing import Literal, Sequence

import numpy as np

from plotbox.colors import BLACK, RGBA
from plotbox.errors import InvalidArgumentError
from plotbox.ticks import format_tick_labels, linear_ticks


LOGGER = logging.getLogger(__name__)

AxisName = Literal["x", "y"]
RulerLocation = Literal["start", "end", "origin"]
TickDirection = Literal["in", "out", "both"]

_LOCATIONS = ("start", "end", "origin")
_TICK_DIRECTIONS = ("in", "out", "both")


class Ruler:
    """One axis: value limits, pixel range and the ticks drawn along it.

    ``location`` is relative to the perpendicular ruler: ``"start"`` puts an
    X ruler at the bottom and a Y ruler at the left edge of the box, ``"end"``
    at the top or right edge, ``"origin"`` at the perpendicular ruler's
    :meth:`origin_pixel`. Y rulers use a reversed pixel range
    ``(bottom, top)`` so that larger values map to smaller pixel rows.
    """

    def __init__(
        self,
        axis: AxisName = "x",
        *,
        location: RulerLocation = "start",
        tick_direction: TickDirection = "in",
        tick_length: int = 5,
        color: RGBA = BLACK,
    ) -> None:
        if axis not in ("x", "y"):
            raise InvalidArgumentError(f"unsupported axis: {axis}")
        self.axis: AxisName = axis
        self.location = location
        self.tick_direction = tick_direction
        self.tick_length = int(tick_length)
        self.color = color
        self.visible = True
        self.label: str | None = None
        self.origin = 0.0
        self.placement = 0
        self._limits = (0.0, 1.0)
        self._pixel_range = (0, 0)
        self._ticks = 0.2 * np.arange(6, dtype=np.float64)
        self._tick_labels = format_tick_labels(self._ticks, self._limits)

    @property
    def location(self) -> RulerLocation:
        return self._location

    @location.setter
    def location(self, value: RulerLocation) -> None:
        if value not in _LOCATIONS:
            raise InvalidArgumentError(f"unsupported ruler location: {value}")
        self._location = value

    @property
    def tick_direction(self) -> TickDirection:
        return self._tick_direction

    @tick_direction.setter
    def tick_direction(self, value: TickDirection) -> None:
        if value not in _TICK_DIRECTIONS:
            raise InvalidArgumentError(f"unsupported tick direction: {value}")
        self._tick_direction = value

    @property
    def limits(self) -> tuple[float, float]:
        return self._limits

    @property
    def span(self) -> float:
        return self._limits[1] - self._limits[0]

    @property
    def ticks(self) -> np.ndarray:
        return self._ticks.copy()

    @property
    def tick_labels(self) -> tuple[str, ...]:
        return tuple(self._tick_labels)

    @property
    def pixel_range(self) -> tuple[int, int]:
        return self._pixel_range

    @property
    def pixel_start(self) -> int:
        return self._pixel_range[0]

    @property
    def pixel_end(self) -> int:
        return self._pixel_range[1]

    def set_limits(self, lo: float, hi: float) -> None:
        self._limits = (float(lo), float(hi))

    def set_ticks(self, lo: float, step: float, hi: float) -> None:
        ticks = linear_ticks(float(lo), float(step), float(hi))
        if ticks is None:
            LOGGER.debug("ignoring tick request lo=%r step=%r hi=%r", lo, step, hi)
            return
        self._ticks = ticks
        self._regenerate_labels()

    def set_tick_values(self, values: Sequence[float] | np.ndarray) -> None:
        ticks = np.array(values, dtype=np.float64).reshape(-1)
        if ticks.size > 1 and np.any(np.diff(ticks) < 0):
            raise InvalidArgumentError("tick values must be non-decreasing")
        self._ticks = ticks
        self._regenerate_labels()

    def set_label(self, text: str | None) -> None:
        self.label = text

    def set_pixel_range(self, start: int, end: int) -> None:
        self._pixel_range = (int(start), int(end))

    def to_pixel(self, value: float) -> int:
        lo, hi = self._limits
        start, end = self._pixel_range
        return start + int((end - start) * ((value - lo) / (hi - lo)))

    def to_value(self, pixel: float) -> float:
        lo, hi = self._limits
        start, end = self._pixel_range
        return lo + (hi - lo) * ((pixel - start) / (end - start))

    def origin_pixel(self) -> int:
        start, end = self._pixel_range
        return start + int((end - start) * self.origin)

    def tick_pixels(self) -> list[int]:
        return [self.to_pixel(float(v)) for v in self._ticks]

    def visible_tick_indices(self) -> list[int]:
        lower = min(self._pixel_range)
        upper = max(self._pixel_range)
        return [idx for idx, px in enumerate(self.tick_pixels()) if lower <= px <= upper]

    def placement_from(self, other: "Ruler") -> None:
        """Place this ruler on the edge of ``other`` selected by :attr:`location`."""
        if self.location == "start":
            self.placement = other.pixel_start
        elif self.location == "end":
            self.placement = other.pixel_end
        else:
            self.placement = other.origin_pixel()

    def _regenerate_labels(self) -> None:
        self._tick_labels = format_tick_labels(self._ticks, self._limits)
