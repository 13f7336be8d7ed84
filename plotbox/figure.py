from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Sequence

import numpy as np

from plotbox.box import PixelRect, PlotBox
from plotbox.colors import RGBA, WHITE
from plotbox.config import PlotConfig
from plotbox.grid import GridLayout
from plotbox.render import render_box, render_selection
from plotbox.surface import DrawingSurface, RasterSurface


LOGGER = logging.getLogger(__name__)


@dataclass
class Figure:
    """Top-level drawing area: standalone boxes plus an optional subplot grid.

    Boxes are laid out against ``(width - 1, height - 1)`` so that a box
    spanning the whole figure keeps its right and bottom edges on canvas.
    """

    width: int = 800
    height: int = 600
    config: PlotConfig = field(default_factory=PlotConfig)
    background: RGBA = WHITE
    _boxes: list[PlotBox] = field(default_factory=list)
    _grid: GridLayout | None = None
    _last_frame_rgba: np.ndarray | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")

    @property
    def grid(self) -> GridLayout | None:
        return self._grid

    def add_box(self, position: Sequence[float] | None = None, *, y_rulers: int = 1) -> PlotBox:
        box = PlotBox(position, y_rulers=y_rulers, config=self.config)
        self._boxes.append(box)
        return box

    def set_grid(self, cols: int, rows: int) -> GridLayout:
        """Replace the subplot grid; existing standalone boxes stay."""
        if self._grid is None:
            self._grid = GridLayout(cols, rows, config=self.config)
        else:
            self._grid.init_grid(cols, rows)
        return self._grid

    def boxes(self) -> list[PlotBox]:
        """Standalone boxes in creation order followed by the grid boxes."""
        out = list(self._boxes)
        if self._grid is not None:
            out.extend(self._grid.boxes)
        return out

    def last_box(self) -> PlotBox | None:
        boxes = self.boxes()
        return boxes[-1] if boxes else None

    def clear(self) -> None:
        self._boxes.clear()
        self._grid = None

    def box_at(self, px: float, py: float) -> PlotBox | None:
        """Topmost visible box whose last laid-out rectangle contains the point."""
        for box in reversed(self.boxes()):
            if box.visible and box.contains_point(px, py):
                return box
        return None

    def layout(self, width: int | None = None, height: int | None = None) -> None:
        w = self.width if width is None else width
        h = self.height if height is None else height
        for box in self.boxes():
            box.compute_pixel_rect(w - 1, h - 1)

    def render(self, surface: DrawingSurface, *, selection: PixelRect | None = None) -> None:
        parent_w = surface.width - 1
        parent_h = surface.height - 1
        for box in self.boxes():
            render_box(box, surface, parent_w, parent_h)
        if selection is not None:
            render_selection(selection, surface)

    def to_rgba(
        self,
        width: int | None = None,
        height: int | None = None,
        *,
        selection: PixelRect | None = None,
    ) -> np.ndarray:
        if width is not None:
            self.width = int(width)
        if height is not None:
            self.height = int(height)
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        surface = RasterSurface(
            self.width,
            self.height,
            background=self.background,
            font_size_px=self.config.font_size_px,
        )
        self.render(surface, selection=selection)
        LOGGER.debug("rendered %d boxes at %dx%d", len(self.boxes()), self.width, self.height)
        self._last_frame_rgba = surface.to_rgba()
        return self._last_frame_rgba

    def last_frame_rgba(self) -> np.ndarray | None:
        if self._last_frame_rgba is None:
            return None
        return self._last_frame_rgba.copy()
