from __future__ import annotations

from typing import Sequence

from plotbox.box import PlotBox
from plotbox.config import Position, PlotConfig
from plotbox.errors import InvalidArgumentError


def _check_inset(inset: Sequence[float]) -> Position:
    if len(inset) != 4:
        raise InvalidArgumentError(f"grid inset needs 4 values, got {len(inset)}")
    x, y, w, h = (float(v) for v in inset)
    if w < 0 or h < 0:
        raise InvalidArgumentError("grid inset width and height must be >= 0")
    return (x, y, w, h)


class GridLayout:
    """``cols`` x ``rows`` boxes in row-major order, top row first.

    Each cell covers an equal share of the figure and the box inside it is
    placed by ``inset``, a position relative to the cell, so that every box
    keeps the same margins for its tick labels.
    """

    def __init__(
        self,
        cols: int = 1,
        rows: int = 1,
        *,
        inset: Sequence[float] | None = None,
        config: PlotConfig | None = None,
    ) -> None:
        self.config = config or PlotConfig()
        self._inset = _check_inset(inset if inset is not None else self.config.grid_inset)
        self._cols = 0
        self._rows = 0
        self._boxes: list[PlotBox] = []
        self.init_grid(cols, rows)

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def inset(self) -> Position:
        return self._inset

    @property
    def boxes(self) -> tuple[PlotBox, ...]:
        return tuple(self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)

    def init_grid(self, cols: int, rows: int) -> None:
        if cols < 0 or rows < 0:
            raise InvalidArgumentError("grid dimensions must be >= 0")
        self._cols = int(cols)
        self._rows = int(rows)
        self._boxes = [PlotBox(config=self.config) for _ in range(self._cols * self._rows)]
        self._update_positions()

    def set_grid_position(self, inset: Sequence[float]) -> None:
        self._inset = _check_inset(inset)
        self._update_positions()

    def cell_position(self, row: int, col: int) -> Position:
        self._check_cell(row, col)
        ix, iy, iw, ih = self._inset
        cols = float(self._cols)
        rows = float(self._rows)
        return (
            col / cols + ix / cols,
            (self._rows - row - 1) / rows + iy / rows,
            iw / cols,
            ih / rows,
        )

    def box(self, row: int, col: int) -> PlotBox:
        self._check_cell(row, col)
        return self._boxes[row * self._cols + col]

    def box_number(self, number: int) -> PlotBox:
        """Box by 1-based row-major number, as MATLAB's ``subplot`` counts."""
        if number < 1 or number > len(self._boxes):
            raise InvalidArgumentError(f"subplot number {number} outside 1..{len(self._boxes)}")
        return self._boxes[number - 1]

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise InvalidArgumentError(f"cell ({row}, {col}) outside {self._rows}x{self._cols} grid")

    def _update_positions(self) -> None:
        for row in range(self._rows):
            for col in range(self._cols):
                self._boxes[row * self._cols + col].set_position(self.cell_position(row, col))
