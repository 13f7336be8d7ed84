from __future__ import annotations

import logging
from typing import Any, Literal

from plotbox.adapters import normalize_xy
from plotbox.box import PlotBox
from plotbox.config import PlotConfig
from plotbox.errors import InvalidArgumentError, PlotDataError
from plotbox.figure import Figure
from plotbox.series import Ownership, Series


LOGGER = logging.getLogger(__name__)


class Session:
    """MATLAB-flavoured command context.

    Holds the current figure and the current box for the ``plot``/``xlabel``/
    ``axis``/``subplot`` style commands. Each session is independent; nothing
    is kept at module level, so two sessions never see each other's figures.

    Commands that act on the current box (``xlabel``, ``ylabel``, ``axis``,
    ``hold``) do nothing while no box exists yet.
    """

    def __init__(self, config: PlotConfig | None = None, *, width: int = 800, height: int = 600) -> None:
        self.config = config or PlotConfig()
        self.width = width
        self.height = height
        self._figures: list[Figure] = []
        self._figure: Figure | None = None
        self._box: PlotBox | None = None

    @property
    def figures(self) -> tuple[Figure, ...]:
        return tuple(self._figures)

    def figure(self) -> Figure:
        """Open a new figure and make it current; the next plot creates its box."""
        fig = Figure(width=self.width, height=self.height, config=self.config)
        self._figures.append(fig)
        self._figure = fig
        self._box = None
        return fig

    def gcf(self) -> Figure:
        if self._figure is None:
            return self.figure()
        return self._figure

    def gca(self) -> PlotBox:
        if self._box is None:
            fig = self.gcf()
            self._box = fig.last_box() or fig.add_box()
        return self._box

    def set_current_box(self, box: PlotBox) -> None:
        if box not in self.gcf().boxes():
            raise InvalidArgumentError("box does not belong to the current figure")
        self._box = box

    def plot(
        self,
        y: Any,
        x: Any = None,
        *,
        data: Any = None,
        ownership: Ownership = "copied",
        color: tuple[int, int, int] | tuple[int, int, int, int] | None = None,
        line_width: int = 1,
        label: str | None = None,
    ) -> Series:
        series = _make_series(y, x, data=data, ownership=ownership, color=color, line_width=line_width, label=label)
        return self.gca().add_series(series)

    def plotyy(self, x1: Any, y1: Any, x2: Any, y2: Any) -> tuple[Series, Series]:
        """Plot ``y1`` against the left ruler and ``y2`` against the right one."""
        first, second = self.plotmy(x1, y1, x2, y2)
        return first, second

    def plotmy(self, *pairs: Any) -> list[Series]:
        """Plot ``x1, y1, x2, y2, ...``; pair ``k`` goes to Y ruler ``k``.

        Rulers beyond the second are stacked left of the primary one.
        """
        if not pairs or len(pairs) % 2 != 0:
            raise InvalidArgumentError("plotmy expects x/y pairs")
        series = [_make_series(pairs[i + 1], pairs[i]) for i in range(0, len(pairs), 2)]

        box = self.gca()
        box.ensure_y_rulers(len(series))
        prev_hold = box.hold
        if not prev_hold:
            box.clear()
        box.set_hold(True)
        try:
            for idx, s in enumerate(series):
                box.add_series(s, idx)
            if not prev_hold:
                box.autoscale_x()
                for idx in range(len(series)):
                    box.autoscale_y(idx)
        finally:
            box.set_hold(prev_hold)
        return series

    def xlabel(self, text: str | None) -> None:
        if self._box is None:
            LOGGER.debug("xlabel ignored without a current box")
            return
        self._box.set_xlabel(text)

    def ylabel(self, text: str | None, target: int = 1) -> None:
        """Label Y ruler ``target``, counted from 1 for the primary ruler."""
        if isinstance(target, bool) or not isinstance(target, int) or target < 1:
            raise InvalidArgumentError(f"invalid ylabel target: {target!r}")
        if self._box is None:
            LOGGER.debug("ylabel ignored without a current box")
            return
        self._box.set_ylabel(text, target - 1)

    def axis(self, x1: float, x2: float, y1: float, y2: float) -> None:
        if self._box is None:
            LOGGER.debug("axis ignored without a current box")
            return
        self._box.set_xlim(x1, x2)
        self._box.set_ylim(y1, y2)

    def hold(self, state: bool | Literal["on", "off"]) -> None:
        if state == "on":
            value = True
        elif state == "off":
            value = False
        elif isinstance(state, bool):
            value = state
        else:
            raise InvalidArgumentError(f"hold expects 'on', 'off' or a bool, got {state!r}")
        if self._box is None:
            LOGGER.debug("hold ignored without a current box")
            return
        self._box.set_hold(value)

    def subplot(self, cols: int, rows: int, number: int) -> PlotBox:
        """Select box ``number`` (1-based, row-major) of a ``cols`` x ``rows`` grid.

        A grid of other dimensions is replaced; a current box outside any grid
        clears the figure first.
        """
        fig = self.gcf()
        grid = fig.grid
        if self._box is not None and (grid is None or self._box not in grid.boxes):
            fig.clear()
            grid = None
        if grid is None or grid.cols != cols or grid.rows != rows:
            grid = fig.set_grid(cols, rows)
        self._box = grid.box_number(number)
        return self._box


def _make_series(y: Any, x: Any = None, *, data: Any = None, ownership: Ownership = "copied", **style: Any) -> Series:
    if ownership == "referenced":
        if x is None:
            raise PlotDataError("referenced series need explicit x data")
        return Series.referenced(x, y, **style)
    x_arr, y_arr = normalize_xy(y, x=x, data=data)
    return Series.copied(x_arr, y_arr, **style)
