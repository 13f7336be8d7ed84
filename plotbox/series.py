from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

import numpy as np

from plotbox.adapters.normalize import coerce_1d
from plotbox.colors import RGBA, coerce_color
from plotbox.errors import LengthMismatchError, PlotDataError
from plotbox.ticks import NO_DATA_MAX, NO_DATA_MIN


Ownership = Literal["copied", "referenced"]


@dataclass(frozen=True)
class Extrema:
    lo: float
    hi: float
    finite: bool


def scan_extrema(values: np.ndarray) -> Extrema:
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return Extrema(lo=NO_DATA_MIN, hi=NO_DATA_MAX, finite=False)
    return Extrema(lo=float(np.min(finite)), hi=float(np.max(finite)), finite=True)


@dataclass(eq=False)
class Series:
    """One x/y data pair drawn as a polyline.

    ``ownership="copied"`` series hold private float64 copies and compute
    their extrema once. ``ownership="referenced"`` series keep the caller's
    numpy arrays and rescan them on every extrema access, so a caller can
    update a live buffer in place and have autoscale follow it. The caller
    keeps those buffers alive and serializes writes against reads; nothing
    here guards them.

    Prefer :meth:`copied` and :meth:`referenced`. Direct construction
    coerces non-array inputs of a copied series and keeps arrays as given.
    """

    x: np.ndarray
    y: np.ndarray
    ownership: Ownership = "copied"
    color: RGBA | None = None
    line_width: int = 1
    label: str | None = None
    _x_extrema: Extrema | None = field(default=None, repr=False)
    _y_extrema: Extrema | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.ownership not in ("copied", "referenced"):
            raise PlotDataError(f"unsupported ownership: {self.ownership}")
        if not (isinstance(self.x, np.ndarray) and isinstance(self.y, np.ndarray)):
            if self.ownership == "referenced":
                raise PlotDataError("referenced series need 1-D numpy arrays for x and y")
            self.x = coerce_1d(self.x, label="x")
            self.y = coerce_1d(self.y, label="y")
        if self.x.shape != self.y.shape:
            raise LengthMismatchError(f"x and y length mismatch: {self.x.size} != {self.y.size}")
        if self.ownership == "copied":
            self._x_extrema = scan_extrema(self.x)
            self._y_extrema = scan_extrema(self.y)

    @classmethod
    def attach(
        cls,
        x: Any,
        y: Any,
        ownership: Ownership = "copied",
        *,
        color: tuple[int, int, int] | RGBA | None = None,
        line_width: int = 1,
        label: str | None = None,
    ) -> "Series":
        if ownership == "referenced":
            for name, arr in (("x", x), ("y", y)):
                if not isinstance(arr, np.ndarray) or arr.ndim != 1:
                    raise PlotDataError(f"referenced series need 1-D numpy arrays for {name}")
            if len(x) != len(y):
                raise LengthMismatchError(f"x and y length mismatch: {len(x)} != {len(y)}")
            x_arr, y_arr = x, y
        else:
            x_arr = coerce_1d(x, label="x")
            y_arr = coerce_1d(y, label="y")
            if x_arr.size != y_arr.size:
                raise LengthMismatchError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
        return cls(
            x=x_arr,
            y=y_arr,
            ownership=ownership,
            color=coerce_color(color) if color is not None else None,
            line_width=max(1, int(line_width)),
            label=label,
        )

    @classmethod
    def copied(cls, x: Any, y: Any, **style: Any) -> "Series":
        return cls.attach(x, y, "copied", **style)

    @classmethod
    def referenced(cls, x: np.ndarray, y: np.ndarray, **style: Any) -> "Series":
        return cls.attach(x, y, "referenced", **style)

    def __len__(self) -> int:
        return int(self.x.size)

    def _x(self) -> Extrema:
        if self._x_extrema is None or self.ownership == "referenced":
            return scan_extrema(self.x)
        return self._x_extrema

    def _y(self) -> Extrema:
        if self._y_extrema is None or self.ownership == "referenced":
            return scan_extrema(self.y)
        return self._y_extrema

    @property
    def x_min(self) -> float:
        return self._x().lo

    @property
    def x_max(self) -> float:
        return self._x().hi

    @property
    def y_min(self) -> float:
        return self._y().lo

    @property
    def y_max(self) -> float:
        return self._y().hi

    @property
    def has_finite_x(self) -> bool:
        return bool(np.any(np.isfinite(self.x))) if self.ownership == "referenced" else self._x().finite

    @property
    def has_finite_y(self) -> bool:
        return bool(np.any(np.isfinite(self.y))) if self.ownership == "referenced" else self._y().finite

    def x_extrema(self) -> Extrema:
        return self._x()

    def y_extrema(self) -> Extrema:
        return self._y()

    def segments(self) -> list[tuple[int, int]]:
        """Index pairs ``(i, i + 1)`` whose endpoints are all finite."""
        if self.x.size < 2:
            return []
        finite = np.isfinite(self.x) & np.isfinite(self.y)
        keep = finite[:-1] & finite[1:]
        return [(int(i), int(i) + 1) for i in np.flatnonzero(keep)]
