from __future__ import annotations


class PlotDataError(ValueError):
    """Base error for invalid plot input."""


class LengthMismatchError(PlotDataError):
    pass


class InvalidArgumentError(PlotDataError):
    pass
