from plotbox.box import PixelRect, PlotBox
from plotbox.config import PlotConfig
from plotbox.errors import InvalidArgumentError, LengthMismatchError, PlotDataError
from plotbox.figure import Figure
from plotbox.grid import GridLayout
from plotbox.interaction import GestureResult, pan, pan_ruler, zoom_at_point, zoom_box, zoom_range
from plotbox.navigation import PointerNavigator
from plotbox.render import render_box
from plotbox.ruler import Ruler
from plotbox.series import Series
from plotbox.session import Session
from plotbox.surface import DrawingSurface, RasterSurface

__all__ = [
    "DrawingSurface",
    "Figure",
    "GestureResult",
    "GridLayout",
    "InvalidArgumentError",
    "LengthMismatchError",
    "PixelRect",
    "PlotBox",
    "PlotConfig",
    "PlotDataError",
    "PointerNavigator",
    "RasterSurface",
    "Ruler",
    "Series",
    "Session",
    "pan",
    "pan_ruler",
    "render_box",
    "zoom_at_point",
    "zoom_box",
    "zoom_range",
]
