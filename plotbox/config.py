from __future__ import annotations

from dataclasses import dataclass
import math
import os

from plotbox.errors import InvalidArgumentError


Position = tuple[float, float, float, float]

DEFAULT_BOX_POSITION: Position = (0.13, 0.11, 0.775, 0.815)
DEFAULT_GRID_INSET: Position = (0.22, 0.20, 0.67, 0.70)
DEFAULT_MULTI_Y_SPACING = 0.12


@dataclass(frozen=True)
class PlotConfig:
    box_position: Position = DEFAULT_BOX_POSITION
    grid_inset: Position = DEFAULT_GRID_INSET
    multi_y_spacing: float = DEFAULT_MULTI_Y_SPACING
    wheel_zoom_in: float = 0.8
    wheel_zoom_out: float = 1.25
    min_zoom_box_px: int = 5
    tick_length_px: int = 5
    font_size_px: float = 12.0

    def __post_init__(self) -> None:
        if len(self.box_position) != 4 or len(self.grid_inset) != 4:
            raise InvalidArgumentError("positions must have 4 values")
        if self.multi_y_spacing < 0:
            raise InvalidArgumentError("multi_y_spacing must be >= 0")
        if self.wheel_zoom_in <= 0 or self.wheel_zoom_out <= 0:
            raise InvalidArgumentError("wheel zoom factors must be > 0")
        if self.min_zoom_box_px < 0:
            raise InvalidArgumentError("min_zoom_box_px must be >= 0")
        if self.font_size_px <= 0:
            raise InvalidArgumentError("font_size_px must be > 0")

    @classmethod
    def from_env(
        cls,
        *,
        spacing_env_var: str = "PLOTBOX_MULTI_Y_SPACING",
        zoom_in_env_var: str = "PLOTBOX_WHEEL_ZOOM_IN",
        zoom_out_env_var: str = "PLOTBOX_WHEEL_ZOOM_OUT",
        font_env_var: str = "PLOTBOX_FONT_SIZE_PX",
    ) -> "PlotConfig":
        defaults = cls()
        return cls(
            multi_y_spacing=_parse_float(spacing_env_var, defaults.multi_y_spacing),
            wheel_zoom_in=_parse_float(zoom_in_env_var, defaults.wheel_zoom_in),
            wheel_zoom_out=_parse_float(zoom_out_env_var, defaults.wheel_zoom_out),
            font_size_px=_parse_float(font_env_var, defaults.font_size_px),
        )


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"{env_var} must be a number, got {raw!r}") from exc
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{env_var} must be finite, got {raw!r}")
    return value
