from __future__ import annotations

from decimal import Decimal, InvalidOperation
import math
import sys

import numpy as np


# Extrema reported by a series without any finite value.
NO_DATA_MIN = sys.float_info.max
NO_DATA_MAX = -sys.float_info.max

DEGENERATE_SPAN = 1e-40


def is_no_data_pair(lo: float, hi: float) -> bool:
    return (lo == NO_DATA_MIN and hi == NO_DATA_MAX) or (lo == NO_DATA_MAX and hi == NO_DATA_MIN)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def linear_ticks(lo: float, step: float, hi: float) -> np.ndarray | None:
    """Evenly spaced ticks ``lo, lo+step, ...`` or ``None`` when the request is unusable.

    Non-finite arguments, a non-positive step and the no-data sentinel pair
    are all rejected, as is a range that would produce no tick at all.
    """
    if not (math.isfinite(lo) and math.isfinite(step) and math.isfinite(hi)):
        return None
    if is_no_data_pair(lo, hi):
        return None
    if step <= 0.0:
        return None
    count = round_half_up((hi - lo) / step) + 1
    if count < 1:
        return None
    return lo + step * np.arange(count, dtype=np.float64)


def label_fraction_digits(span: float) -> int:
    """Fraction digits giving roughly 2-3 significant digits over ``span``."""
    if not math.isfinite(span) or span <= 0.0:
        return 0
    digits = math.floor(math.log10(span)) - 2
    if digits < 0:
        return -digits
    return 0


def format_tick(value: float, fraction_digits: int) -> str:
    if not math.isfinite(value):
        return str(value)
    d = Decimal(repr(float(value)))
    quant = Decimal("1").scaleb(-fraction_digits)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_tick_labels(ticks: np.ndarray, limits: tuple[float, float]) -> list[str]:
    if ticks.size == 0:
        return []
    span = float(limits[1] - limits[0])
    if not math.isfinite(span) or span <= 0.0:
        span = float(ticks[-1] - ticks[0])
    digits = label_fraction_digits(span)
    return [format_tick(float(v), digits) for v in ticks]
