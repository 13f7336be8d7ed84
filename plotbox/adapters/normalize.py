from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from plotbox.errors import LengthMismatchError, PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


_NATIVE_KINDS = frozenset("iufb")


def normalize_xy(
    y: Any = None,
    *,
    x: Any = None,
    data: Any = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Coerce plot input into two float64 arrays of equal length.

    Without ``x`` the samples are numbered ``1..n`` as MATLAB's ``plot(y)``
    does. Non-finite samples are kept; they mark gaps in the drawn line.
    With ``data`` a pandas DataFrame, string arguments name its columns and
    an omitted ``y`` picks the frame's only numeric column.
    """
    frame = _frame_or_none(data)
    if frame is not None:
        y = _single_numeric_column(frame, "data") if y is None else _column_or_value(frame, y)
        if x is not None:
            x = _column_or_value(frame, x)
    elif _is_frame(y):
        y = _single_numeric_column(y, "1-D DataFrame input")

    if y is None:
        raise PlotDataError("y input is required")
    y_arr = coerce_1d(y, label="y")
    x_arr = np.arange(1, y_arr.size + 1, dtype=np.float64) if x is None else coerce_1d(x, label="x")
    if x_arr.size != y_arr.size:
        raise LengthMismatchError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
    return x_arr, y_arr


def coerce_1d(value: Any, *, label: str) -> np.ndarray:
    """Return a float64 copy of a 1-D numeric input."""
    if torch is not None and isinstance(value, torch.Tensor):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return value.detach().cpu().to(torch.float64).numpy().copy()
    if pd is not None and isinstance(value, pd.Series):
        value = value.to_numpy()
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        value = np.asarray(value, dtype=object).reshape(-1)
    elif not isinstance(value, np.ndarray):
        raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")

    if value.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")
    if value.dtype.kind in _NATIVE_KINDS:
        return value.astype(np.float64, copy=True)
    return np.fromiter((_as_float(v, label, i) for i, v in enumerate(value.tolist())), dtype=np.float64, count=value.size)


def _as_float(raw: Any, label: str, index: int) -> float:
    if raw is None:
        return float("nan")
    if isinstance(raw, Decimal):
        return float(raw)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"{label} contains non-numeric value at index {index}: {raw!r}") from exc


def _is_frame(value: Any) -> bool:
    return pd is not None and isinstance(value, pd.DataFrame)


def _frame_or_none(data: Any) -> Any:
    if data is None:
        return None
    if pd is None:
        raise PlotDataError("pandas is required when using `data=`")
    if not isinstance(data, pd.DataFrame):
        raise PlotDataError("`data` must be a pandas DataFrame")
    return data


def _column_or_value(frame: Any, value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if value not in frame.columns:
        raise PlotDataError(f"column not found: {value}")
    return frame[value]


def _single_numeric_column(frame: Any, what: str) -> Any:
    numeric = [c for c in frame.columns if pd.api.types.is_numeric_dtype(frame[c])]
    if len(numeric) != 1:
        raise PlotDataError(f"{what} must have exactly one numeric column when y is omitted")
    return frame[numeric[0]]
