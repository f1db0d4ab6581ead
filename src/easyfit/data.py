from __future__ import annotations

from typing import Any, Optional, Tuple

import numpy as np
from warnings import warn

from .options import Options

__all__ = ["check_data"]


def check_data(
    x: Any, y: Any, options: Optional[Options] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """Return (x, y) as equal-length 1D float arrays with non-finite pairs removed.

    Pairs where either coordinate is NaN/inf are dropped with a warning, or
    rejected when options.strict is set.
    """
    options = Options() if options is None else options

    x_arr = _as_float_1d(x, "x")
    y_arr = _as_float_1d(y, "y")
    if x_arr.shape != y_arr.shape:
        raise ValueError(
            f"x and y must have the same length, got {x_arr.size} and {y_arr.size}."
        )

    keep = np.isfinite(x_arr) & np.isfinite(y_arr)
    if not np.all(keep):
        dropped = int(np.count_nonzero(~keep))
        _warn_or_raise(
            options.strict,
            f"Dropping {dropped} data pair(s) containing NaN or inf.",
        )
        x_arr = x_arr[keep]
        y_arr = y_arr[keep]

    if x_arr.size == 0:
        raise ValueError("No finite data points to fit.")
    return x_arr, y_arr


def _as_float_1d(v: Any, label: str) -> np.ndarray:
    arr = np.asarray(v)
    if arr.dtype == object or arr.dtype.kind not in "biuf":
        raise ValueError(f"{label} must be a numeric array, got dtype {arr.dtype}.")
    if arr.ndim != 1:
        raise ValueError(f"{label} must be one-dimensional, got shape {arr.shape}.")
    return arr.astype(float)


def _warn_or_raise(strict: bool, message: str) -> None:
    """Warn or raise based on strict mode."""
    if strict:
        raise ValueError(message)
    warn(message, UserWarning, stacklevel=3)
