from __future__ import annotations

from typing import Any, Callable, Tuple

import numpy as np

from .solver import FitResult

__all__ = ["pearson", "finexy"]


def pearson(x: np.ndarray, y: np.ndarray, model: Callable[..., Any], fit: FitResult) -> float:
    """Pearson correlation between observed y and the model prediction at x.

    Returns nan when either series is constant.
    """
    y = np.asarray(y, dtype=float)
    ypred = _predict(model, x, fit, y.shape)
    if y.size < 2 or np.ptp(y) == 0.0 or np.ptp(ypred) == 0.0:
        return float("nan")
    return float(np.corrcoef(y, ypred)[0, 1])


def finexy(
    x: np.ndarray, fine: int, model: Callable[..., Any], fit: FitResult
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Resample the fitted curve.

    Returns (xfine, yfine, ypred): `fine` evenly spaced points over the range
    of x, the model on those points, and the model at the input x.
    """
    x = np.asarray(x, dtype=float)
    xfine = np.linspace(float(np.min(x)), float(np.max(x)), int(fine))
    yfine = _predict(model, xfine, fit, xfine.shape)
    ypred = _predict(model, x, fit, x.shape)
    return xfine, yfine, ypred


def _predict(model: Callable[..., Any], x: Any, fit: FitResult, shape: Tuple[int, ...]) -> np.ndarray:
    out = np.asarray(model(np.asarray(x, dtype=float), *fit.param), dtype=float)
    return np.broadcast_to(out, shape).copy()
