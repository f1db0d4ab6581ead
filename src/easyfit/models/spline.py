from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
from scipy.interpolate import CubicSpline

from ..data import check_data
from ..options import Options
from ..util import freeze_arrays, preview


@dataclass(frozen=True)
class Spline:
    """Points of a natural cubic spline through the data (x, y on a fine grid)."""

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        freeze_arrays(self, "x", "y")

    def __call__(self, x: Any) -> Any:
        """Not available: the curve is parametric in the sample index.

        x and y are both interpolated against 0..n-1, so unsorted or repeated x
        give a curve with several y per x. Use the sampled `x`, `y` instead.
        """
        raise NotImplementedError("Point predictions are not available for spline fits.")

    def summary(self, digits: int = 6) -> str:
        return "\n".join(
            [
                " -------- Spline fit --------------------------- ",
                f" x spline: x = {preview(self.x, digits=digits)}",
                f" y spline: y = {preview(self.y, digits=digits)}",
                " ----------------------------------------------- ",
            ]
        )


def fit_spline(x: Any, y: Any, options: Optional[Options] = None) -> Spline:
    """Natural cubic spline through (x, y), sampled at options.fine points.

    Both coordinates are interpolated against the sample index, so x does not
    need to be sorted or unique.
    """
    options = Options() if options is None else options
    X, Y = check_data(x, y, options)
    n = X.size
    if n < 2:
        raise ValueError("A spline needs at least 2 data points.")

    t = np.arange(n, dtype=float)
    spl = CubicSpline(t, np.column_stack([X, Y]), bc_type="natural")
    tfine = np.linspace(0.0, float(n - 1), options.fine)
    pts = spl(tfine)
    return Spline(x=pts[:, 0], y=pts[:, 1])


fitspline = fit_spline
