from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

import numpy as np


def plot_fit(
    fit: Any,
    *,
    x: Optional[Any] = None,
    y: Optional[Any] = None,
    ax: Optional[Any] = None,
    data_kwargs: Optional[Mapping[str, Any]] = None,
    line_kwargs: Optional[Mapping[str, Any]] = None,
) -> Tuple[Any, Any]:
    """Plot data points and the fitted curve of any fit record on a Matplotlib Axes.

    Parameters
    ----------
    fit : Linear, Quadratic, Cubic or Spline
        The curve drawn is the record's fine grid (fit.x, fit.y).
    x, y : array-like, optional
        1D data to draw as points.
    ax : matplotlib.axes.Axes, optional
        If None, a new figure/axes is created.
    data_kwargs, line_kwargs : dict, optional
        Styling kwargs for the data points and the fit line.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure

    data_kwargs = dict(data_kwargs or {})
    line_kwargs = dict(line_kwargs or {})

    if (x is None) != (y is None):
        raise ValueError("plot_fit requires both x and y, or neither.")
    if x is not None:
        x_arr = np.asarray(x, dtype=float)
        y_arr = np.asarray(y, dtype=float)
        if x_arr.ndim != 1 or x_arr.shape != y_arr.shape:
            raise ValueError("plot_fit requires 1D x and y of the same shape.")
        data_kwargs.setdefault("marker", "o")
        data_kwargs.setdefault("linestyle", "none")
        data_kwargs.setdefault("label", "data")
        ax.plot(x_arr, y_arr, **data_kwargs)

    line_kwargs.setdefault("label", type(fit).__name__.lower())
    ax.plot(np.asarray(fit.x), np.asarray(fit.y), **line_kwargs)
    ax.legend()
    return fig, ax
