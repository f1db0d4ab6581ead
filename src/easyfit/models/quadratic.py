from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

from ..bounds import Lower, Upper
from ..fitting import ModelFamily, fit_model
from ..options import Options
from ..schema import NOTHING, NUMBER, VarType
from ..util import as_input, freeze_arrays, mean_square, preview


def quadratic_func(x, a, b, c):
    """y = a*x^2 + b*x + c"""
    return a * x**2 + b * x + c


@dataclass(frozen=True)
class Quadratic:
    """Result of a quadratic fit ``y = a*x^2 + b*x + c``.

    x, y     : fine-grid abscissa and the fitted curve on it
    ypred    : fitted curve at the input data points
    residues : ypred - y_data on the input data points

    Calling the record on new inputs gives point predictions::

        >>> fit = fit_quadratic(x, y)
        >>> fit(0.5)
        >>> fit(np.linspace(0, 1, 10))
    """

    a: float
    b: float
    c: float
    R: float
    x: np.ndarray
    y: np.ndarray
    ypred: np.ndarray
    residues: np.ndarray

    def __post_init__(self) -> None:
        freeze_arrays(self, "x", "y", "ypred", "residues")

    def __call__(self, x: Any) -> Any:
        return quadratic_func(as_input(x), self.a, self.b, self.c)

    @property
    def coefficients(self) -> Tuple[float, float, float]:
        return (self.a, self.b, self.c)

    def summary(self, digits: int = 6) -> str:
        """Return a human-readable summary string for the fit."""
        return "\n".join(
            [
                " ------------------- Quadratic Fit ------------- ",
                " Equation: y = ax^2 + bx + c ",
                f" With: a = {self.a:.{digits}g}",
                f"       b = {self.b:.{digits}g}",
                f"       c = {self.c:.{digits}g}",
                f" Pearson correlation coefficient, R = {self.R:.{digits}g}",
                f" Average square residue = {mean_square(self.residues):.{digits}g}",
                f" Predicted Y: ypred = {preview(self.ypred, digits=digits)}",
                f" residues = {preview(self.residues, digits=digits)}",
                " ----------------------------------------------- ",
            ]
        )


QUADRATIC = ModelFamily(
    name="quadratic",
    func=quadratic_func,
    schema=(
        VarType("a", NUMBER, 1),
        VarType("b", NUMBER, 1),
        VarType("c", NOTHING, 1),
    ),
    fixable="c",
    record=Quadratic,
)


def fit_quadratic(
    x: Any,
    y: Any,
    l: Optional[Lower] = None,
    u: Optional[Upper] = None,
    *,
    c: Optional[float] = None,
    options: Optional[Options] = None,
) -> Quadratic:
    """Fit ``y = a*x^2 + b*x + c``.

    Optional bounds on a and b::

        fit_quadratic(x, y, lower(b=0.0), upper(a=5.0, b=7.0))

    The intercept cannot be bounded; it can be fixed instead::

        fit_quadratic(x, y, c=3.0)
    """
    return fit_model(x, y, QUADRATIC, l, u, fixed=c, options=options)


fitquadratic = fit_quadratic
fitquad = fit_quadratic
