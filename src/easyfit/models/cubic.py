from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

from ..bounds import Lower, Upper
from ..fitting import ModelFamily, fit_model
from ..options import Options
from ..schema import NOTHING, NUMBER, VarType
from ..util import as_input, freeze_arrays, mean_square, preview


def cubic_func(x, a, b, c, d):
    """y = a*x^3 + b*x^2 + c*x + d"""
    return a * x**3 + b * x**2 + c * x + d


@dataclass(frozen=True)
class Cubic:
    """Result of a cubic fit ``y = a*x^3 + b*x^2 + c*x + d``."""

    a: float
    b: float
    c: float
    d: float
    R: float
    x: np.ndarray
    y: np.ndarray
    ypred: np.ndarray
    residues: np.ndarray

    def __post_init__(self) -> None:
        freeze_arrays(self, "x", "y", "ypred", "residues")

    def __call__(self, x: Any) -> Any:
        return cubic_func(as_input(x), self.a, self.b, self.c, self.d)

    @property
    def coefficients(self) -> Tuple[float, float, float, float]:
        return (self.a, self.b, self.c, self.d)

    def summary(self, digits: int = 6) -> str:
        return "\n".join(
            [
                " ------------------- Cubic Fit ----------------- ",
                " Equation: y = ax^3 + bx^2 + cx + d ",
                f" With: a = {self.a:.{digits}g}",
                f"       b = {self.b:.{digits}g}",
                f"       c = {self.c:.{digits}g}",
                f"       d = {self.d:.{digits}g}",
                f" Pearson correlation coefficient, R = {self.R:.{digits}g}",
                f" Average square residue = {mean_square(self.residues):.{digits}g}",
                f" Predicted Y: ypred = {preview(self.ypred, digits=digits)}",
                f" residues = {preview(self.residues, digits=digits)}",
                " ----------------------------------------------- ",
            ]
        )


CUBIC = ModelFamily(
    name="cubic",
    func=cubic_func,
    schema=(
        VarType("a", NUMBER, 1),
        VarType("b", NUMBER, 1),
        VarType("c", NUMBER, 1),
        VarType("d", NOTHING, 1),
    ),
    fixable="d",
    record=Cubic,
)


def fit_cubic(
    x: Any,
    y: Any,
    l: Optional[Lower] = None,
    u: Optional[Upper] = None,
    *,
    d: Optional[float] = None,
    options: Optional[Options] = None,
) -> Cubic:
    """Fit ``y = a*x^3 + b*x^2 + c*x + d``; bound a, b, c or fix d with d=..."""
    return fit_model(x, y, CUBIC, l, u, fixed=d, options=options)


fitcubic = fit_cubic
