from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

from ..bounds import Lower, Upper
from ..fitting import ModelFamily, fit_model
from ..options import Options
from ..schema import NOTHING, NUMBER, VarType
from ..util import as_input, freeze_arrays, mean_square, preview


def linear_func(x, a, b):
    """y = a*x + b"""
    return a * x + b


@dataclass(frozen=True)
class Linear:
    """Result of a linear fit ``y = a*x + b``; callable as a point predictor."""

    a: float
    b: float
    R: float
    x: np.ndarray
    y: np.ndarray
    ypred: np.ndarray
    residues: np.ndarray

    def __post_init__(self) -> None:
        freeze_arrays(self, "x", "y", "ypred", "residues")

    def __call__(self, x: Any) -> Any:
        return linear_func(as_input(x), self.a, self.b)

    @property
    def coefficients(self) -> Tuple[float, float]:
        return (self.a, self.b)

    def summary(self, digits: int = 6) -> str:
        return "\n".join(
            [
                " ------------------- Linear Fit ---------------- ",
                " Equation: y = ax + b ",
                f" With: a = {self.a:.{digits}g}",
                f"       b = {self.b:.{digits}g}",
                f" Pearson correlation coefficient, R = {self.R:.{digits}g}",
                f" Average square residue = {mean_square(self.residues):.{digits}g}",
                f" Predicted Y: ypred = {preview(self.ypred, digits=digits)}",
                f" residues = {preview(self.residues, digits=digits)}",
                " ----------------------------------------------- ",
            ]
        )


LINEAR = ModelFamily(
    name="linear",
    func=linear_func,
    schema=(VarType("a", NUMBER, 1), VarType("b", NOTHING, 1)),
    fixable="b",
    record=Linear,
)


def fit_linear(
    x: Any,
    y: Any,
    l: Optional[Lower] = None,
    u: Optional[Upper] = None,
    *,
    b: Optional[float] = None,
    options: Optional[Options] = None,
) -> Linear:
    """Fit ``y = a*x + b``. The slope may be bounded; the intercept may be fixed with b=..."""
    return fit_model(x, y, LINEAR, l, u, fixed=b, options=options)


fitlinear = fit_linear
