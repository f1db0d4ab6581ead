from __future__ import annotations

from .cubic import CUBIC, Cubic, cubic_func, fit_cubic, fitcubic
from .linear import LINEAR, Linear, fit_linear, fitlinear, linear_func
from .quadratic import QUADRATIC, Quadratic, fit_quadratic, fitquad, fitquadratic, quadratic_func
from .spline import Spline, fit_spline, fitspline

__all__ = [
    "CUBIC",
    "Cubic",
    "cubic_func",
    "fit_cubic",
    "fitcubic",
    "LINEAR",
    "Linear",
    "fit_linear",
    "fitlinear",
    "linear_func",
    "QUADRATIC",
    "Quadratic",
    "fit_quadratic",
    "fitquad",
    "fitquadratic",
    "quadratic_func",
    "Spline",
    "fit_spline",
    "fitspline",
]
