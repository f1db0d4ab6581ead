"""easyfit public API."""
from .bounds import BoundSpec, Lower, Upper, check_bound_names, lower, set_bounds, upper
from .errors import (
    BoundDimensionError,
    BoundError,
    BoundTypeError,
    FitDidNotConvergeError,
    InvertedBoundsError,
    UnboundableParameterError,
    UnknownParameterError,
)
from .fitting import ModelFamily, fit_model
from .models import (
    Cubic,
    Linear,
    Quadratic,
    Spline,
    fit_cubic,
    fit_linear,
    fit_quadratic,
    fit_spline,
    fitcubic,
    fitlinear,
    fitquad,
    fitquadratic,
    fitspline,
)
from .options import Options
from .schema import VarType
from . import models

__all__ = [
    "BoundSpec",
    "Lower",
    "Upper",
    "lower",
    "upper",
    "set_bounds",
    "check_bound_names",
    "BoundError",
    "UnknownParameterError",
    "UnboundableParameterError",
    "BoundTypeError",
    "BoundDimensionError",
    "InvertedBoundsError",
    "FitDidNotConvergeError",
    "ModelFamily",
    "fit_model",
    "Options",
    "VarType",
    "Linear",
    "Quadratic",
    "Cubic",
    "Spline",
    "fit_linear",
    "fit_quadratic",
    "fit_cubic",
    "fit_spline",
    "fitlinear",
    "fitquad",
    "fitquadratic",
    "fitcubic",
    "fitspline",
    "models",
]
