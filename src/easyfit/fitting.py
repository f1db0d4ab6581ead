from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

import numpy as np

from .analysis import finexy, pearson
from .bounds import Lower, Upper, check_bound_names, set_bounds
from .data import check_data
from .options import Options
from .schema import Schema, names, total_dim, validate_schema, without
from .solver import find_best_fit

__all__ = ["ModelFamily", "fit_model"]


@dataclass(frozen=True)
class ModelFamily:
    """A closed-form model shape plus its parameter metadata.

    func(x, *params) takes the parameters in schema order. `fixable` names the
    one parameter that may be replaced by a constant for a fit call (or None).
    `record` builds the result as record(*coefficients, R, x, y, ypred, residues).
    """

    name: str
    func: Callable[..., Any]
    schema: Schema
    fixable: Optional[str]
    record: Callable[..., Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "schema", validate_schema(self.schema))
        if self.fixable is not None and self.fixable not in names(self.schema):
            raise ValueError(
                f"Fixable parameter {self.fixable!r} is not in the schema of {self.name!r}."
            )
        if self.fixable is not None:
            var = self.schema[names(self.schema).index(self.fixable)]
            if var.dim != 1:
                raise ValueError(f"Fixable parameter {self.fixable!r} must be a scalar.")


def fit_model(
    x: Any,
    y: Any,
    family: ModelFamily,
    l: Optional[Lower] = None,
    u: Optional[Upper] = None,
    *,
    fixed: Optional[float] = None,
    options: Optional[Options] = None,
) -> Any:
    """Fit `family` to (x, y) and return its result record.

    Without `fixed`, every parameter is free and bounds are checked against the
    full schema. With `fixed`, the fixable parameter is dropped from the schema,
    closed over as a constant and reinserted in its slot of the coefficients.
    """
    options = Options() if options is None else options
    X, Y = check_data(x, y, options)

    if fixed is None:
        lo, hi = set_bounds(family.schema, l, u)
        model = family.func
        fit = find_best_fit(model, X, Y, total_dim(family.schema), options, lo, hi)
        coefficients: Tuple[float, ...] = tuple(float(p) for p in fit.param)
    else:
        if family.fixable is None:
            raise ValueError(f"{family.name} has no parameter that can be fixed.")
        value = _check_fixed(family.fixable, fixed)
        i = names(family.schema).index(family.fixable)
        slot = total_dim(family.schema[:i])
        # Bound names are checked against every parameter, fixed one included.
        check_bound_names(family.schema, l, u)
        reduced = without(family.schema, family.fixable)
        lo, hi = set_bounds(reduced, l, u)
        model = _fixed_model(family.func, slot, value)
        fit = find_best_fit(model, X, Y, total_dim(reduced), options, lo, hi)
        free = [float(p) for p in fit.param]
        coefficients = tuple(free[:slot] + [value] + free[slot:])

    R = pearson(X, Y, model, fit)
    xfine, yfine, ypred = finexy(X, options.fine, model, fit)
    return family.record(*coefficients, R, xfine, yfine, ypred, fit.resid)


def _fixed_model(func: Callable[..., Any], slot: int, value: float) -> Callable[..., Any]:
    def model_const(x, *p):
        args = list(p)
        args.insert(slot, value)
        return func(x, *args)

    return model_const


def _check_fixed(name: str, value: Any) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}.")
    value = float(value)
    if not np.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}.")
    return value
