from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import numpy as np

from .errors import (
    BoundDimensionError,
    BoundTypeError,
    InvertedBoundsError,
    UnboundableParameterError,
    UnknownParameterError,
)
from .schema import NUMBER, NOTHING, VECTOR, VarType, total_dim, validate_schema

__all__ = ["Lower", "Upper", "BoundSpec", "lower", "upper", "set_bounds", "check_bound_names"]


@dataclass(frozen=True)
class _BoundMap:
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", dict(self.values))

    def get(self, name: str) -> Any:
        """Return the bound for `name`, or None when unset."""
        return self.values.get(name)

    def set_names(self) -> Tuple[str, ...]:
        """Names carrying a bound (None counts as unset)."""
        return tuple(k for k, v in self.values.items() if v is not None)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self.values.items() if v is not None)
        return f"{type(self).__name__.lower()}({inner})"


class Lower(_BoundMap):
    """Partial lower bounds by parameter name."""


class Upper(_BoundMap):
    """Partial upper bounds by parameter name."""


def lower(**values: Any) -> Lower:
    """Lower bounds, e.g. ``lower(b=0.0)``."""
    return Lower(values)


def upper(**values: Any) -> Upper:
    """Upper bounds, e.g. ``upper(a=5.0, b=7.0)``."""
    return Upper(values)


@dataclass(frozen=True)
class BoundSpec:
    lower: Lower = field(default_factory=Lower)
    upper: Upper = field(default_factory=Upper)

    def resolve(self, schema: Iterable[VarType]) -> Tuple[np.ndarray, np.ndarray]:
        return set_bounds(schema, self.lower, self.upper)


def set_bounds(
    schema: Iterable[VarType],
    l: Optional[Lower] = None,
    u: Optional[Upper] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Validate user bounds against `schema` and return dense (lower, upper) arrays.

    Unset bounds become -inf / +inf. All name and kind checks run before the
    lower <= upper comparison, so a malformed value is never reported as an
    inverted bound.
    """
    schema = validate_schema(schema)
    l, u = _check_sides(l, u)
    by_name = {v.name: v for v in schema}
    check_bound_names(schema, l, u)

    n = total_dim(schema)
    lo = np.empty(n, dtype=float)
    hi = np.empty(n, dtype=float)
    owner: List[Tuple[str, int]] = []
    i = 0
    for var in schema:
        lo[i : i + var.dim] = _check_bound_input(var, l.get(var.name), "Lower", -np.inf)
        hi[i : i + var.dim] = _check_bound_input(var, u.get(var.name), "Upper", np.inf)
        owner.extend((var.name, k) for k in range(var.dim))
        i += var.dim

    for j in range(n):
        if lo[j] > hi[j]:
            name, k = owner[j]
            which = f"'{name}'" if by_name[name].dim == 1 else f"'{name}[{k}]'"
            raise InvertedBoundsError(
                f"Error in bounds. Lower bound of {which} ({lo[j]!r}) is greater "
                f"than its upper bound ({hi[j]!r}).",
                name=name,
            )

    lo.flags.writeable = False
    hi.flags.writeable = False
    return lo, hi


def check_bound_names(
    schema: Iterable[VarType],
    l: Optional[Lower] = None,
    u: Optional[Upper] = None,
) -> None:
    """Raise unless every bound targets a boundable variable of `schema`."""
    l, u = _check_sides(l, u)
    by_name = {v.name: v for v in validate_schema(schema)}
    for key in _ordered_union(l.set_names(), u.set_names()):
        var = by_name.get(key)
        if var is None:
            raise UnknownParameterError(
                f"A bound was set to variable '{key}', but '{key}' is not a "
                "variable of the current fit function.",
                name=key,
            )
        if var.type == NOTHING:
            raise UnboundableParameterError(
                f"Bounds to {key} are not supported. For a constant use {key}=const.",
                name=key,
            )


def _check_sides(l: Any, u: Any) -> Tuple[Lower, Upper]:
    if l is None:
        l = Lower()
    elif not isinstance(l, Lower):
        raise TypeError(f"Lower bounds must be given with lower(...), got {l!r}.")
    if u is None:
        u = Upper()
    elif not isinstance(u, Upper):
        raise TypeError(f"Upper bounds must be given with upper(...), got {u!r}.")
    return l, u


def _check_bound_input(var: VarType, value: Any, side: str, default: float) -> np.ndarray:
    """Return `value` as a float array of length var.dim, or raise."""
    if value is None:
        return np.full(var.dim, default, dtype=float)

    if isinstance(value, numbers.Real) and not isinstance(value, bool) and np.isnan(value):
        raise BoundTypeError(f"{side} bound of {var.name} must not be NaN.", name=var.name)

    if _is_real(value):
        if var.type != NUMBER:
            raise BoundTypeError(
                f"{side} bound of {var.name} must be a sequence of {var.dim} numbers, "
                f"got {type(value).__name__}.",
                name=var.name,
            )
        return np.full(var.dim, float(value), dtype=float)

    seq = _as_real_sequence(value)
    if seq is None:
        expected = "a number" if var.type == NUMBER else f"a sequence of {var.dim} numbers"
        raise BoundTypeError(
            f"{side} bound of {var.name} must be {expected}, got {type(value).__name__}.",
            name=var.name,
        )
    if var.type == NUMBER and var.dim == 1:
        raise BoundTypeError(
            f"{side} bound of {var.name} must be a number, got a sequence.",
            name=var.name,
        )
    if var.type not in (NUMBER, VECTOR):
        raise BoundTypeError(f"{side} bound of {var.name} is not supported.", name=var.name)
    if seq.shape[0] != var.dim:
        raise BoundDimensionError(
            f"{side} bound of {var.name} must be of dimension {var.dim}, got {seq.shape[0]}.",
            name=var.name,
        )
    return seq


def _is_real(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, np.ndarray) and value.shape == ():
        value = value.item()
        if isinstance(value, bool):
            return False
    return isinstance(value, numbers.Real) and not np.isnan(float(value))


def _as_real_sequence(value: Any) -> Optional[np.ndarray]:
    """1-D float array if `value` is a list/tuple/array of non-NaN reals, else None."""
    if isinstance(value, (list, tuple)):
        items = list(value)
    elif isinstance(value, np.ndarray) and value.ndim == 1:
        items = value.tolist()
    else:
        return None
    if not all(_is_real(v) for v in items):
        return None
    return np.asarray(items, dtype=float)


def _ordered_union(*groups: Iterable[str]) -> List[str]:
    seen: Dict[str, None] = {}
    for g in groups:
        for k in g:
            seen.setdefault(k, None)
    return list(seen)
