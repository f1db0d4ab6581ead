from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

__all__ = [
    "VarType",
    "Schema",
    "NUMBER",
    "VECTOR",
    "NOTHING",
    "total_dim",
    "names",
    "without",
    "validate_schema",
]

# Type tags for bounds
NUMBER = "number"  # real scalar; broadcasts when dim > 1
VECTOR = "vector"  # sequence of exactly `dim` reals
NOTHING = "nothing"  # not boundable: only settable as a fixed constant

_TAGS = (NUMBER, VECTOR, NOTHING)


@dataclass(frozen=True)
class VarType:
    """Static description of one model parameter."""

    name: str
    type: str = NUMBER
    dim: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Parameter name must be a non-empty string.")
        if self.type not in _TAGS:
            raise ValueError(
                f"Unknown type tag {self.type!r} for {self.name!r}; expected one of {_TAGS}."
            )
        if (
            not isinstance(self.dim, (int, np.integer))
            or isinstance(self.dim, bool)
            or self.dim < 1
        ):
            raise ValueError(f"dim of {self.name!r} must be an integer >= 1, got {self.dim!r}.")
        object.__setattr__(self, "dim", int(self.dim))

    @property
    def boundable(self) -> bool:
        return self.type != NOTHING


Schema = Tuple[VarType, ...]


def total_dim(schema: Iterable[VarType]) -> int:
    """Length of the flattened parameter vector described by `schema`."""
    return sum(v.dim for v in schema)


def names(schema: Iterable[VarType]) -> Tuple[str, ...]:
    return tuple(v.name for v in schema)


def without(schema: Iterable[VarType], name: str) -> Schema:
    """Return `schema` with the entry `name` removed, order preserved."""
    schema = tuple(schema)
    if name not in names(schema):
        raise KeyError(name)
    return tuple(v for v in schema if v.name != name)


def validate_schema(schema: Iterable[VarType]) -> Schema:
    """Check entries are VarType with unique names; return the schema as a tuple."""
    schema = tuple(schema)
    for v in schema:
        if not isinstance(v, VarType):
            raise TypeError(f"Schema entries must be VarType, got {type(v).__name__}.")
    n = names(schema)
    if len(set(n)) != len(n):
        raise ValueError(f"Duplicate parameter names in schema: {n}.")
    return schema
