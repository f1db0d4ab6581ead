from __future__ import annotations

from typing import Optional

__all__ = [
    "BoundError",
    "UnknownParameterError",
    "UnboundableParameterError",
    "BoundTypeError",
    "BoundDimensionError",
    "InvertedBoundsError",
    "FitDidNotConvergeError",
]


class BoundError(ValueError):
    """Base class for invalid lower/upper bound specifications."""

    def __init__(self, message: str, *, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.name = name


class UnknownParameterError(BoundError):
    """A bound names a parameter that the current fit function does not have."""


class UnboundableParameterError(BoundError):
    """A bound was set on a parameter that can only be fixed to a constant."""


class BoundTypeError(BoundError, TypeError):
    """A bound value is of the wrong kind (scalar vs sequence) for its parameter."""


class BoundDimensionError(BoundError):
    """A sequence bound does not match the parameter's dimension."""


class InvertedBoundsError(BoundError):
    """A lower bound is greater than the matching upper bound."""


class FitDidNotConvergeError(RuntimeError):
    """The least-squares solver could not produce a fit."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
