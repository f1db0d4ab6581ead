"""Solver backend implementations + registry."""

from __future__ import annotations

from typing import Dict

from .common import Backend, BackendResult
from .scipy_curve_fit import ScipyCurveFitBackend
from .scipy_differential_evolution import ScipyDifferentialEvolutionBackend

_BACKENDS: Dict[str, Backend] = {
    "scipy.curve_fit": ScipyCurveFitBackend(),
    "scipy.differential_evolution": ScipyDifferentialEvolutionBackend(),
}


def get_backend(name: str) -> Backend:
    """Return a backend implementation by name."""
    try:
        return _BACKENDS[name]
    except KeyError as e:
        raise ValueError(
            f"Unknown backend {name!r}. Available: {tuple(_BACKENDS.keys())}"
        ) from e


AVAILABLE_BACKENDS = tuple(_BACKENDS.keys())

__all__ = ["Backend", "BackendResult", "get_backend", "AVAILABLE_BACKENDS"]
