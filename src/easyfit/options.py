from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

import numpy as np

__all__ = ["Options"]


@dataclass(frozen=True)
class Options:
    """Fit configuration, passed explicitly to every fit call.

    fine       : number of evenly spaced points of the resampled curve
    p0_range   : interval initial guesses are drawn from
    nbest      : times the best sum of squares must be reproduced before stopping
    besttol    : relative tolerance used to decide that two fits are the same
    maxtrials  : cap on solver attempts in the multi-start search
    maxfev     : forwarded to the backend (max function evaluations)
    seed       : seed for the initial-guess generator (None -> nondeterministic)
    backend    : solver backend name, see easyfit.backends
    strict     : raise instead of warning when input data has to be cleaned
    """

    fine: int = 100
    p0_range: Tuple[float, float] = (-1.0, 1.0)
    nbest: int = 3
    besttol: float = 1e-4
    maxtrials: int = 100
    maxfev: Optional[int] = None
    seed: Optional[int] = None
    backend: str = "scipy.curve_fit"
    backend_options: Dict[str, Any] = field(default_factory=dict)
    strict: bool = False

    def __post_init__(self) -> None:
        if not _is_int(self.fine) or self.fine < 1:
            raise ValueError(f"fine must be an integer >= 1, got {self.fine!r}.")
        if not _is_int(self.nbest) or self.nbest < 1:
            raise ValueError(f"nbest must be an integer >= 1, got {self.nbest!r}.")
        if not _is_int(self.maxtrials) or self.maxtrials < 1:
            raise ValueError(
                f"maxtrials must be an integer >= 1, got {self.maxtrials!r}."
            )
        if self.maxfev is not None and (not _is_int(self.maxfev) or self.maxfev < 0):
            raise ValueError(f"maxfev must be a non-negative integer, got {self.maxfev!r}.")
        if not (np.isfinite(self.besttol) and self.besttol >= 0.0):
            raise ValueError(f"besttol must be finite and >= 0, got {self.besttol!r}.")

        try:
            lo, hi = self.p0_range
        except (TypeError, ValueError) as exc:
            raise ValueError("p0_range must be a (low, high) pair.") from exc
        lo = float(lo)
        hi = float(hi)
        if not (np.isfinite(lo) and np.isfinite(hi) and lo < hi):
            raise ValueError(
                f"p0_range must be finite with low < high, got {self.p0_range!r}."
            )
        object.__setattr__(self, "p0_range", (lo, hi))
        object.__setattr__(self, "backend_options", dict(self.backend_options))

    def replace(self, **changes: Any) -> "Options":
        """Return a copy with some fields changed (validated again)."""
        return replace(self, **changes)


def _is_int(v: Any) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, bool)
