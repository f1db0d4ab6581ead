from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import numpy as np
from warnings import warn

from .backends import get_backend
from .backends.common import BackendResult
from .errors import FitDidNotConvergeError
from .options import Options

__all__ = ["FitResult", "find_best_fit", "initial_guess"]


@dataclass(frozen=True)
class FitResult:
    """Best solution found by the multi-start least-squares search."""

    param: np.ndarray  # in the order of the model's parameter vector
    resid: np.ndarray  # model(x, *param) - y, on the data that was fitted
    ssr: float
    ntrials: int
    backend: str


def find_best_fit(
    model: Callable[..., Any],
    x: np.ndarray,
    y: np.ndarray,
    n: int,
    options: Options,
    lower: np.ndarray,
    upper: np.ndarray,
) -> FitResult:
    """Least-squares fit of `model(x, *p)` to `y` with `n` free parameters.

    The backend is started from random initial guesses until the lowest sum of
    squared residuals has been found `options.nbest` times (within the relative
    tolerance `options.besttol`) or `options.maxtrials` attempts were made.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    lower = np.asarray(lower, dtype=float).reshape((-1,))
    upper = np.asarray(upper, dtype=float).reshape((-1,))
    if lower.shape != (n,) or upper.shape != (n,):
        raise ValueError(
            f"Bounds must have length {n}, got {lower.size} (lower) and {upper.size} (upper)."
        )
    if x.size < n:
        raise FitDidNotConvergeError(
            f"Cannot fit {n} parameters to {x.size} data point(s)."
        )

    backend = get_backend(options.backend)
    backend_options: Dict[str, Any] = dict(options.backend_options)
    if options.maxfev is not None:
        backend_options.setdefault("maxfev", options.maxfev)

    rng = np.random.default_rng(options.seed)
    best: Optional[BackendResult] = None
    best_ssr = np.inf
    nbest = 0
    last_message = "no attempt was made"
    ntrials = 0

    while nbest < options.nbest and ntrials < options.maxtrials:
        ntrials += 1
        p0 = initial_guess(rng, lower, upper, options.p0_range)
        r = backend.fit_one(
            model=model,
            x=x,
            y=y,
            p0=p0,
            bounds=(lower, upper),
            options=backend_options,
        )
        if not r.success:
            last_message = r.message
            continue

        ssr = _ssr(model, x, y, r.theta)
        if not np.isfinite(ssr):
            last_message = "non-finite residuals at the solver optimum"
            continue

        if best is not None and abs(ssr - best_ssr) <= options.besttol * max(1.0, best_ssr):
            nbest += 1
        elif ssr < best_ssr:
            best = r
            best_ssr = ssr
            nbest = 1

    if best is None:
        raise FitDidNotConvergeError(
            f"The fit did not converge after {ntrials} trial(s): {last_message}"
        )
    if nbest < options.nbest:
        warn(
            f"Best fit found {nbest} time(s) in {ntrials} trial(s), fewer than "
            f"nbest={options.nbest}; the result may not be the global optimum.",
            UserWarning,
            stacklevel=2,
        )

    theta = np.asarray(best.theta, dtype=float)
    resid = np.asarray(model(x, *theta), dtype=float) - y
    resid = np.broadcast_to(resid, y.shape).copy()
    return FitResult(
        param=theta,
        resid=resid,
        ssr=float(best_ssr),
        ntrials=ntrials,
        backend=backend.name,
    )


def initial_guess(
    rng: np.random.Generator,
    lower: np.ndarray,
    upper: np.ndarray,
    p0_range: tuple,
) -> np.ndarray:
    """Random starting point inside the box (lower, upper)."""
    lo_r, hi_r = p0_range
    p0 = rng.uniform(lo_r, hi_r, size=lower.shape)
    for j in range(p0.size):
        lo_j = lower[j]
        hi_j = upper[j]
        if lo_j <= p0[j] <= hi_j:
            continue
        if np.isfinite(lo_j) and np.isfinite(hi_j):
            p0[j] = rng.uniform(lo_j, hi_j)
        elif np.isfinite(lo_j):
            p0[j] = lo_j + (p0[j] - lo_r)
        else:
            p0[j] = hi_j - (hi_r - p0[j])
    return p0


def _ssr(model: Callable[..., Any], x: np.ndarray, y: np.ndarray, theta: np.ndarray) -> float:
    r = np.asarray(model(x, *theta), dtype=float) - y
    return float(np.sum(r * r))
