from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

import numpy as np
from scipy.optimize import differential_evolution

from .common import BackendResult


class ScipyDifferentialEvolutionBackend:
    name = "scipy.differential_evolution"

    def fit_one(
        self,
        *,
        model: Callable[..., Any],
        x: np.ndarray,
        y: np.ndarray,
        p0: np.ndarray,
        bounds: Tuple[np.ndarray, np.ndarray],
        options: Dict[str, Any],
    ) -> BackendResult:
        """Fit using scipy.optimize.differential_evolution (global optimisation).

        Notes:
        - Requires finite bounds for *all* parameters.
        - p0 is used as one member of the initial population (``x0``).
        - Hitting maxiter is not a failure: the polished best member is used.
        - A zero-width box (upper == lower) is reported as an unsuccessful
          attempt, like curve_fit.

        Backend options (subset of scipy.optimize.differential_evolution):
        - maxiter (int, default: 200)
        - popsize (int, default: 15)
        - tol (float, default: 0.01)
        - strategy (str, default: "best1bin")
        - mutation, recombination, seed, polish, init, atol, updating
        """
        y = np.asarray(y, dtype=float)
        lo, hi = bounds
        lo = np.asarray(lo, dtype=float).reshape((-1,))
        hi = np.asarray(hi, dtype=float).reshape((-1,))
        npar = int(np.asarray(p0).size)
        if lo.shape != (npar,) or hi.shape != (npar,):
            raise ValueError("Bounds shape mismatch for free parameters.")

        de_bounds = []
        for j in range(npar):
            lo_j = float(lo[j])
            hi_j = float(hi[j])
            if not (np.isfinite(lo_j) and np.isfinite(hi_j)):
                raise ValueError(
                    "scipy.differential_evolution requires finite bounds for all free parameters."
                )
            if hi_j <= lo_j:
                return BackendResult(
                    theta=np.asarray(p0, dtype=float),
                    success=False,
                    message=f"empty bounds box for parameter {j} (upper <= lower).",
                    stats={"backend": self.name},
                )
            de_bounds.append((lo_j, hi_j))

        def _residual(theta: np.ndarray) -> np.ndarray:
            ym = np.asarray(model(x, *np.asarray(theta, dtype=float)), dtype=float)
            return np.asarray(ym - y, dtype=float).reshape(-1)

        def objective(theta: np.ndarray) -> float:
            r = _residual(theta)
            if not np.all(np.isfinite(r)):
                return float("inf")
            return float(np.sum(r * r))

        de_kwargs: Dict[str, Any] = {}
        de_kwargs["maxiter"] = int(options.get("maxiter", 200))
        de_kwargs["popsize"] = int(options.get("popsize", 15))
        de_kwargs["tol"] = float(options.get("tol", 0.01))
        de_kwargs["strategy"] = str(options.get("strategy", "best1bin"))
        for k in ("mutation", "recombination", "seed", "polish", "init", "atol", "updating"):
            if k in options:
                de_kwargs[k] = options[k]

        p0 = np.clip(np.asarray(p0, dtype=float), lo, hi)
        res = differential_evolution(objective, de_bounds, x0=p0, **de_kwargs)
        theta = np.asarray(res.x, dtype=float)

        return BackendResult(
            theta=theta,
            success=bool(np.isfinite(res.fun)),
            message=str(res.message),
            stats={
                "backend": self.name,
                "fun": float(res.fun),
                "nfev": int(getattr(res, "nfev", 0) or 0),
                "nit": int(getattr(res, "nit", 0) or 0),
            },
        )
