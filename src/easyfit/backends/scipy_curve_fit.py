from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

import numpy as np
from scipy.optimize import OptimizeWarning, curve_fit
import warnings

from .common import BackendResult


class ScipyCurveFitBackend:
    name = "scipy.curve_fit"

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
        kwargs: Dict[str, Any] = {}
        maxfev = options.get("maxfev", None)
        if maxfev is not None:
            kwargs["maxfev"] = int(maxfev)

        try:
            with warnings.catch_warnings():
                # Covariance can't always be estimated (e.g. exact data); the fit is still valid.
                warnings.simplefilter("ignore", OptimizeWarning)
                popt, _ = curve_fit(
                    model,
                    x,
                    y,
                    p0=np.asarray(p0, dtype=float),
                    bounds=(np.asarray(bounds[0]), np.asarray(bounds[1])),
                    **kwargs,
                )
        except (RuntimeError, ValueError, np.linalg.LinAlgError) as e:
            # Soft fail: the multi-start loop decides what to do.
            return BackendResult(
                theta=np.asarray(p0, dtype=float),
                success=False,
                message=str(e),
                stats={"backend": self.name, "error": str(e)},
            )

        return BackendResult(
            theta=np.asarray(popt, dtype=float),
            success=True,
            message="ok",
            stats={"backend": self.name},
        )
