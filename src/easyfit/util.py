from __future__ import annotations

from typing import Any

import numpy as np


def readonly(v: Any) -> np.ndarray:
    """Copy `v` into a float array that cannot be modified in place."""
    arr = np.array(v, dtype=float)
    arr.flags.writeable = False
    return arr


def freeze_arrays(obj: Any, *fields: str) -> None:
    """Replace array fields of a frozen dataclass with read-only copies."""
    for name in fields:
        object.__setattr__(obj, name, readonly(getattr(obj, name)))


def preview(arr: np.ndarray, n: int = 2, digits: int = 6) -> str:
    """Short '[v0, v1...' rendering of the start of an array."""
    head = ", ".join(f"{float(v):.{digits}g}" for v in np.asarray(arr)[:n])
    return f"[{head}..." if np.asarray(arr).size > n else f"[{head}]"


def mean_square(arr: np.ndarray) -> float:
    a = np.asarray(arr, dtype=float)
    return float(np.mean(a * a)) if a.size else float("nan")


def as_input(x: Any) -> Any:
    """Scalars pass through; anything else becomes a float array (elementwise evaluation)."""
    return x if np.isscalar(x) else np.asarray(x, dtype=float)
