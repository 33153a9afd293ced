"""Input validation helpers shared across the package."""

from __future__ import annotations

import numpy as np


def as_1d_array(
    values: np.ndarray,
    name: str,
    *,
    dtype: np.dtype | None = None,
    allow_empty: bool = False,
) -> np.ndarray:
    """Return a validated 1D NumPy array, non-empty unless ``allow_empty``."""

    array = np.asarray(values, dtype=dtype)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1D array.")
    if array.size == 0 and not allow_empty:
        raise ValueError(f"{name} cannot be empty.")
    return array


def as_point_count(value: int, name: str, *, minimum: int = 0) -> int:
    """Cast to int and raise if below ``minimum``."""

    count = int(value)
    if count < minimum:
        raise ValueError(f"{name} must be >= {minimum}.")
    return count


__all__ = ["as_1d_array", "as_point_count"]
