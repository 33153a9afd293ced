"""Unit tests for shared validation helpers."""

from __future__ import annotations

import numpy as np
import pytest

from fft_explorer.utils.validation import as_1d_array, as_point_count


def test_as_1d_array_accepts_valid_input() -> None:
    values = as_1d_array([1.0, 2.0, 3.0], "values", dtype=float)
    assert values.ndim == 1
    assert values.shape == (3,)


def test_as_1d_array_rejects_non_1d() -> None:
    with pytest.raises(ValueError, match="must be a 1D array"):
        as_1d_array(np.zeros((2, 2)), "values")


def test_as_1d_array_empty_requires_opt_in() -> None:
    with pytest.raises(ValueError, match="cannot be empty"):
        as_1d_array([], "values")
    assert as_1d_array([], "values", dtype=float, allow_empty=True).shape == (0,)


def test_as_point_count_enforces_minimum() -> None:
    assert as_point_count(4.0, "n_points") == 4
    with pytest.raises(ValueError, match="n_points must be >= 1"):
        as_point_count(0, "n_points", minimum=1)
