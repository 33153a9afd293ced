from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from fft_explorer.utils.validation import as_1d_array


def transform(samples: np.ndarray | Sequence[float]) -> np.ndarray:
    """Compute the discrete Fourier transform of a real-valued signal.

    Uses the negative-exponent convention,
    ``X[k] = sum_t x[t] * (cos(2 pi k t / N) - 1j * sin(2 pi k t / N))``.
    Power-of-two lengths go through a recursive radix-2 FFT; every other
    length falls back to :func:`direct_dft`.

    Parameters
    ----------
    samples : array_like
        1-D sequence of real samples taken at unit intervals.  May be empty.
        Non-finite values are not rejected and propagate into the output.

    Returns
    -------
    spectrum : ndarray
        Fresh ``complex128`` array of length ``N``.  An empty input yields a
        single zero-valued bin.
    """

    values = as_1d_array(samples, "samples", dtype=float, allow_empty=True)
    return _transform(values)


def direct_dft(samples: np.ndarray | Sequence[float]) -> np.ndarray:
    """Evaluate the DFT definition directly in ``O(N^2)`` operations."""

    values = as_1d_array(samples, "samples", dtype=float, allow_empty=True)
    n = values.size
    if n == 0:
        return np.zeros(0, dtype=np.complex128)
    index = np.arange(n, dtype=float)
    angle = 2.0 * np.pi * np.outer(index, index) / n
    real = np.cos(angle) @ values
    imag = -(np.sin(angle) @ values)
    return real + 1j * imag


def is_power_of_two(n: int) -> bool:
    """Return True when ``n`` is a positive integer power of two."""
    n = int(n)
    return n > 0 and (n & (n - 1)) == 0


def _transform(values: np.ndarray) -> np.ndarray:
    n = values.size
    if n <= 1:
        first = float(values[0]) if n == 1 else 0.0
        return np.array([complex(first, 0.0)], dtype=np.complex128)
    if not is_power_of_two(n):
        return direct_dft(values)

    half = n // 2
    even = _transform(values[0::2])
    odd = _transform(values[1::2])
    assert even.size == half and odd.size == half, "radix-2 halves must have length N/2"

    angle = -2.0 * np.pi * np.arange(half, dtype=float) / n
    twiddle = np.cos(angle) + 1j * np.sin(angle)
    odd_term = odd * twiddle
    return np.concatenate([even + odd_term, even - odd_term])


__all__ = ["direct_dft", "is_power_of_two", "transform"]
