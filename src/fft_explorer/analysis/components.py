"""Per-bin frequency components derived from a transformed spectrum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd

from fft_explorer.utils.validation import as_1d_array

DEFAULT_MIN_AMPLITUDE = 0.005
DEFAULT_MAX_COMPONENTS = 15

COMPONENT_TABLE_COLUMNS = ("frequency", "amplitude", "phase_rad")


@dataclass(frozen=True)
class FrequencyComponent:
    """One sinusoidal component isolated from a single spectrum bin."""

    frequency: int
    amplitude: float
    phase: float
    signal: np.ndarray


def extract_components(
    spectrum: np.ndarray | Sequence[complex],
    sample_count: int,
) -> list[FrequencyComponent]:
    """Turn spectrum bins into time-domain cosine components.

    Bins ``1 <= k < floor(M / 2)`` are used, where ``M`` is the spectrum
    length; DC and everything from Nyquist upward are skipped.  Each
    component carries

    * ``amplitude = 2 * |X[k]| / M``
    * ``phase = atan2(Im X[k], Re X[k])``
    * ``signal[i] = amplitude * cos(2 pi k i / N + phase)`` for
      ``i in [0, N)`` with ``N = sample_count``.

    Zero-energy bins still produce a (flat) component; choosing which
    components are worth drawing is left to
    :func:`select_significant_components`.

    Parameters
    ----------
    spectrum : array_like
        1-D complex spectrum as returned by
        :func:`fft_explorer.analysis.transform.transform`.
    sample_count : int
        Number of samples in the original signal.  Values ``<= 0`` yield no
        components.

    Returns
    -------
    list of FrequencyComponent
        Components in increasing order of ``frequency``.
    """

    bins = as_1d_array(spectrum, "spectrum", dtype=np.complex128, allow_empty=True)
    n = int(sample_count)
    if bins.size == 0 or n <= 0:
        return []

    m = bins.size
    index = np.arange(n, dtype=float)
    components: list[FrequencyComponent] = []
    for k in range(1, m // 2):
        re = float(bins[k].real)
        im = float(bins[k].imag)
        amplitude = 2.0 * float(np.sqrt(re * re + im * im)) / m
        phase = float(np.arctan2(im, re))
        signal = amplitude * np.cos(2.0 * np.pi * k * index / n + phase)
        signal.setflags(write=False)
        components.append(
            FrequencyComponent(frequency=k, amplitude=amplitude, phase=phase, signal=signal)
        )
    return components


def select_significant_components(
    components: Iterable[FrequencyComponent],
    *,
    min_amplitude: float = DEFAULT_MIN_AMPLITUDE,
    max_count: int | None = DEFAULT_MAX_COMPONENTS,
) -> list[FrequencyComponent]:
    """Keep the strongest components for display, ordered by frequency.

    Components are ranked by amplitude, those at or below ``min_amplitude``
    are dropped, at most ``max_count`` survive, and the result is re-sorted
    by ascending frequency.
    """

    if max_count is not None and max_count < 0:
        raise ValueError("max_count must be non-negative.")

    ranked = sorted(components, key=lambda c: c.amplitude, reverse=True)
    kept = [c for c in ranked if c.amplitude > float(min_amplitude)]
    if max_count is not None:
        kept = kept[:max_count]
    return sorted(kept, key=lambda c: c.frequency)


def components_table(components: Iterable[FrequencyComponent]) -> pd.DataFrame:
    """Tabulate component frequency, amplitude, and phase."""

    rows = [
        {
            "frequency": int(c.frequency),
            "amplitude": float(c.amplitude),
            "phase_rad": float(c.phase),
        }
        for c in components
    ]
    if not rows:
        return pd.DataFrame(
            {
                "frequency": pd.Series(dtype=int),
                "amplitude": pd.Series(dtype=float),
                "phase_rad": pd.Series(dtype=float),
            }
        )
    return pd.DataFrame(rows, columns=list(COMPONENT_TABLE_COLUMNS))


__all__ = [
    "COMPONENT_TABLE_COLUMNS",
    "DEFAULT_MAX_COMPONENTS",
    "DEFAULT_MIN_AMPLITUDE",
    "FrequencyComponent",
    "components_table",
    "extract_components",
    "select_significant_components",
]
