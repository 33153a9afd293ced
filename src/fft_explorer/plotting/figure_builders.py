"""OOP figure builders that use GridSpec for final render layouts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from fft_explorer.analysis.components import (
    DEFAULT_MAX_COMPONENTS,
    DEFAULT_MIN_AMPLITUDE,
    FrequencyComponent,
    select_significant_components,
)
from fft_explorer.plotting.axes_plots import (
    plot_component_waves,
    plot_dual_domain_3d,
    plot_signal,
    plot_spectrum,
    plot_spectrum_bars,
)
from fft_explorer.utils.validation import as_1d_array


@dataclass
class DualDomainFigureBuilder:
    """3D view of the input signal with its strongest components behind it."""

    figsize: tuple[float, float] = (11.0, 7.0)
    min_amplitude: float = DEFAULT_MIN_AMPLITUDE
    max_components: int | None = DEFAULT_MAX_COMPONENTS
    elevation_deg: float = 20.0
    azimuth_deg: float = -60.0

    def build(
        self,
        samples: np.ndarray,
        components: Sequence[FrequencyComponent],
        *,
        title: str = "Time and Frequency Domains",
    ) -> tuple[Figure, dict[str, Axes]]:
        significant = select_significant_components(
            components,
            min_amplitude=self.min_amplitude,
            max_count=self.max_components,
        )

        figure = plt.figure(figsize=self.figsize)
        ax = figure.add_subplot(1, 1, 1, projection="3d")
        lines = plot_dual_domain_3d(ax, samples, significant)
        ax.view_init(elev=self.elevation_deg, azim=self.azimuth_deg)
        ax.set_title(title)
        if lines:
            ax.legend(loc="upper left", ncol=2)
        return figure, {"main": ax}


@dataclass
class SpectrumOverviewFigureBuilder:
    """GridSpec builder for signal + component overlay + spectrum bars."""

    figsize: tuple[float, float] = (10.0, 8.0)
    min_amplitude: float = DEFAULT_MIN_AMPLITUDE
    max_components: int | None = DEFAULT_MAX_COMPONENTS

    def build(
        self,
        samples: np.ndarray,
        components: Sequence[FrequencyComponent],
    ) -> tuple[Figure, dict[str, Axes]]:
        values = as_1d_array(samples, "samples", dtype=float, allow_empty=True)
        significant = select_significant_components(
            components,
            min_amplitude=self.min_amplitude,
            max_count=self.max_components,
        )

        figure = plt.figure(figsize=self.figsize)
        grid = figure.add_gridspec(3, 1, height_ratios=[1.2, 1.2, 1.0], hspace=0.45)
        ax_signal = figure.add_subplot(grid[0, 0])
        ax_waves = figure.add_subplot(grid[1, 0], sharex=ax_signal)
        ax_bars = figure.add_subplot(grid[2, 0])

        plot_signal(ax_signal, values, title="Input Signal")
        plot_component_waves(ax_waves, significant, title="Significant Components")
        if significant:
            ax_waves.legend(loc="upper right", ncol=3)
        plot_spectrum_bars(
            ax_bars,
            components,
            nyquist=values.size / 2.0 if values.size >= 2 else None,
            title="Spectrum Magnitude (DC to Nyquist)",
        )
        return figure, {"signal": ax_signal, "components": ax_waves, "spectrum": ax_bars}


@dataclass
class ComplexSpectrumFigureBuilder:
    """GridSpec builder for real, imaginary, magnitude, and phase of a spectrum."""

    figsize: tuple[float, float] = (12.0, 8.0)

    def build(self, spectrum: np.ndarray) -> tuple[Figure, dict[str, Axes]]:
        figure = plt.figure(figsize=self.figsize)
        grid = figure.add_gridspec(2, 2, hspace=0.25, wspace=0.22)

        ax_real = figure.add_subplot(grid[0, 0])
        ax_imag = figure.add_subplot(grid[0, 1], sharex=ax_real)
        ax_mag = figure.add_subplot(grid[1, 0], sharex=ax_real)
        ax_phase = figure.add_subplot(grid[1, 1], sharex=ax_real)

        plot_spectrum(ax_real, spectrum, component="real", title="Real")
        plot_spectrum(ax_imag, spectrum, component="imag", title="Imag")
        plot_spectrum(ax_mag, spectrum, component="magnitude", title="Magnitude")
        plot_spectrum(ax_phase, spectrum, component="phase", title="Phase")
        figure.suptitle("Complex Spectrum Components")
        return figure, {"real": ax_real, "imag": ax_imag, "magnitude": ax_mag, "phase": ax_phase}


__all__ = [
    "ComplexSpectrumFigureBuilder",
    "DualDomainFigureBuilder",
    "SpectrumOverviewFigureBuilder",
]
