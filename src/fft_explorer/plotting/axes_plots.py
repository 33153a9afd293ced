"""Axes-level plotting functions that receive a Matplotlib Axes object."""

from __future__ import annotations

import colorsys
from collections.abc import Sequence
from typing import Literal

import numpy as np
from matplotlib.axes import Axes
from matplotlib.container import BarContainer
from matplotlib.lines import Line2D

from fft_explorer.analysis.components import FrequencyComponent
from fft_explorer.plotting.style import INPUT_SIGNAL_COLOR, SPECTRUM_BAR_COLOR
from fft_explorer.utils.validation import as_1d_array

SpectrumComponent = Literal["real", "imag", "magnitude", "phase"]

GOLDEN_ANGLE_DEG = 137.5


def component_color(frequency: int) -> tuple[float, float, float]:
    """Return a stable RGB color for a frequency bin (golden-angle hue walk)."""

    hue = (float(frequency) * GOLDEN_ANGLE_DEG) % 360.0
    return colorsys.hls_to_rgb(hue / 360.0, 0.65, 0.85)


def plot_signal(
    ax: Axes,
    samples: np.ndarray,
    *,
    label: str | None = "Input signal",
    color: str | None = INPUT_SIGNAL_COLOR,
    linewidth: float = 2.0,
    alpha: float = 1.0,
    title: str | None = None,
    xlabel: str = "Sample index",
    ylabel: str = "Amplitude",
    grid: bool = True,
) -> Line2D:
    """Plot a sampled signal against its sample index, skipping non-finite points."""

    values = as_1d_array(samples, "samples", dtype=float, allow_empty=True)
    index, finite_values = _finite_points(np.arange(values.size, dtype=float), values)

    line, = ax.plot(index, finite_values, label=label, color=color, linewidth=linewidth, alpha=alpha)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if title is not None:
        ax.set_title(title)
    if grid:
        ax.grid(True, alpha=0.25)
    return line


def plot_component_waves(
    ax: Axes,
    components: Sequence[FrequencyComponent],
    *,
    linewidth: float = 1.2,
    alpha: float = 0.85,
    title: str | None = None,
    xlabel: str = "Sample index",
    ylabel: str = "Amplitude",
    grid: bool = True,
) -> list[Line2D]:
    """Overlay the isolated cosine wave of each component, one color per frequency."""

    lines: list[Line2D] = []
    for component in components:
        wave = as_1d_array(component.signal, "component.signal", dtype=float, allow_empty=True)
        index, values = _finite_points(np.arange(wave.size, dtype=float), wave)
        line, = ax.plot(
            index,
            values,
            label=f"{component.frequency} Hz",
            color=component_color(component.frequency),
            linewidth=linewidth,
            alpha=alpha,
        )
        lines.append(line)

    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if title is not None:
        ax.set_title(title)
    if grid:
        ax.grid(True, alpha=0.25)
    return lines


def plot_spectrum_bars(
    ax: Axes,
    components: Sequence[FrequencyComponent],
    *,
    nyquist: float | None = None,
    color: str | None = SPECTRUM_BAR_COLOR,
    width: float = 0.8,
    alpha: float = 0.85,
    title: str | None = None,
    xlabel: str = "Frequency (cycles per window)",
    ylabel: str = "Amplitude",
    grid: bool = True,
) -> BarContainer:
    """Draw one bar per component, spanning DC to Nyquist on the x axis."""

    frequency = np.array([c.frequency for c in components], dtype=float)
    amplitude = np.array([c.amplitude for c in components], dtype=float)
    amplitude = np.where(np.isfinite(amplitude), amplitude, 0.0)

    bars = ax.bar(frequency, amplitude, width=width, color=color, alpha=alpha)
    if nyquist is not None:
        if nyquist <= 0.0:
            raise ValueError("nyquist must be positive.")
        ax.set_xlim(0.0, float(nyquist))
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if title is not None:
        ax.set_title(title)
    if grid:
        ax.grid(True, axis="y", alpha=0.25)
    return bars


def plot_spectrum(
    ax: Axes,
    spectrum: np.ndarray,
    *,
    component: SpectrumComponent = "magnitude",
    label: str | None = None,
    color: str | None = None,
    linewidth: float = 1.5,
    alpha: float = 1.0,
    title: str | None = None,
    xlabel: str = "Bin",
    ylabel: str | None = None,
    grid: bool = True,
) -> Line2D:
    """Plot one component of a complex spectrum against bin index."""

    bins = as_1d_array(spectrum, "spectrum", dtype=np.complex128)

    if component == "real":
        y = np.real(bins)
        resolved_ylabel = "Re[X]"
    elif component == "imag":
        y = np.imag(bins)
        resolved_ylabel = "Im[X]"
    elif component == "magnitude":
        y = np.abs(bins)
        resolved_ylabel = "|X|"
    elif component == "phase":
        y = np.angle(bins)
        resolved_ylabel = "Phase (rad)"
    else:
        raise ValueError(f"Unsupported component: {component}")

    index, values = _finite_points(np.arange(bins.size, dtype=float), y)
    line, = ax.plot(index, values, label=label, color=color, linewidth=linewidth, alpha=alpha)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel if ylabel is not None else resolved_ylabel)
    if title is not None:
        ax.set_title(title)
    if grid:
        ax.grid(True, alpha=0.25)
    return line


def plot_dual_domain_3d(
    ax: Axes,
    samples: np.ndarray,
    components: Sequence[FrequencyComponent],
    *,
    time_scale: float = 10.0,
    amplitude_scale: float = 4.0,
    max_depth: float = 12.0,
    signal_linewidth: float = 3.0,
    component_linewidth: float = 1.5,
) -> list[Line2D]:
    """Draw the input signal and its components as stacked traces on a 3D axis.

    Time runs along x (centered on zero), frequency depth along y and
    amplitude along z.  The input signal sits at depth 0 and a component of
    frequency ``k`` sits at ``min(k / nyquist, 1) * max_depth`` with
    ``nyquist = N / 2``.  Fewer than two samples draws nothing.
    """

    values = as_1d_array(samples, "samples", dtype=float, allow_empty=True)
    n = values.size
    if n < 2:
        return []

    nyquist = n / 2.0
    time = (np.arange(n, dtype=float) / (n - 1) - 0.5) * time_scale
    lines: list[Line2D] = []

    x, z = _finite_points(time, values * amplitude_scale)
    line, = ax.plot(x, np.zeros_like(x), z, color=INPUT_SIGNAL_COLOR, linewidth=signal_linewidth, label="Input signal")
    lines.append(line)

    for component in components:
        wave = as_1d_array(component.signal, "component.signal", dtype=float, allow_empty=True)
        if wave.size != n:
            raise ValueError("component signals must match the input signal length.")
        depth = min(component.frequency / nyquist, 1.0) * max_depth
        x, z = _finite_points(time, wave * amplitude_scale)
        line, = ax.plot(
            x,
            np.full_like(x, depth),
            z,
            color=component_color(component.frequency),
            linewidth=component_linewidth,
            label=f"{component.frequency} Hz",
        )
        lines.append(line)

    ax.set_xlabel("Time")
    ax.set_ylabel("Frequency depth")
    ax.set_zlabel("Amplitude")
    ax.set_ylim(0.0, max_depth)
    return lines


def _finite_points(x: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    mask = np.isfinite(x) & np.isfinite(y)
    return x[mask], y[mask]


__all__ = [
    "GOLDEN_ANGLE_DEG",
    "component_color",
    "plot_component_waves",
    "plot_dual_domain_3d",
    "plot_signal",
    "plot_spectrum",
    "plot_spectrum_bars",
]
