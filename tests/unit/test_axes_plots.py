"""Unit tests for plotting.axes_plots."""

from __future__ import annotations

import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fft_explorer.analysis.components import extract_components
from fft_explorer.analysis.transform import transform
from fft_explorer.plotting.axes_plots import (
    component_color,
    plot_component_waves,
    plot_dual_domain_3d,
    plot_signal,
    plot_spectrum,
    plot_spectrum_bars,
)


def _two_tone(n: int = 32) -> np.ndarray:
    index = np.arange(n)
    return np.sin(2 * np.pi * 3 * index / n) + 0.5 * np.sin(2 * np.pi * 7 * index / n)


def test_component_color_is_stable_rgb() -> None:
    color = component_color(3)

    assert color == component_color(3)
    assert len(color) == 3
    assert all(0.0 <= channel <= 1.0 for channel in color)
    assert component_color(1) != component_color(2)


def test_plot_signal_sets_labels_and_skips_non_finite() -> None:
    figure, axis = plt.subplots()
    samples = np.array([0.0, 1.0, np.nan, 3.0, np.inf])

    line = plot_signal(axis, samples)

    assert np.array_equal(line.get_xdata(), [0.0, 1.0, 3.0])
    assert np.array_equal(line.get_ydata(), [0.0, 1.0, 3.0])
    assert axis.get_xlabel() == "Sample index"
    assert line.get_label() == "Input signal"
    plt.close(figure)


def test_plot_component_waves_one_line_per_component() -> None:
    figure, axis = plt.subplots()
    components = extract_components(transform(_two_tone()), 32)[:4]

    lines = plot_component_waves(axis, components)

    assert len(lines) == 4
    assert [line.get_label() for line in lines] == ["1 Hz", "2 Hz", "3 Hz", "4 Hz"]
    assert np.allclose(lines[2].get_ydata(), components[2].signal)
    plt.close(figure)


def test_plot_spectrum_bars_heights_match_amplitudes() -> None:
    figure, axis = plt.subplots()
    components = extract_components(transform(_two_tone()), 32)

    bars = plot_spectrum_bars(axis, components, nyquist=16.0)

    heights = np.array([patch.get_height() for patch in bars.patches])
    assert heights.size == 15
    assert np.isclose(heights[2], 1.0)
    assert np.isclose(heights[6], 0.5)
    assert axis.get_xlim() == (0.0, 16.0)
    plt.close(figure)


def test_plot_spectrum_bars_rejects_non_positive_nyquist() -> None:
    figure, axis = plt.subplots()
    with pytest.raises(ValueError, match="nyquist must be positive"):
        plot_spectrum_bars(axis, [], nyquist=0.0)
    plt.close(figure)


def test_plot_spectrum_phase_component() -> None:
    figure, axis = plt.subplots()
    spectrum = np.array([1.0 + 1.0j, 2.0 + 0.0j, 1.0 - 1.0j])

    line = plot_spectrum(axis, spectrum, component="phase")

    assert np.allclose(line.get_ydata(), np.angle(spectrum))
    assert axis.get_ylabel() == "Phase (rad)"
    plt.close(figure)


def test_plot_spectrum_rejects_unknown_component() -> None:
    figure, axis = plt.subplots()
    with pytest.raises(ValueError, match="Unsupported component"):
        plot_spectrum(axis, np.array([1.0 + 0j]), component="power")  # type: ignore[arg-type]
    plt.close(figure)


def test_plot_dual_domain_3d_places_components_by_depth() -> None:
    figure = plt.figure()
    axis = figure.add_subplot(1, 1, 1, projection="3d")
    samples = _two_tone()
    components = [c for c in extract_components(transform(samples), 32) if c.frequency in (3, 7)]

    lines = plot_dual_domain_3d(axis, samples, components, max_depth=12.0)

    assert len(lines) == 3
    _, depth_signal, _ = lines[0].get_data_3d()
    _, depth_seven, _ = lines[2].get_data_3d()
    assert np.all(depth_signal == 0.0)
    assert np.allclose(depth_seven, 7 / 16 * 12.0)
    plt.close(figure)


def test_plot_dual_domain_3d_skips_short_signals() -> None:
    figure = plt.figure()
    axis = figure.add_subplot(1, 1, 1, projection="3d")

    assert plot_dual_domain_3d(axis, np.array([1.0]), []) == []
    plt.close(figure)
