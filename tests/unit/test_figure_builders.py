"""Unit tests for plotting.figure_builders."""

from __future__ import annotations

import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fft_explorer.pipeline.session import analyze_signal
from fft_explorer.plotting.figure_builders import (
    ComplexSpectrumFigureBuilder,
    DualDomainFigureBuilder,
    SpectrumOverviewFigureBuilder,
)
from fft_explorer.sim.signals import default_signal


def test_dual_domain_builder_draws_significant_components_only() -> None:
    analysis = analyze_signal(default_signal(64))
    builder = DualDomainFigureBuilder(max_components=5)

    fig, axes = builder.build(analysis.samples, analysis.components)

    assert "main" in axes
    labels = [line.get_label() for line in axes["main"].get_lines()]
    assert labels == ["Input signal", "3 Hz", "10 Hz"]
    plt.close(fig)


def test_spectrum_overview_builder_returns_three_axes() -> None:
    analysis = analyze_signal(default_signal(32))
    builder = SpectrumOverviewFigureBuilder()

    fig, axes = builder.build(analysis.samples, analysis.components)

    assert set(axes) == {"signal", "components", "spectrum"}
    assert len(axes["spectrum"].patches) == len(analysis.components)
    plt.close(fig)


def test_spectrum_overview_builder_handles_single_sample() -> None:
    analysis = analyze_signal(np.array([1.0]))

    fig, axes = SpectrumOverviewFigureBuilder().build(analysis.samples, analysis.components)

    assert len(axes["spectrum"].patches) == 0
    plt.close(fig)


def test_complex_spectrum_builder_four_axes() -> None:
    analysis = analyze_signal(default_signal(16))

    fig, axes = ComplexSpectrumFigureBuilder().build(analysis.spectrum)

    assert set(axes) == {"real", "imag", "magnitude", "phase"}
    plt.close(fig)
