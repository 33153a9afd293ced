"""Frequency decomposition engine and dual-domain views for FFT Explorer."""

from fft_explorer.analysis.components import FrequencyComponent, extract_components
from fft_explorer.analysis.transform import transform

__all__ = ["FrequencyComponent", "extract_components", "transform"]
