"""Pipeline orchestration and export helpers."""

from fft_explorer.pipeline._common import read_samples_csv, write_dataframe_csv, write_figure
from fft_explorer.pipeline.session import AnalysisSession, SpectralAnalysis, analyze_signal

__all__ = [
    "AnalysisSession",
    "SpectralAnalysis",
    "analyze_signal",
    "read_samples_csv",
    "write_dataframe_csv",
    "write_figure",
]
