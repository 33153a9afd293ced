"""Export helpers shared by pipeline scripts."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from matplotlib import pyplot as plt
from matplotlib.figure import Figure


def write_dataframe_csv(frame: pd.DataFrame, path: str | Path) -> Path:
    """Write a DataFrame to CSV, creating parent directories."""

    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(destination, index=False)
    return destination


def write_figure(figure: Figure, path: str | Path, *, dpi: int = 160) -> Path:
    """Save and close a figure, creating parent directories."""

    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    figure.savefig(destination, dpi=dpi, bbox_inches="tight")
    plt.close(figure)
    return destination


def read_samples_csv(path: str | Path, *, column: str | None = None) -> pd.Series:
    """Read one numeric column of samples from a CSV file.

    Without ``column`` the first column is used.  Non-numeric cells become NaN.
    """

    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(source)
    frame = pd.read_csv(source)
    if frame.shape[1] == 0:
        raise ValueError(f"No columns found in samples CSV: {source}")
    if column is None:
        column = str(frame.columns[0])
    elif column not in frame.columns:
        raise ValueError(f"Column {column!r} not found in samples CSV: {source}")
    return pd.to_numeric(frame[column], errors="coerce")


__all__ = ["read_samples_csv", "write_dataframe_csv", "write_figure"]
