"""Centralized plotting style for the explorer views."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from typing import Iterator, Literal

import matplotlib as mpl

Theme = Literal["light", "dark"]

INPUT_SIGNAL_COLOR = "#3b82f6"
SPECTRUM_BAR_COLOR = "#38bdf8"

EXPLORER_RC_PARAMS: dict[str, object] = {
    "axes.grid": True,
    "grid.alpha": 0.25,
    "grid.linestyle": "-",
    "axes.spines.top": False,
    "axes.spines.right": False,
    "axes.titlesize": 12,
    "axes.labelsize": 10,
    "legend.fontsize": 8,
    "figure.titlesize": 13,
    "xtick.labelsize": 9,
    "ytick.labelsize": 9,
    "savefig.dpi": 180,
    "axes.prop_cycle": mpl.cycler(
        color=[INPUT_SIGNAL_COLOR, "#22d3ee", "#10b981", "#f59e0b", "#a855f7", "#ef4444"]
    ),
}

# Slate palette of the interactive viewer.
DARK_THEME_OVERRIDES: dict[str, object] = {
    "figure.facecolor": "#020617",
    "axes.facecolor": "#0f172a",
    "savefig.facecolor": "#020617",
    "axes.edgecolor": "#334155",
    "axes.labelcolor": "#cbd5e1",
    "text.color": "#e2e8f0",
    "xtick.color": "#94a3b8",
    "ytick.color": "#94a3b8",
    "grid.color": "#1e293b",
    "legend.facecolor": "#0f172a",
    "legend.edgecolor": "#334155",
}


def get_explorer_rc_params(
    *,
    theme: Theme = "light",
    overrides: Mapping[str, object] | None = None,
) -> dict[str, object]:
    """Return rcParams for explorer plots, layering theme then caller overrides."""

    merged = dict(EXPLORER_RC_PARAMS)
    if theme == "dark":
        merged.update(DARK_THEME_OVERRIDES)
    elif theme != "light":
        raise ValueError(f"Unsupported theme: {theme}")
    if overrides:
        merged.update(dict(overrides))
    return merged


def apply_explorer_style(
    *,
    theme: Theme = "light",
    overrides: Mapping[str, object] | None = None,
) -> None:
    """Apply the explorer style globally via Matplotlib rcParams."""

    mpl.rcParams.update(get_explorer_rc_params(theme=theme, overrides=overrides))


@contextmanager
def explorer_style_context(
    *,
    theme: Theme = "light",
    overrides: Mapping[str, object] | None = None,
) -> Iterator[None]:
    """Temporarily apply the explorer style."""

    with mpl.rc_context(get_explorer_rc_params(theme=theme, overrides=overrides)):
        yield


__all__ = [
    "DARK_THEME_OVERRIDES",
    "EXPLORER_RC_PARAMS",
    "INPUT_SIGNAL_COLOR",
    "SPECTRUM_BAR_COLOR",
    "apply_explorer_style",
    "explorer_style_context",
    "get_explorer_rc_params",
]
