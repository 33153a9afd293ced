"""Unit tests for plotting.style."""

from __future__ import annotations

import pytest

matplotlib = pytest.importorskip("matplotlib")

from fft_explorer.plotting.style import (
    DARK_THEME_OVERRIDES,
    get_explorer_rc_params,
    explorer_style_context,
)


def test_get_explorer_rc_params_applies_overrides() -> None:
    rc = get_explorer_rc_params(overrides={"axes.grid": False})
    assert rc["axes.grid"] is False


def test_dark_theme_layers_under_overrides() -> None:
    rc = get_explorer_rc_params(theme="dark", overrides={"text.color": "#ffffff"})

    assert rc["axes.facecolor"] == DARK_THEME_OVERRIDES["axes.facecolor"]
    assert rc["text.color"] == "#ffffff"


def test_unknown_theme_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported theme"):
        get_explorer_rc_params(theme="sepia")  # type: ignore[arg-type]


def test_explorer_style_context_temporarily_sets_params() -> None:
    original = matplotlib.rcParams["axes.grid"]
    with explorer_style_context(overrides={"axes.grid": (not original)}):
        assert matplotlib.rcParams["axes.grid"] == (not original)
    assert matplotlib.rcParams["axes.grid"] == original
