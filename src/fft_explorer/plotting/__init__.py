"""plotting subpackage for FFT Explorer."""

from fft_explorer.plotting.axes_plots import *  # noqa: F401,F403
from fft_explorer.plotting.figure_builders import *  # noqa: F401,F403
from fft_explorer.plotting.style import *  # noqa: F401,F403

# Merge __all__ from the submodules.
from fft_explorer.plotting.axes_plots import __all__ as _axes_all
from fft_explorer.plotting.figure_builders import __all__ as _builders_all
from fft_explorer.plotting.style import __all__ as _style_all

__all__ = sorted({*_axes_all, *_builders_all, *_style_all})
