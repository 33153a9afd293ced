"""Signal acquisition helpers for the explorer input surface."""

from fft_explorer.sim.signals import *  # noqa: F401,F403
from fft_explorer.sim.signals import __all__  # noqa: F401
