"""Analysis orchestration: run the transform pipeline and keep only the newest result."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np

from fft_explorer.analysis.components import FrequencyComponent, extract_components
from fft_explorer.analysis.transform import transform
from fft_explorer.sim.signals import DEFAULT_RESOLUTION, default_signal, resample_linear
from fft_explorer.utils.validation import as_1d_array, as_point_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpectralAnalysis:
    """Samples, spectrum, and components produced by one pipeline run."""

    samples: np.ndarray
    spectrum: np.ndarray
    components: tuple[FrequencyComponent, ...]
    generation: int = 0

    @property
    def sample_count(self) -> int:
        return int(self.samples.size)


def analyze_signal(
    samples: np.ndarray | Sequence[float],
    *,
    generation: int = 0,
) -> SpectralAnalysis:
    """Transform ``samples`` and extract their frequency components."""

    values = as_1d_array(samples, "samples", dtype=float, allow_empty=True).copy()
    values.setflags(write=False)
    spectrum = transform(values)
    components = tuple(extract_components(spectrum, values.size))
    return SpectralAnalysis(
        samples=values,
        spectrum=spectrum,
        components=components,
        generation=int(generation),
    )


class AnalysisSession:
    """Holds the current signal and the most recently applied analysis.

    Every request is tagged with a generation token from :meth:`issue`.
    :meth:`apply` accepts a result only when its token is the latest one
    issued, so a slow computation that finishes after a newer request is
    dropped instead of overwriting fresher state.
    """

    def __init__(
        self,
        samples: np.ndarray | Sequence[float] | None = None,
        *,
        resolution: int = DEFAULT_RESOLUTION,
        max_workers: int = 1,
    ) -> None:
        self._resolution = as_point_count(resolution, "resolution", minimum=1)
        if samples is None:
            initial = default_signal(self._resolution)
        else:
            initial = as_1d_array(samples, "samples", dtype=float, allow_empty=True)
            initial = resample_linear(initial, self._resolution)
        self._samples = initial
        self._lock = threading.Lock()
        self._latest_issued = 0
        self._current: SpectralAnalysis | None = None
        self._max_workers = max(int(max_workers), 1)
        self._executor: ThreadPoolExecutor | None = None

    @property
    def resolution(self) -> int:
        with self._lock:
            return self._resolution

    @property
    def samples(self) -> np.ndarray:
        with self._lock:
            return self._samples

    @property
    def current(self) -> SpectralAnalysis | None:
        with self._lock:
            return self._current

    @property
    def latest_generation(self) -> int:
        with self._lock:
            return self._latest_issued

    def issue(self) -> int:
        """Reserve and return the next generation token."""

        with self._lock:
            self._latest_issued += 1
            return self._latest_issued

    def apply(self, analysis: SpectralAnalysis) -> bool:
        """Store ``analysis`` if it belongs to the latest generation."""

        with self._lock:
            if analysis.generation != self._latest_issued:
                logger.debug(
                    "Dropping stale analysis generation %d (latest is %d)",
                    analysis.generation,
                    self._latest_issued,
                )
                return False
            self._current = analysis
            return True

    def update(self, samples: np.ndarray | Sequence[float] | None = None) -> SpectralAnalysis:
        """Synchronously analyze ``samples`` (or the current signal) and apply the result."""

        token, snapshot = self._issue_with_snapshot(samples)
        analysis = analyze_signal(snapshot, generation=token)
        self.apply(analysis)
        return analysis

    def submit(self, samples: np.ndarray | Sequence[float] | None = None) -> Future[SpectralAnalysis]:
        """Analyze on the background executor; the result is applied only if still newest."""

        token, snapshot = self._issue_with_snapshot(samples)
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers, thread_name_prefix="fft-explorer"
                )
            executor = self._executor
        future = executor.submit(analyze_signal, snapshot, generation=token)
        future.add_done_callback(self._apply_future)
        return future

    def set_resolution(self, resolution: int) -> SpectralAnalysis:
        """Resample the current signal to ``resolution`` points and re-analyze it."""

        target = as_point_count(resolution, "resolution", minimum=1)
        with self._lock:
            if target != self._resolution:
                logger.info("Resampling signal from %d to %d points", self._resolution, target)
                self._samples = resample_linear(self._samples, target)
                self._resolution = target
        return self.update()

    def close(self) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> AnalysisSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _issue_with_snapshot(
        self,
        samples: np.ndarray | Sequence[float] | None = None,
    ) -> tuple[int, np.ndarray]:
        values = None
        if samples is not None:
            values = as_1d_array(samples, "samples", dtype=float, allow_empty=True)
        with self._lock:
            if values is not None:
                self._samples = values
                if values.size > 0:
                    self._resolution = int(values.size)
            self._latest_issued += 1
            return self._latest_issued, self._samples

    def _apply_future(self, future: Future[SpectralAnalysis]) -> None:
        if future.cancelled() or future.exception() is not None:
            return
        self.apply(future.result())


__all__ = ["AnalysisSession", "SpectralAnalysis", "analyze_signal"]
