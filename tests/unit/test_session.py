"""Unit tests for pipeline.session."""

from __future__ import annotations

import threading

import numpy as np
import pytest

from fft_explorer.pipeline.session import AnalysisSession, analyze_signal
from fft_explorer.sim.signals import default_signal


def test_analyze_signal_bundles_spectrum_and_components() -> None:
    samples = np.sin(2 * np.pi * 3 * np.arange(32) / 32)

    analysis = analyze_signal(samples, generation=4)

    assert analysis.generation == 4
    assert analysis.sample_count == 32
    assert analysis.spectrum.shape == (32,)
    assert [c.frequency for c in analysis.components] == list(range(1, 16))
    assert not analysis.samples.flags.writeable


def test_analyze_signal_copies_input() -> None:
    samples = np.ones(8)
    analysis = analyze_signal(samples)

    samples[0] = 5.0

    assert analysis.samples[0] == 1.0


def test_session_starts_from_default_signal() -> None:
    session = AnalysisSession()

    assert session.resolution == 128
    assert np.allclose(session.samples, default_signal(128))
    assert session.current is None


def test_update_applies_latest_result() -> None:
    session = AnalysisSession(resolution=32)

    analysis = session.update()

    assert analysis.generation == 1
    assert session.current is analysis
    assert session.latest_generation == 1


def test_update_with_new_samples_follows_their_length() -> None:
    session = AnalysisSession(resolution=32)

    analysis = session.update(np.zeros(12))

    assert session.resolution == 12
    assert analysis.sample_count == 12


def test_stale_results_are_dropped() -> None:
    session = AnalysisSession(resolution=16)
    older = session.issue()
    newer = session.issue()

    assert not session.apply(analyze_signal(np.ones(16), generation=older))
    assert session.current is None
    assert session.apply(analyze_signal(np.zeros(16), generation=newer))
    assert session.current is not None
    assert session.current.generation == newer


def test_set_resolution_resamples_and_recomputes() -> None:
    session = AnalysisSession(resolution=128)

    analysis = session.set_resolution(64)

    assert session.resolution == 64
    assert session.samples.shape == (64,)
    assert analysis.sample_count == 64
    assert session.current is analysis


def test_set_resolution_rejects_non_positive() -> None:
    session = AnalysisSession(resolution=32)
    with pytest.raises(ValueError, match="resolution must be >= 1"):
        session.set_resolution(0)


def test_initial_samples_are_resampled_to_resolution() -> None:
    session = AnalysisSession([0.0, 1.0], resolution=5)

    assert np.allclose(session.samples, [0.0, 0.25, 0.5, 0.75, 1.0])


def test_submit_applies_only_newest_background_result() -> None:
    first = np.sin(2 * np.pi * 2 * np.arange(32) / 32)
    second = np.sin(2 * np.pi * 5 * np.arange(32) / 32)

    with AnalysisSession(resolution=32) as session:
        future_a = session.submit(first)
        future_b = session.submit(second)
        result_a = future_a.result()
        result_b = future_b.result()

    assert result_a.generation == 1
    assert result_b.generation == 2
    current = session.current
    assert current is not None
    assert current.generation == 2
    assert np.allclose(current.samples, second)


def test_concurrent_submits_keep_samples_and_resolution_consistent() -> None:
    signals = [np.full(length, float(length)) for length in (8, 16, 32, 64) for _ in range(5)]
    start = threading.Barrier(len(signals))
    futures = []
    futures_lock = threading.Lock()

    with AnalysisSession(resolution=8, max_workers=4) as session:

        def worker(samples: np.ndarray) -> None:
            start.wait()
            future = session.submit(samples)
            with futures_lock:
                futures.append((samples, future))

        threads = [threading.Thread(target=worker, args=(s,)) for s in signals]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        results = [(samples, future.result()) for samples, future in futures]

    assert sorted(result.generation for _, result in results) == list(range(1, len(signals) + 1))
    for samples, result in results:
        assert np.array_equal(result.samples, samples)
    assert session.resolution == session.samples.size
    current = session.current
    assert current is not None
    assert current.generation == session.latest_generation
    assert np.array_equal(current.samples, session.samples)
