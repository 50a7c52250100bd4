import numpy as np
import pytest

from sensefreq.analysis.peaks import (
    DominantFrequency,
    dominant_frequencies,
    format_peaks,
    has_insufficient_peaks,
)


def test_dc_bin_is_never_reported() -> None:
    freqs = np.arange(6, dtype=float)
    mags = np.array([100.0, 1.0, 5.0, 3.0, 0.5, 2.0])
    peaks = dominant_frequencies(freqs, mags, top_k=3)
    assert [p.frequency_hz for p in peaks] == [2.0, 3.0, 5.0]
    assert all(p.frequency_hz != 0.0 for p in peaks)


def test_output_sorted_descending() -> None:
    rng = np.random.default_rng(3)
    mags = rng.random(64)
    peaks = dominant_frequencies(np.arange(64.0), mags, top_k=10)
    values = [p.magnitude for p in peaks]
    assert values == sorted(values, reverse=True)
    assert len(peaks) == 10


def test_equal_magnitudes_keep_ascending_frequency_order() -> None:
    freqs = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    mags = np.array([0.0, 0.5, 0.9, 0.5, 0.5])
    peaks = dominant_frequencies(freqs, mags, top_k=4)
    assert peaks == [
        DominantFrequency(2.0, 0.9),
        DominantFrequency(1.0, 0.5),
        DominantFrequency(3.0, 0.5),
        DominantFrequency(4.0, 0.5),
    ]


def test_non_finite_and_zero_magnitudes_are_dropped() -> None:
    freqs = np.arange(6, dtype=float)
    mags = np.array([1.0, np.nan, np.inf, 0.0, -1.0, 0.25])
    peaks = dominant_frequencies(freqs, mags, top_k=3)
    assert peaks == [DominantFrequency(5.0, 0.25)]
    assert has_insufficient_peaks(peaks, 3)


def test_all_zero_spectrum_gives_empty_list() -> None:
    peaks = dominant_frequencies(np.arange(8.0), np.zeros(8))
    assert peaks == []
    assert has_insufficient_peaks(peaks, 3)
    assert format_peaks(peaks) == "no peaks"


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        dominant_frequencies(np.arange(4.0), np.ones(3))
    with pytest.raises(ValueError):
        dominant_frequencies(np.arange(4.0), np.ones(4), top_k=0)


def test_format_peaks() -> None:
    text = format_peaks([DominantFrequency(12.345, 0.456), DominantFrequency(3.0, 0.1)])
    assert text == "12.3 Hz (0.46), 3.0 Hz (0.10)"
