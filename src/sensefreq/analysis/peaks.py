"""Dominant-frequency extraction."""

from __future__ import annotations

from typing import List, NamedTuple, Sequence

import numpy as np
from numpy.typing import ArrayLike

DEFAULT_TOP_K = 3


class DominantFrequency(NamedTuple):
    frequency_hz: float
    magnitude: float


def dominant_frequencies(
    frequencies: ArrayLike,
    magnitudes: ArrayLike,
    top_k: int = DEFAULT_TOP_K,
) -> List[DominantFrequency]:
    """
    Return up to ``top_k`` strongest spectrum entries, skipping the DC bin.

    Non-finite magnitudes count as zero and zero/negative magnitudes are
    dropped, so the result may be shorter than ``top_k`` (see
    :func:`has_insufficient_peaks`). Equal magnitudes keep ascending
    frequency order.
    """
    if top_k < 1:
        raise ValueError(f"top_k must be >= 1, got {top_k}")
    freqs = np.asarray(frequencies, dtype=float).ravel()
    mags = np.asarray(magnitudes, dtype=float).ravel()
    if freqs.size != mags.size:
        raise ValueError(
            f"frequencies and magnitudes must have equal length, got {freqs.size} and {mags.size}"
        )

    freqs = freqs[1:]
    mags = np.where(np.isfinite(mags[1:]), mags[1:], 0.0)
    valid = (mags > 0) & np.isfinite(freqs)
    idx = np.flatnonzero(valid)
    if idx.size == 0:
        return []

    order = idx[np.argsort(-mags[idx], kind="stable")]
    return [
        DominantFrequency(float(freqs[i]), float(mags[i])) for i in order[:top_k]
    ]


def has_insufficient_peaks(peaks: Sequence[DominantFrequency], top_k: int) -> bool:
    """True when fewer than ``top_k`` usable peaks were found."""
    return len(peaks) < top_k


def format_peaks(peaks: Sequence[DominantFrequency]) -> str:
    """Human-readable ``"12.3 Hz (0.45), ..."`` listing."""
    if not peaks:
        return "no peaks"
    return ", ".join(f"{p.frequency_hz:.1f} Hz ({p.magnitude:.2f})" for p in peaks)
