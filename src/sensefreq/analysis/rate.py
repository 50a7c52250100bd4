from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from ..core.models import RecordingBuffer
from .errors import DegenerateRecording, InsufficientSamples

DEFAULT_MIN_SAMPLES = 4


@dataclass(frozen=True)
class RecordingSummary:
    """Sample count, time span and effective rate of a finished recording."""

    sample_count: int
    duration_s: float
    sample_rate_hz: float


def effective_sample_rate(timestamps_ms: ArrayLike) -> float:
    """
    Estimate the sample rate from millisecond timestamps.

    The rate is ``count / duration`` where the duration is the span between
    the first and last timestamp (``count`` samples, not ``count - 1``
    intervals, so a regular stream reads slightly high).

    Raises
    ------
    DegenerateRecording
        With fewer than two timestamps or a non-positive span.
    """
    ts = np.asarray(timestamps_ms, dtype=float).ravel()
    count = int(ts.size)
    if count < 2:
        raise DegenerateRecording(count, 0.0)
    duration_s = (float(ts[-1]) - float(ts[0])) / 1000.0
    if not np.isfinite(duration_s) or duration_s <= 0:
        raise DegenerateRecording(count, duration_s if np.isfinite(duration_s) else 0.0)
    return count / duration_s


def summarize_recording(
    buffer: RecordingBuffer,
    *,
    min_samples: int = DEFAULT_MIN_SAMPLES,
) -> RecordingSummary:
    """
    Validate ``buffer`` and derive its effective sample rate.

    Raises
    ------
    InsufficientSamples
        If ``len(buffer) < min_samples``.
    DegenerateRecording
        If the recording spans zero (or negative) time.
    """
    count = len(buffer)
    if count < min_samples:
        raise InsufficientSamples(count, min_samples)
    rate = effective_sample_rate(buffer.timestamps_ms())
    return RecordingSummary(
        sample_count=count,
        duration_s=buffer.duration_s,
        sample_rate_hz=rate,
    )
