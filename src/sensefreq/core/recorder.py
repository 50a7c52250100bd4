"""Coordinator for collecting samples into a bounded recording window."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, List, Optional

from .models import RecordingBuffer, Sample

if TYPE_CHECKING:
    from ..config.analysis import AnalysisConfig

logger = logging.getLogger(__name__)


class SampleRecorder:
    """
    Collect samples between ``start`` and ``stop`` and hand out a frozen copy.

    The recorder never stops itself; the host polls :meth:`is_expired` (for
    example from a timer) and calls :meth:`stop` when the window is over.
    """

    def __init__(self, duration_s: float = 10.0) -> None:
        if duration_s <= 0:
            raise ValueError(f"duration_s must be > 0, got {duration_s}")
        self.duration_s = float(duration_s)
        self._samples: List[Sample] = []
        self._started_at_ms: Optional[float] = None

    @classmethod
    def from_config(cls, config: "AnalysisConfig") -> "SampleRecorder":
        return cls(duration_s=config.sanitized().recording_duration_s)

    @property
    def is_recording(self) -> bool:
        return self._started_at_ms is not None

    def start(self, now_ms: float) -> None:
        """Begin a new recording, discarding whatever the previous one held."""
        self._samples = []
        self._started_at_ms = float(now_ms)
        logger.info("Recording started (window %.1f s)", self.duration_s)

    def append(self, sample: Sample) -> None:
        """Add ``sample`` to the active recording; ignored when not recording."""
        if not self.is_recording:
            return
        if not math.isfinite(sample.timestamp_ms):
            raise ValueError(f"non-finite sample timestamp: {sample.timestamp_ms}")
        if self._samples and sample.timestamp_ms < self._samples[-1].timestamp_ms:
            raise ValueError(
                f"out-of-order sample: {sample.timestamp_ms} < "
                f"{self._samples[-1].timestamp_ms}"
            )
        self._samples.append(sample)

    def elapsed_s(self, now_ms: float) -> float:
        if self._started_at_ms is None:
            return 0.0
        return max(0.0, (float(now_ms) - self._started_at_ms) / 1000.0)

    def is_expired(self, now_ms: float) -> bool:
        return self.is_recording and self.elapsed_s(now_ms) >= self.duration_s

    def stop(self) -> RecordingBuffer:
        """Stop recording and return a frozen copy of the collected samples."""
        buffer = RecordingBuffer.from_samples(self._samples)
        self._started_at_ms = None
        logger.info("Recording stopped with %d samples", len(buffer))
        return buffer

    def __len__(self) -> int:
        return len(self._samples)
