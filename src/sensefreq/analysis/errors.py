"""Exceptions raised (or attached to results) by the analysis pipeline."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for recoverable analysis failures."""


class InsufficientSamples(AnalysisError):
    """The recording holds fewer samples than the pipeline needs."""

    def __init__(self, sample_count: int, min_samples: int) -> None:
        self.sample_count = int(sample_count)
        self.min_samples = int(min_samples)
        super().__init__(
            f"not enough samples for a spectrum: got {self.sample_count}, "
            f"need at least {self.min_samples}"
        )


class DegenerateRecording(AnalysisError):
    """The recording spans no time, so no sample rate can be estimated."""

    def __init__(self, sample_count: int, duration_s: float) -> None:
        self.sample_count = int(sample_count)
        self.duration_s = float(duration_s)
        super().__init__(
            f"cannot estimate sample rate from {self.sample_count} samples "
            f"spanning {self.duration_s:.3f} s"
        )


class SpectrumComputationFailed(AnalysisError):
    """
    The transform for one axis produced unusable output.

    Not raised out of :func:`~sensefreq.analysis.pipeline.analyze_recording`;
    the affected axis carries it on ``AxisSpectrum.error`` instead.
    """

    def __init__(self, axis: str, reason: str) -> None:
        self.axis = axis
        self.reason = reason
        super().__init__(f"spectrum computation failed for axis {axis!r}: {reason}")
