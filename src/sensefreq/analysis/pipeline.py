"""
Per-axis spectral analysis of a finished recording.

The pipeline for each axis is::

    raw values -> zero-pad to 2**k -> Hann window -> FFT
               -> |X| / P (first half) -> frequency axis -> top-K peaks

Rate estimation failures abort the whole analysis; a transform failure only
degrades the affected axis to an all-zero spectrum.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
from numpy.typing import ArrayLike

from ..config.analysis import AnalysisConfig
from ..core.models import AXES, RecordingBuffer
from ..tools.debug import time_block
from .errors import SpectrumComputationFailed
from .fft import next_power_of_two, spectral_transform, zero_pad
from .peaks import DominantFrequency, dominant_frequencies, format_peaks, has_insufficient_peaks
from .rate import RecordingSummary, summarize_recording
from .spectrum import frequency_axis, magnitude_spectrum, zero_spectrum
from .window import apply_window

logger = logging.getLogger(__name__)


@dataclass
class AxisSpectrum:
    """Spectrum, frequency axis and dominant peaks of one axis."""

    axis: str
    frequencies: np.ndarray
    magnitudes: np.ndarray
    dominant: List[DominantFrequency] = field(default_factory=list)
    error: Optional[SpectrumComputationFailed] = None
    insufficient_peaks: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frequencies": self.frequencies.tolist(),
            "magnitudes": self.magnitudes.tolist(),
        }


@dataclass
class AnalysisResult:
    summary: RecordingSummary
    padded_length: int
    x: AxisSpectrum
    y: AxisSpectrum
    z: AxisSpectrum

    def __getitem__(self, axis: str) -> AxisSpectrum:
        if axis not in AXES:
            raise KeyError(axis)
        return getattr(self, axis)

    def axes(self) -> List[AxisSpectrum]:
        return [self.x, self.y, self.z]

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Plain ``{"x": {"frequencies": [...], "magnitudes": [...]}, ...}`` mapping."""
        return {spec.axis: spec.to_dict() for spec in self.axes()}


def compute_axis_spectrum(
    values: ArrayLike,
    sample_rate_hz: float,
    *,
    axis: str = "x",
    top_k: int = 3,
    mapping: str = "conventional",
) -> AxisSpectrum:
    """
    Run the spectral pipeline over one axis of samples.

    Never raises for bad sample values: a transform that yields non-finite
    coefficients is reported on ``AxisSpectrum.error`` together with an
    all-zero spectrum.
    """
    padded = zero_pad(values)
    padded_length = padded.size
    error: Optional[SpectrumComputationFailed] = None
    try:
        coefficients = spectral_transform(apply_window(padded))
        magnitudes = magnitude_spectrum(coefficients, padded_length, axis=axis)
    except SpectrumComputationFailed as exc:
        error = exc
    except (ValueError, FloatingPointError) as exc:
        error = SpectrumComputationFailed(axis, str(exc))

    if error is not None:
        logger.warning("%s; reporting an all-zero spectrum", error)
        magnitudes = zero_spectrum(padded_length)

    frequencies = frequency_axis(
        magnitudes.size, sample_rate_hz, padded_length, mapping=mapping
    )
    peaks = dominant_frequencies(frequencies, magnitudes, top_k=top_k)
    logger.debug("axis %s dominant: %s", axis, format_peaks(peaks))
    return AxisSpectrum(
        axis=axis,
        frequencies=frequencies,
        magnitudes=magnitudes,
        dominant=peaks,
        error=error,
        insufficient_peaks=has_insufficient_peaks(peaks, top_k),
    )


def analyze_recording(
    buffer: RecordingBuffer,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """
    Estimate the sample rate of ``buffer`` and analyse each axis.

    Raises
    ------
    InsufficientSamples
        Fewer than ``config.min_samples`` samples.
    DegenerateRecording
        The samples span no time.
    """
    cfg = (config or AnalysisConfig()).sanitized()
    summary = summarize_recording(buffer, min_samples=cfg.min_samples)
    logger.info(
        "Analysing %d samples over %.2f s (effective rate %.2f Hz)",
        summary.sample_count,
        summary.duration_s,
        summary.sample_rate_hz,
    )

    def run(axis: str) -> AxisSpectrum:
        with time_block(f"spectrum[{axis}]", emitter=logger.debug):
            return compute_axis_spectrum(
                buffer.axis(axis),
                summary.sample_rate_hz,
                axis=axis,
                top_k=cfg.top_k,
                mapping=cfg.frequency_mapping,
            )

    if cfg.parallel_axes:
        with ThreadPoolExecutor(max_workers=len(AXES), thread_name_prefix="sensefreq-axis") as pool:
            spectra = list(pool.map(run, AXES))
    else:
        spectra = [run(axis) for axis in AXES]

    by_axis = {spec.axis: spec for spec in spectra}
    padded_length = next_power_of_two(summary.sample_count)
    return AnalysisResult(
        summary=summary,
        padded_length=padded_length,
        x=by_axis["x"],
        y=by_axis["y"],
        z=by_axis["z"],
    )
