"""Signal analysis utilities (rate estimation, windowing, FFT and peaks).

Modules here operate on NumPy arrays of recorded samples and stay free of
I/O so they can be reused from command-line tools, tests, or a GUI host.
:mod:`pipeline` chains them into :func:`analyze_recording`.
"""

from .errors import (
    AnalysisError,
    DegenerateRecording,
    InsufficientSamples,
    SpectrumComputationFailed,
)
from .peaks import DominantFrequency
from .pipeline import AnalysisResult, AxisSpectrum, analyze_recording
from .rate import RecordingSummary

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "AxisSpectrum",
    "DegenerateRecording",
    "DominantFrequency",
    "InsufficientSamples",
    "RecordingSummary",
    "SpectrumComputationFailed",
    "analyze_recording",
]
