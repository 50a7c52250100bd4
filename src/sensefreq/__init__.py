"""Dominant vibration frequencies from recorded 3-axis motion samples."""

from .analysis import (
    AnalysisError,
    AnalysisResult,
    DegenerateRecording,
    InsufficientSamples,
    SpectrumComputationFailed,
    analyze_recording,
)
from .config import AnalysisConfig
from .core import RecordingBuffer, Sample

__all__ = [
    "AnalysisConfig",
    "AnalysisError",
    "AnalysisResult",
    "DegenerateRecording",
    "InsufficientSamples",
    "RecordingBuffer",
    "Sample",
    "SpectrumComputationFailed",
    "analyze_recording",
]
