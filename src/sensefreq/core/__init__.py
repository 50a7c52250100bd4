"""Recording data structures: samples, frozen buffers, and the recorder.

Everything the analysis pipeline consumes is defined here so that hosts
(command-line tools, GUIs, tests) can build recordings without touching the
spectral code.
"""

from .models import AXES, RecordingBuffer, Sample
from .recorder import SampleRecorder

__all__ = ["AXES", "RecordingBuffer", "Sample", "SampleRecorder"]
