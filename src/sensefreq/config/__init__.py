"""Configuration objects and helpers for SenseFreq.

Analysis parameters that used to be hard-wired constants (peak count, minimum
sample count, frequency-axis convention, recording window) live in the
:class:`AnalysisConfig` dataclass and can be loaded from a YAML file such as::

    analysis:
      top_k: 3
      min_samples: 4
      frequency_mapping: conventional
"""

from .analysis import AnalysisConfig, config_from_mapping, load_config

__all__ = ["AnalysisConfig", "config_from_mapping", "load_config"]
