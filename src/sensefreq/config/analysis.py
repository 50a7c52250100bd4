"""Analysis configuration and YAML loading helpers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

import yaml

logger = logging.getLogger(__name__)

FREQUENCY_MAPPINGS = ("conventional", "legacy")


def _as_int(key: str, value: Any) -> int:
    # bool is an int subclass; ``top_k: yes`` is a typo, not 1.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"analysis.{key} must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"analysis.{key} must be an integer, got {value!r}")
    return int(value)


def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"analysis.{key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"analysis.{key} must be finite, got {value!r}")
    return float(value)


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"analysis.{key} must be true or false, got {value!r}")
    return value


def _as_mapping_name(key: str, value: Any) -> str:
    if not isinstance(value, str) or value.strip().lower() not in FREQUENCY_MAPPINGS:
        raise ValueError(
            f"analysis.{key} must be one of {', '.join(FREQUENCY_MAPPINGS)}, got {value!r}"
        )
    return value.strip().lower()


_FIELD_PARSERS: Dict[str, Callable[[str, Any], Any]] = {
    "top_k": _as_int,
    "min_samples": _as_int,
    "frequency_mapping": _as_mapping_name,
    "parallel_axes": _as_bool,
    "recording_duration_s": _as_float,
}


@dataclass(slots=True)
class AnalysisConfig:
    """
    Tuning knobs for the spectral pipeline.

    The defaults reproduce the classic behaviour: top three peaks, at least
    four samples, a conventional ``i * R / P`` frequency axis and a
    ten-second recording window.
    """

    top_k: int = 3
    min_samples: int = 4
    frequency_mapping: str = "conventional"
    parallel_axes: bool = False
    recording_duration_s: float = 10.0

    def sanitized(self) -> AnalysisConfig:
        """
        Return a validated copy with lower bounds applied.

        Raises ``ValueError`` naming the field when a value has the wrong type;
        in-range problems (``top_k: 0``, an unknown mapping) are clamped to
        the nearest usable value instead.
        """
        mapping = self.frequency_mapping
        if not (isinstance(mapping, str) and mapping.strip().lower() in FREQUENCY_MAPPINGS):
            logger.warning("Unknown frequency mapping %r; using conventional", mapping)
            mapping = "conventional"
        duration = _as_float("recording_duration_s", self.recording_duration_s)
        return AnalysisConfig(
            top_k=max(1, _as_int("top_k", self.top_k)),
            min_samples=max(2, _as_int("min_samples", self.min_samples)),
            frequency_mapping=mapping.strip().lower(),
            parallel_axes=_as_bool("parallel_axes", self.parallel_axes),
            recording_duration_s=duration if duration > 0 else 10.0,
        )


def config_from_mapping(data: Mapping[str, Any] | None) -> AnalysisConfig:
    """
    Build :class:`AnalysisConfig` from a parsed YAML document.

    Settings are read from the ``analysis:`` block; a document without one
    is treated as that block itself. Keys other than the config fields are
    ignored, and each known key is type-checked.
    """
    if not data:
        return AnalysisConfig()
    block = data.get("analysis", data)
    if block is None:
        return AnalysisConfig()
    if not isinstance(block, Mapping):
        raise ValueError(f"analysis block must be a mapping, got {type(block).__name__}")

    values: Dict[str, Any] = {}
    for key, raw in block.items():
        parser = _FIELD_PARSERS.get(key)
        if parser is None:
            logger.debug("Ignoring unknown analysis setting %r", key)
            continue
        values[key] = parser(key, raw)
    return AnalysisConfig(**values).sanitized()


def load_config(path: str | Path | None) -> AnalysisConfig:
    """
    Load configuration from a YAML file at ``path``.

    ``None`` or a missing file gives the default :class:`AnalysisConfig`.
    """
    if path is None:
        return AnalysisConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.info("No analysis config at %s; using defaults", cfg_path)
        return AnalysisConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {cfg_path}: {exc}") from exc
    if raw is None:
        return AnalysisConfig()
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    try:
        return config_from_mapping(raw)
    except ValueError as exc:
        raise ValueError(f"{cfg_path}: {exc}") from exc


__all__ = ["AnalysisConfig", "FREQUENCY_MAPPINGS", "config_from_mapping", "load_config"]
