"""Shared dataclasses for recorded motion samples."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

import numpy as np

AXES: Tuple[str, ...] = ("x", "y", "z")


@dataclass(frozen=True)
class Sample:
    timestamp_ms: float
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class RecordingBuffer:
    """
    Frozen, time-ordered sequence of :class:`Sample` objects.

    Timestamps are finite monotonic milliseconds and must be non-decreasing.
    """

    samples: Tuple[Sample, ...] = ()

    def __post_init__(self) -> None:
        samples = tuple(self.samples)
        for index, sample in enumerate(samples):
            if not math.isfinite(sample.timestamp_ms):
                raise ValueError(
                    f"sample {index} has a non-finite timestamp ({sample.timestamp_ms})"
                )
        for prev, cur in zip(samples, samples[1:]):
            if cur.timestamp_ms < prev.timestamp_ms:
                raise ValueError(
                    "samples must be in non-decreasing timestamp order "
                    f"({cur.timestamp_ms} after {prev.timestamp_ms})"
                )
        object.__setattr__(self, "samples", samples)

    @classmethod
    def from_samples(cls, samples: Iterable[Sample]) -> "RecordingBuffer":
        return cls(tuple(samples))

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    @property
    def duration_s(self) -> float:
        """Span between first and last timestamp in seconds (0.0 if < 2 samples)."""
        if len(self.samples) < 2:
            return 0.0
        return (self.samples[-1].timestamp_ms - self.samples[0].timestamp_ms) / 1000.0

    def timestamps_ms(self) -> np.ndarray:
        return np.fromiter(
            (s.timestamp_ms for s in self.samples), dtype=np.float64, count=len(self.samples)
        )

    def axis(self, name: str) -> np.ndarray:
        """Return the values of one axis as a 1-D float64 array."""
        if name not in AXES:
            raise ValueError(f"unknown axis {name!r}, expected one of {AXES}")
        return np.fromiter(
            (getattr(s, name) for s in self.samples), dtype=np.float64, count=len(self.samples)
        )
