"""Magnitude spectrum and frequency-axis helpers."""

from __future__ import annotations

import math
from typing import Literal

import numpy as np
from numpy.typing import ArrayLike

from ..config.analysis import FREQUENCY_MAPPINGS
from .errors import SpectrumComputationFailed

FrequencyMapping = Literal["conventional", "legacy"]


def magnitude_spectrum(
    coefficients: ArrayLike,
    padded_length: int,
    *,
    axis: str = "",
) -> np.ndarray:
    """
    Normalised one-sided magnitudes ``|X[i]| / P`` for ``i < P / 2``.

    Parameters
    ----------
    coefficients:
        ``P`` complex DFT coefficients.
    padded_length:
        ``P``, the transform length the coefficients came from.
    axis:
        Axis label used in the error if the coefficients are unusable.

    Raises
    ------
    SpectrumComputationFailed
        If the retained coefficients contain NaN or infinite values.
    """
    coeffs = np.asarray(coefficients, dtype=np.complex128)
    p = int(padded_length)
    if p <= 0:
        raise ValueError(f"padded_length must be > 0, got {p}")
    if coeffs.ndim != 1 or coeffs.size != p:
        raise ValueError(f"expected {p} coefficients, got shape {coeffs.shape}")

    half = coeffs[: p // 2]
    if not np.all(np.isfinite(half)):
        raise SpectrumComputationFailed(axis, "transform produced non-finite coefficients")
    return np.sqrt(half.real ** 2 + half.imag ** 2) / p


def zero_spectrum(padded_length: int) -> np.ndarray:
    """All-zero stand-in for a spectrum that could not be computed."""
    return np.zeros(int(padded_length) // 2, dtype=float)


def frequency_axis(
    length: int,
    sample_rate_hz: float,
    padded_length: int,
    *,
    mapping: FrequencyMapping = "conventional",
) -> np.ndarray:
    """
    Frequencies (Hz) index-aligned with :func:`magnitude_spectrum`.

    ``conventional`` gives ``i * R / P``; ``legacy`` gives ``i * R / (2 * P)``,
    the halved axis older consumers of these spectra were built against.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if not math.isfinite(sample_rate_hz) or sample_rate_hz <= 0:
        raise ValueError(f"sample_rate_hz must be a finite value > 0, got {sample_rate_hz}")
    if padded_length <= 0:
        raise ValueError(f"padded_length must be > 0, got {padded_length}")
    return np.arange(int(length), dtype=float) * bin_width_hz(
        sample_rate_hz, padded_length, mapping=mapping
    )


def bin_width_hz(
    sample_rate_hz: float,
    padded_length: int,
    *,
    mapping: FrequencyMapping = "conventional",
) -> float:
    """Spacing between adjacent entries of :func:`frequency_axis`."""
    if mapping == "conventional":
        denominator = int(padded_length)
    elif mapping == "legacy":
        denominator = int(padded_length) * 2
    else:
        raise ValueError(f"unknown frequency mapping {mapping!r}, expected {FREQUENCY_MAPPINGS}")
    return float(sample_rate_hz) / denominator


def frequency_to_bin(
    frequency_hz: float,
    sample_rate_hz: float,
    padded_length: int,
    *,
    mapping: FrequencyMapping = "conventional",
) -> int:
    """Nearest spectrum index for ``frequency_hz`` (inverse of :func:`frequency_axis`)."""
    width = bin_width_hz(sample_rate_hz, padded_length, mapping=mapping)
    return int(round(float(frequency_hz) / width))
