"""Window (taper) helpers."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike
from scipy import signal


def hann_window(n: int) -> np.ndarray:
    """
    Return symmetric Hann coefficients ``0.5 * (1 - cos(2*pi*i / (n - 1)))``.

    A single-element window is ``[1.0]`` (the taper's midpoint value).
    """
    n = int(n)
    if n <= 0:
        raise ValueError(f"window length must be > 0, got {n}")
    if n == 1:
        return np.ones(1, dtype=float)
    return signal.get_window("hann", n, fftbins=False).astype(float)


def apply_window(series: ArrayLike) -> np.ndarray:
    """
    Multiply a 1-D series elementwise by a Hann window of the same length.

    Returns a new array; the input is left untouched.
    """
    arr = np.asarray(series, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"series must be 1-D, got shape {arr.shape}")
    return arr * hann_window(arr.size)
