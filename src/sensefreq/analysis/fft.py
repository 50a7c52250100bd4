"""FFT helpers."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Return ``2 ** ceil(log2(n))``; ``n`` itself when already a power of two."""
    n = int(n)
    if n <= 0:
        raise ValueError(f"length must be > 0, got {n}")
    # Integer bit_length avoids float rounding in log2 for large n.
    return 1 << (n - 1).bit_length()


def zero_pad(series: ArrayLike) -> np.ndarray:
    """
    Extend a 1-D series with trailing zeros up to the next power of two.

    Parameters
    ----------
    series:
        1-D array-like of samples (at least one).

    Returns
    -------
    np.ndarray
        New float64 array of length ``next_power_of_two(len(series))``.
    """
    arr = np.asarray(series, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"series must be 1-D, got shape {arr.shape}")
    padded_length = next_power_of_two(arr.size)
    padded = np.zeros(padded_length, dtype=float)
    padded[: arr.size] = arr
    return padded


def spectral_transform(series: ArrayLike) -> np.ndarray:
    """
    Compute the DFT of a real series whose length is a power of two.

    ``X[k] = sum_n x[n] * exp(-2j * pi * k * n / P)``, evaluated with NumPy's
    FFT in O(P log P).

    Returns
    -------
    np.ndarray
        Complex128 array of ``P`` coefficients.
    """
    arr = np.asarray(series, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"series must be 1-D, got shape {arr.shape}")
    if not is_power_of_two(arr.size):
        raise ValueError(f"series length must be a power of two, got {arr.size}")
    return np.fft.fft(arr).astype(np.complex128, copy=False)
