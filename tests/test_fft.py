import numpy as np
import pytest

from sensefreq.analysis.fft import is_power_of_two, next_power_of_two, spectral_transform, zero_pad


@pytest.mark.parametrize(
    "length, expected",
    [(1, 1), (2, 2), (3, 4), (4, 4), (5, 8), (100, 128), (128, 128), (129, 256), (1000, 1024)],
)
def test_next_power_of_two(length: int, expected: int) -> None:
    assert next_power_of_two(length) == expected


def test_zero_pad_length_is_power_of_two_and_not_shorter() -> None:
    for length in range(1, 300):
        padded = zero_pad(np.ones(length))
        assert padded.size >= length
        assert is_power_of_two(padded.size)
        assert padded.size == 2 ** int(np.ceil(np.log2(length)))


def test_zero_pad_appends_zeros_without_touching_input() -> None:
    data = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    padded = zero_pad(data)
    np.testing.assert_array_equal(padded, [1, 2, 3, 4, 5, 0, 0, 0])
    np.testing.assert_array_equal(data, [1, 2, 3, 4, 5])


def test_zero_pad_rejects_empty_and_2d_input() -> None:
    with pytest.raises(ValueError):
        zero_pad([])
    with pytest.raises(ValueError):
        zero_pad(np.ones((2, 2)))


def test_transform_matches_direct_dft() -> None:
    rng = np.random.default_rng(0)
    x = rng.normal(size=32)
    n = np.arange(32)
    k = n.reshape(-1, 1)
    expected = (x * np.exp(-2j * np.pi * k * n / 32)).sum(axis=1)

    np.testing.assert_allclose(spectral_transform(x), expected, atol=1e-9)


def test_transform_is_linear() -> None:
    rng = np.random.default_rng(1)
    x = rng.normal(size=64)
    y = rng.normal(size=64)
    a, b = 2.5, -1.3

    lhs = spectral_transform(a * x + b * y)
    rhs = a * spectral_transform(x) + b * spectral_transform(y)
    np.testing.assert_allclose(lhs, rhs, rtol=1e-9, atol=1e-9)


def test_transform_is_pure() -> None:
    x = np.linspace(-1.0, 1.0, 16)
    before = x.copy()
    first = spectral_transform(x)
    second = spectral_transform(x)
    np.testing.assert_array_equal(first, second)
    np.testing.assert_array_equal(x, before)
    assert first.dtype == np.complex128
    assert first.size == 16


def test_transform_requires_power_of_two_length() -> None:
    with pytest.raises(ValueError):
        spectral_transform(np.ones(12))
