"""
Shared test signals with known instantaneous frequency.

Every signal here has an exactly known frequency law, so the LMS track
can be compared against ground truth rather than against itself.
"""
import numpy as np
import pytest


@pytest.fixture
def tone():
    """Complex exponential at 0.1 cycles/sample, 4000 samples."""
    n = np.arange(4000)
    return np.exp(1j * 2 * np.pi * 0.1 * n)


@pytest.fixture
def real_tone():
    """Cosine at 0.125 cycles/sample with an integer number of cycles (500)."""
    n = np.arange(4000)
    return np.cos(2 * np.pi * 0.125 * n)


@pytest.fixture
def noisy_tone():
    """Complex exponential at 0.1 cycles/sample plus complex white noise, SNR 20 dB."""
    rng = np.random.RandomState(42)
    n = np.arange(20000)
    noise = 0.1 * (rng.randn(len(n)) + 1j * rng.randn(len(n))) / np.sqrt(2)
    return np.exp(1j * 2 * np.pi * 0.1 * n) + noise


@pytest.fixture
def chirp():
    """Linear complex chirp from 0.05 to 0.15 cycles/sample.

    Returns (signal, true instantaneous frequency).
    """
    n = np.arange(20000)
    f0, f1 = 0.05, 0.15
    rate = (f1 - f0) / len(n)
    phase = 2 * np.pi * (f0 * n + 0.5 * rate * n ** 2)
    return np.exp(1j * phase), f0 + rate * n


@pytest.fixture
def frequency_step():
    """Complex exponential jumping from 0.1 to 0.3 cycles/sample at n = 2000."""
    n = np.arange(4000)
    freq = np.where(n < 2000, 0.1, 0.3)
    phase = 2 * np.pi * np.concatenate([[0.0], np.cumsum(freq[:-1])])
    return np.exp(1j * phase), freq
