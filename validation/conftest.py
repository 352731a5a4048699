"""
Shared test signals with known properties.

Every signal here has a mathematically provable analytic signal
or a ground truth that scipy.signal.hilbert agrees on.
"""
import numpy as np
import pytest


@pytest.fixture
def white_noise():
    """White noise: no closed form, compared against scipy."""
    rng = np.random.RandomState(42)
    return rng.randn(10000)


@pytest.fixture
def odd_noise():
    """Odd-length noise: exercises the no-Nyquist branch."""
    rng = np.random.RandomState(7)
    return rng.randn(9999)


@pytest.fixture
def random_walk():
    """Random walk: strong low-frequency content, non-zero mean."""
    rng = np.random.RandomState(42)
    return np.cumsum(rng.randn(4096))


@pytest.fixture
def sine_wave():
    """Pure 5 Hz sine at 1000 Hz, whole number of periods: envelope = 1."""
    t = np.arange(10000) / 1000.0
    return np.sin(2 * np.pi * 5.0 * t)


@pytest.fixture
def constant():
    """Constant signal: pure DC, zero quadrature, envelope = value."""
    return np.ones(1000) * 3.14


@pytest.fixture
def am_signal():
    """50 Hz carrier with a 2 Hz cosine modulation, 1000 Hz sampling.

    Envelope equals the modulation exactly (band-limited, whole periods).
    """
    t = np.arange(5000) / 1000.0
    modulation = 2.0 + np.cos(2 * np.pi * 2.0 * t)
    return modulation * np.cos(2 * np.pi * 50.0 * t), modulation


@pytest.fixture
def chirp():
    """Linear chirp 1 → 100 Hz, 1000 Hz sampling. For scipy comparison."""
    from scipy.signal import chirp as scipy_chirp
    t = np.arange(8000) / 1000.0
    return scipy_chirp(t, f0=1.0, t1=8.0, f1=100.0)
