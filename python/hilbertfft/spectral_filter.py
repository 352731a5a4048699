"""
Spectral Filter

Per-bin weights that turn the two-sided spectrum of a real signal
into the one-sided spectrum of its analytic signal.
"""

import numbers

import numpy as np

from hilbertfft.errors import InvalidArgumentError


def bin_weights(m: int) -> np.ndarray:
    """
    Compute the analytic-signal weight of each frequency bin.

    Parameters
    ----------
    m : int
        Number of complex bins (the signal length)

    Returns
    -------
    np.ndarray
        float64 array of m weights, each 0, 1 or 2

    Notes
    -----
    h[0] = 1 (DC)
    m even: h[m/2] = 1 (Nyquist), h[1 : m/2] = 2
    m odd:  h[1 : (m+1)/2] = 2
    All remaining (negative-frequency) bins are 0.
    """
    if isinstance(m, bool) or not isinstance(m, numbers.Integral):
        raise InvalidArgumentError(f"Bin count must be an integer, got {m!r}")
    if m < 0:
        raise InvalidArgumentError(f"Bin count must be non-negative, got {m}")

    m = int(m)
    h = np.zeros(m, dtype=np.float64)
    if m == 0:
        return h

    h[0] = 1.0
    if m % 2 == 0:
        h[m // 2] = 1.0
        h[1:m // 2] = 2.0
    else:
        h[1:(m + 1) // 2] = 2.0
    return h


def spectral_filter(m: int) -> np.ndarray:
    """
    Build the interleaved filter vector for an m-bin spectrum.

    Both slots of bin k carry the same weight, so multiplying an
    interleaved spectrum element-wise scales real and imaginary
    parts together.

    Parameters
    ----------
    m : int
        Number of complex bins

    Returns
    -------
    np.ndarray
        float64 array of 2m values drawn from {0, 1, 2}
    """
    return np.repeat(bin_weights(m), 2)
