"""
Hilbert Transform

Analytic signal via FFT spectral masking, and its amplitude envelope.
Results use the interleaved complex layout (see hilbertfft.interleave).
"""

import numpy as np
from typing import Optional

from hilbertfft.config import HILBERTFFT_CONFIG
from hilbertfft.errors import InvalidArgumentError
from hilbertfft.fft import forward_fft, inverse_fft
from hilbertfft.interleave import as_real_array, deinterleave
from hilbertfft.logging import get_logger
from hilbertfft.spectral_filter import spectral_filter

logger = get_logger(__name__)


def _as_1d(values, name: str) -> np.ndarray:
    arr = as_real_array(values, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise InvalidArgumentError(f"input {name} must be 1D, got {arr.ndim}D array")
    return arr


def compute_hilbert_transform(
    signal: np.ndarray,
    backend: Optional[str] = None
) -> np.ndarray:
    """
    Compute the analytic signal of a real input using the FFT.

    Parameters
    ----------
    signal : np.ndarray
        Input signal (real), length n
    backend : str, optional
        FFT backend, 'scipy' or 'numpy'. Default from configuration.

    Returns
    -------
    np.ndarray
        Analytic signal, float64 of length 2n, structured as
        a[2*k] = Re[k], a[2*k+1] = Im[k]. Empty for empty input.

    Raises
    ------
    InvalidArgumentError
        If signal is None or not one-dimensional.

    Notes
    -----
    z(t) = x(t) + i*H[x](t)
    Computed as IFFT(FFT(x) * h), where h doubles positive frequencies,
    zeroes negative ones and keeps DC (and Nyquist for even n).
    """
    signal = _as_1d(signal, "signal")
    n = len(signal)
    if n == 0:
        return np.zeros(0, dtype=np.float64)

    # Real samples on even slots, zero imaginary parts
    buffer = np.zeros(2 * n, dtype=np.float64)
    buffer[0::2] = signal

    spectrum = forward_fft(buffer, backend=backend)
    spectrum *= spectral_filter(n)

    logger.debug("hilbert transform: n=%d", n)
    return inverse_fft(spectrum, normalize=True, backend=backend)


def compute_signal_envelope(
    analytic_signal: np.ndarray,
    strict: Optional[bool] = None
) -> np.ndarray:
    """
    Compute the amplitude envelope of an analytic signal.

    Parameters
    ----------
    analytic_signal : np.ndarray
        Interleaved analytic signal of length 2n, as returned by
        compute_hilbert_transform
    strict : bool, optional
        Odd-length input raises when True, drops the trailing value
        when False. Default from configuration (True).

    Returns
    -------
    np.ndarray
        Envelope, n non-negative values

    Notes
    -----
    A(t) = |z(t)| = sqrt(Re[z]^2 + Im[z]^2)
    """
    buffer = _as_1d(analytic_signal, "analytic signal")

    if strict is None:
        strict = HILBERTFFT_CONFIG.envelope.strict_length

    if len(buffer) % 2 != 0:
        if strict:
            raise InvalidArgumentError(
                f"Analytic signal must have even length, got {len(buffer)}"
            )
        buffer = buffer[:-1]

    re = buffer[0::2]
    im = buffer[1::2]
    return np.sqrt(re * re + im * im)


def analytic_signal(
    signal: np.ndarray,
    backend: Optional[str] = None
) -> np.ndarray:
    """
    Compute the analytic signal as complex values.

    Parameters
    ----------
    signal : np.ndarray
        Input signal (real), length n
    backend : str, optional
        FFT backend. Default from configuration.

    Returns
    -------
    np.ndarray
        complex128 array of n values
    """
    return deinterleave(compute_hilbert_transform(signal, backend=backend))
