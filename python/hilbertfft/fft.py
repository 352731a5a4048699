"""
Complex FFT Primitive

Forward and inverse complex FFT over the interleaved layout.
Delegates to scipy.fft (default) or numpy.fft; both handle
arbitrary n, not only powers of two.
"""

import numpy as np
import scipy.fft
from typing import Optional

from hilbertfft.config import HILBERTFFT_CONFIG, FFT_BACKENDS
from hilbertfft.interleave import interleave, deinterleave
from hilbertfft.logging import get_logger

logger = get_logger(__name__)


def _resolve_backend(backend: Optional[str]):
    if backend is None:
        backend = HILBERTFFT_CONFIG.fft.backend
    if backend == "scipy":
        return scipy.fft
    if backend == "numpy":
        return np.fft
    raise ValueError(f"Unknown backend: {backend} (expected one of {FFT_BACKENDS})")


def forward_fft(buffer: np.ndarray, backend: Optional[str] = None) -> np.ndarray:
    """
    Forward complex FFT, unnormalized.

    Parameters
    ----------
    buffer : np.ndarray
        Interleaved complex input, length 2n with n >= 1
    backend : str, optional
        'scipy' or 'numpy'. Default from configuration.

    Returns
    -------
    np.ndarray
        Interleaved spectrum, length 2n

    Notes
    -----
    X[k] = sum_{j=0}^{n-1} x[j] * exp(-2*pi*i*k*j/n)
    """
    module = _resolve_backend(backend)
    values = deinterleave(buffer)
    logger.debug("forward fft: n=%d backend=%s", len(values), module.__name__)
    return interleave(module.fft(values, norm="backward"))


def inverse_fft(
    buffer: np.ndarray,
    normalize: bool = True,
    backend: Optional[str] = None
) -> np.ndarray:
    """
    Inverse complex FFT.

    Parameters
    ----------
    buffer : np.ndarray
        Interleaved complex spectrum, length 2n with n >= 1
    normalize : bool
        Apply the 1/n factor so the inverse undoes forward_fft
    backend : str, optional
        'scipy' or 'numpy'. Default from configuration.

    Returns
    -------
    np.ndarray
        Interleaved result, length 2n
    """
    module = _resolve_backend(backend)
    values = deinterleave(buffer)
    logger.debug(
        "inverse fft: n=%d normalize=%s backend=%s",
        len(values), normalize, module.__name__,
    )
    # norm="forward" puts the 1/n on the forward pass, leaving ifft unscaled
    norm = "backward" if normalize else "forward"
    return interleave(module.ifft(values, norm=norm))
