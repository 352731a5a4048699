"""
hilbertfft — FFT-based Hilbert transform and amplitude envelope.

Stateless numerical core: every call allocates its own buffers,
so calls can run concurrently without coordination.

Usage:
    from hilbertfft import compute_hilbert_transform, compute_signal_envelope

    analytic = compute_hilbert_transform(signal)    # interleaved, length 2n
    env = compute_signal_envelope(analytic)         # length n

    # Or by module:
    from hilbertfft.spectral_filter import spectral_filter
    from hilbertfft.features import instantaneous_frequency

Set HILBERTFFT_FFT_BACKEND=numpy to use numpy.fft instead of scipy.fft.
"""
__version__ = "0.1.0"

from hilbertfft.config import HILBERTFFT_CONFIG
from hilbertfft.errors import InvalidArgumentError
from hilbertfft.fft import forward_fft, inverse_fft
from hilbertfft.interleave import interleave, deinterleave
from hilbertfft.spectral_filter import bin_weights, spectral_filter
from hilbertfft.transform import (
    compute_hilbert_transform,
    compute_signal_envelope,
    analytic_signal,
)
from hilbertfft.features import (
    instantaneous_amplitude,
    instantaneous_phase,
    instantaneous_frequency,
    envelope_statistics,
)

FFT_BACKEND = HILBERTFFT_CONFIG.fft.backend

__all__ = [
    # Core
    "compute_hilbert_transform",
    "compute_signal_envelope",
    "spectral_filter",
    "bin_weights",
    # FFT primitive
    "forward_fft",
    "inverse_fft",
    "FFT_BACKEND",
    # Layout
    "interleave",
    "deinterleave",
    "analytic_signal",
    # Features
    "instantaneous_amplitude",
    "instantaneous_phase",
    "instantaneous_frequency",
    "envelope_statistics",
    # Errors / config
    "InvalidArgumentError",
    "HILBERTFFT_CONFIG",
]
