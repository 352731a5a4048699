"""
Hilbert Configuration

Centralized configuration for transform defaults.
Avoids hardcoded magic numbers scattered across modules.

Usage:
    from hilbertfft.config import HILBERTFFT_CONFIG as cfg

    # Access values
    backend = cfg.fft.backend
    if n < cfg.min_samples.envelope_statistics:
        return nan_result

The FFT backend defaults to scipy and can be switched with the
HILBERTFFT_FFT_BACKEND environment variable ("scipy" or "numpy").
"""

import os
from dataclasses import dataclass, field

FFT_BACKENDS = ("scipy", "numpy")


def _backend_from_env() -> str:
    return os.environ.get("HILBERTFFT_FFT_BACKEND", "scipy").strip().lower()


@dataclass(frozen=True)
class FFTConfig:
    """Configuration for the complex FFT primitive."""

    # "scipy" (scipy.fft) or "numpy" (numpy.fft)
    backend: str = field(default_factory=_backend_from_env)

    def __post_init__(self):
        if self.backend not in FFT_BACKENDS:
            raise ValueError(
                f"Unknown backend: {self.backend} (expected one of {FFT_BACKENDS}; "
                "check HILBERTFFT_FFT_BACKEND)"
            )


@dataclass(frozen=True)
class EnvelopeConfig:
    """Configuration for the envelope reducer."""

    # Odd-length interleaved input: raise (True) or drop trailing value (False)
    strict_length: bool = True

    # Envelope mean below this gives NaN coefficient of variation
    cv_mean_floor: float = 1e-12


@dataclass(frozen=True)
class MinSamplesConfig:
    """Minimum sample requirements."""

    envelope_statistics: int = 4   # Finite samples after NaN removal


@dataclass(frozen=True)
class HilbertConfig:
    """Master configuration."""

    fft: FFTConfig = field(default_factory=FFTConfig)
    envelope: EnvelopeConfig = field(default_factory=EnvelopeConfig)
    min_samples: MinSamplesConfig = field(default_factory=MinSamplesConfig)


# Global singleton instance
HILBERTFFT_CONFIG = HilbertConfig()
