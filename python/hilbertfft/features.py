"""
Instantaneous Features

Amplitude, phase and frequency read off an interleaved analytic signal,
plus summary statistics of a signal's envelope.
"""

import numpy as np
from typing import Optional

from hilbertfft.config import HILBERTFFT_CONFIG
from hilbertfft.errors import InvalidArgumentError
from hilbertfft.interleave import as_real_array, deinterleave
from hilbertfft.transform import compute_hilbert_transform, compute_signal_envelope


def instantaneous_amplitude(analytic: np.ndarray) -> np.ndarray:
    """
    Compute instantaneous amplitude.

    Parameters
    ----------
    analytic : np.ndarray
        Interleaved analytic signal

    Returns
    -------
    np.ndarray
        Instantaneous amplitude (same as envelope)
    """
    return compute_signal_envelope(analytic)


def instantaneous_phase(analytic: np.ndarray) -> np.ndarray:
    """
    Compute instantaneous phase.

    Parameters
    ----------
    analytic : np.ndarray
        Interleaved analytic signal

    Returns
    -------
    np.ndarray
        Instantaneous phase (unwrapped), radians
    """
    if analytic is None:
        raise InvalidArgumentError("input analytic signal must not be None")
    z = deinterleave(analytic)
    if len(z) == 0:
        return np.zeros(0, dtype=np.float64)
    return np.unwrap(np.angle(z))


def instantaneous_frequency(
    analytic: np.ndarray,
    fs: float = 1.0
) -> np.ndarray:
    """
    Compute instantaneous frequency.

    Parameters
    ----------
    analytic : np.ndarray
        Interleaved analytic signal
    fs : float
        Sampling frequency

    Returns
    -------
    np.ndarray
        Instantaneous frequency, same units as fs

    Notes
    -----
    f(t) = (1/2π) * d(phase)/dt
    where phase = angle(z(t))
    """
    if fs <= 0:
        raise InvalidArgumentError(f"Sampling frequency must be positive, got {fs}")

    phase = instantaneous_phase(analytic)
    if len(phase) < 2:
        return np.zeros(len(phase), dtype=np.float64)
    return np.gradient(phase, 1 / fs) / (2 * np.pi)


def envelope_statistics(
    signal: np.ndarray,
    backend: Optional[str] = None
) -> dict:
    """
    Compute instantaneous amplitude envelope statistics of a 1D signal.

    Parameters
    ----------
    signal : np.ndarray
        1D array of real values. Length >= 4 after dropping NaN.
    backend : str, optional
        FFT backend. Default from configuration.

    Returns
    -------
    dict with keys:
        envelope_mean : float     — mean of envelope (average amplitude)
        envelope_std : float      — std of envelope (amplitude variability)
        envelope_max : float      — peak envelope value
        envelope_min : float      — minimum envelope value
        envelope_range : float    — max - min
        envelope_trend : float    — slope of linear fit to envelope
        envelope_cv : float       — coefficient of variation (std/mean)

    Notes
    -----
    The signal is mean-centered before computing the analytic signal
    to avoid the DC component dominating the envelope.
    """
    signal = as_real_array(signal, "signal").ravel()

    nan_result = {
        'envelope_mean': np.nan,
        'envelope_std': np.nan,
        'envelope_max': np.nan,
        'envelope_min': np.nan,
        'envelope_range': np.nan,
        'envelope_trend': np.nan,
        'envelope_cv': np.nan,
    }

    min_samples = HILBERTFFT_CONFIG.min_samples.envelope_statistics

    # Drop NaN/Inf values
    signal = signal[np.isfinite(signal)]
    if len(signal) < min_samples:
        return nan_result

    centered = signal - np.mean(signal)
    env = compute_signal_envelope(compute_hilbert_transform(centered, backend=backend))

    env_mean = float(np.mean(env))
    env_std = float(np.std(env))
    env_max = float(np.max(env))
    env_min = float(np.min(env))

    t = np.arange(len(env), dtype=np.float64)
    trend = float(np.polyfit(t, env, 1)[0])

    floor = HILBERTFFT_CONFIG.envelope.cv_mean_floor
    cv = float(env_std / env_mean) if env_mean > floor else np.nan

    return {
        'envelope_mean': env_mean,
        'envelope_std': env_std,
        'envelope_max': env_max,
        'envelope_min': env_min,
        'envelope_range': float(env_max - env_min),
        'envelope_trend': trend,
        'envelope_cv': cv,
    }
