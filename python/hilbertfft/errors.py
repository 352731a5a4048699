"""Exceptions raised by hilbertfft."""


class InvalidArgumentError(ValueError):
    """Input rejected at the call boundary, before any FFT work."""
