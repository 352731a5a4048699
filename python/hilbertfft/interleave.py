"""
Interleaved Complex Layout

A sequence of n complex values is carried as a flat float64 array of 2n:

    a[2*k]     = Re[k]
    a[2*k + 1] = Im[k],   0 <= k < n

complex128 has exactly this memory layout, so conversions are views
followed by a copy.
"""

import numpy as np

from hilbertfft.errors import InvalidArgumentError

# bool, signed int, unsigned int, float
_REAL_KINDS = "biuf"


def as_real_array(values, name: str = "values") -> np.ndarray:
    """
    Coerce input to float64, rejecting complex and non-numeric dtypes.

    Complex arrays are refused rather than cast, since the cast would
    drop imaginary parts. Strings are refused even when numpy could
    parse them.
    """
    if values is None:
        raise InvalidArgumentError(f"input {name} must not be None")
    try:
        arr = np.asarray(values)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"input {name} must be real-valued numbers") from exc
    if np.iscomplexobj(arr):
        raise InvalidArgumentError(
            f"input {name} must be real-valued, got complex dtype {arr.dtype} "
            "(use interleave() for complex values)"
        )
    if arr.dtype.kind not in _REAL_KINDS:
        raise InvalidArgumentError(
            f"input {name} must be real-valued numbers, got dtype {arr.dtype}"
        )
    return arr.astype(np.float64, copy=False)


def interleave(values: np.ndarray) -> np.ndarray:
    """
    Flatten complex values into the interleaved layout.

    Parameters
    ----------
    values : np.ndarray
        1D complex (or real) array of n values

    Returns
    -------
    np.ndarray
        float64 array of 2n values
    """
    values = np.ascontiguousarray(values, dtype=np.complex128).ravel()
    return values.view(np.float64).copy()


def deinterleave(buffer: np.ndarray) -> np.ndarray:
    """
    Pair up an interleaved buffer into complex values.

    Parameters
    ----------
    buffer : np.ndarray
        1D real array of even length 2n

    Returns
    -------
    np.ndarray
        complex128 array of n values
    """
    buffer = np.ascontiguousarray(as_real_array(buffer, "buffer")).ravel()
    if len(buffer) % 2 != 0:
        raise InvalidArgumentError(
            f"Interleaved buffer must have even length, got {len(buffer)}"
        )
    return buffer.view(np.complex128).copy()
