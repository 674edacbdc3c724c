"""
Mathematical utility functions for pyapop.

Generalized harmonic numbers and moving-average smoothing.
"""

import numpy as np
from typing import Dict, List, Optional, Sequence

from ..errors import stop

# For each exponent s, partial sums: element k holds the sum for N = k + 1.
_harmonic_cache: Dict[float, List[float]] = {}


def generalized_harmonic(N: int, s: float) -> float:
    """
    Compute the generalized harmonic number sum_{n=1}^N 1/n^s.

    Parameters
    ----------
    N : int
        Number of terms, must be positive
    s : float
        Exponent

    Returns
    -------
    float
        The sum, or NaN if ``N <= 0``

    Examples
    --------
    >>> generalized_harmonic(1, 2.0)
    1.0
    >>> generalized_harmonic(2, 1.0)
    1.5

    Notes
    -----
    The sum is computed by brute force, but every partial sum is kept, so a
    repeated request for the same ``s`` is a lookup and a request for a
    larger ``N`` only adds the missing terms.
    """
    if N <= 0:
        return stop(f"N is {N}, but must be greater than 0.", retval=np.nan, level=0)

    partial = _harmonic_cache.setdefault(s, [1.0])
    for n in range(len(partial) + 1, N + 1):
        partial.append(partial[-1] + 1 / n ** s)
    return partial[N - 1]


def clear_harmonic_cache() -> None:
    """Forget every saved generalized harmonic partial sum."""
    _harmonic_cache.clear()


def vector_moving_average(
    v: Optional[Sequence[float]],
    bandwidth: int
) -> Optional[np.ndarray]:
    """
    Moving average of a vector.

    Parameters
    ----------
    v : array_like
        1D data, unsmoothed
    bandwidth : int
        Number of elements in each average. Even bandwidths are rounded up
        to the next odd number so the window stays centred.

    Returns
    -------
    ndarray or None
        Smoothed vector of length ``len(v) - 2 * (bandwidth // 2)``, None on
        bad input

    Examples
    --------
    >>> vector_moving_average([1.0, 2.0, 3.0, 4.0, 5.0], 3)
    array([2., 3., 4.])
    """
    if v is None:
        return stop("You asked me to smooth a None vector; returning None.", level=0)
    if bandwidth < 1:
        return stop("Bandwidth must be >= 1.", level=0)

    v = np.asarray(v, dtype=float).ravel()
    halfspan = bandwidth // 2
    if len(v) < 2 * halfspan + 1:
        return stop(
            f"Bandwidth {bandwidth} is too wide for a vector of length {len(v)}.",
            level=0
        )
    window = np.ones(2 * halfspan + 1) / (2 * halfspan + 1)
    return np.convolve(v, window, mode='valid')
