"""
Percentiles of a vector.
"""

import numpy as np
from typing import Optional, Sequence

from ..errors import stop


def vector_percentiles(
    data: Optional[Sequence[float]],
    rounding: str = 'd'
) -> Optional[np.ndarray]:
    """
    Compute the 0th through 100th percentiles of a vector.

    Parameters
    ----------
    data : array_like
        1D numeric data (not modified)
    rounding : str, optional
        How to resolve percentiles that fall between two data points:
        'u' rounds up to the next value, 'a' averages the two neighbours,
        anything else rounds down (default: 'd')

    Returns
    -------
    ndarray or None
        Array of length 101 where element ``k`` is the ``k``-th percentile.
        Element 0 is always the minimum and element 100 the maximum. None
        if ``data`` is None.

    Examples
    --------
    >>> pct = vector_percentiles(np.arange(11.0))
    >>> pct[50], pct[95]
    (5.0, 9.0)
    >>> vector_percentiles(np.arange(11.0), rounding='u')[95]
    10.0

    Notes
    -----
    With 'u' or 'a', at least k% of the sample is at or below element k.
    With 'd' or 'a', at least (100-k)% of the sample is at or above it.
    """
    if data is None:
        return stop("You gave me None data.", level=0)

    sorted_data = np.sort(np.asarray(data, dtype=float).ravel())
    if len(sorted_data) == 0:
        return stop("You gave me an empty vector.", level=0)

    n = len(sorted_data)
    pctiles = np.empty(101)
    for i in range(101):
        position = i * (n - 1) / 100.0
        index = int(position)
        exact = index == position
        if rounding == 'u' and not exact:
            index += 1
        if rounding == 'a' and not exact:
            pctiles[i] = (sorted_data[index] + sorted_data[index + 1]) / 2.
        else:
            pctiles[i] = sorted_data[index]
    return pctiles
