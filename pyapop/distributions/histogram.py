"""
Histogram model and histogram smoothing.
"""

import numpy as np
from typing import Optional, Sequence, Union

from ..core import DataSet
from ..errors import stop
from ..utils.math_utils import vector_moving_average
from .models import DataLike, Model, _values


class Histogram(Model):
    """
    Empirical distribution given by bin counts over fixed edges.

    Parameters
    ----------
    bins : array_like
        Count (or weight) in each bin
    edges : array_like
        Bin edges, one more than the number of bins

    Examples
    --------
    >>> h = Histogram.from_data([0.1, 0.2, 0.7], bins=2, range=(0, 1))
    >>> h.bins
    array([2., 1.])
    """

    name = "Histogram"

    def __init__(self, bins: Sequence[float], edges: Sequence[float]):
        bins = np.asarray(bins, dtype=float).ravel()
        edges = np.asarray(edges, dtype=float).ravel()
        if len(edges) != len(bins) + 1:
            raise ValueError(
                f"Need {len(bins) + 1} edges for {len(bins)} bins, got {len(edges)}"
            )
        super().__init__(DataSet(vector=bins))
        self.edges = edges

    @classmethod
    def from_data(
        cls,
        data: DataLike,
        bins: Union[int, Sequence[float]] = 10,
        range: Optional[tuple] = None
    ) -> 'Histogram':
        """Build a histogram from data with ``numpy.histogram``."""
        values = _values(data)
        values = values[~np.isnan(values)]
        counts, edges = np.histogram(values, bins=bins, range=range)
        return cls(counts, edges)

    @property
    def bins(self) -> np.ndarray:
        return self.parameters.vector

    @property
    def dsize(self) -> int:
        return 1

    def copy(self) -> 'Histogram':
        return Histogram(self.bins.copy(), self.edges.copy())

    def estimate(self, data: DataLike) -> 'Histogram':
        """Refill the bins from data, keeping the edges. Returns self."""
        values = _values(data)
        counts, _ = np.histogram(values[~np.isnan(values)], bins=self.edges)
        self.parameters = DataSet(vector=counts)
        return self

    def log_likelihood(self, data: DataLike) -> float:
        """Sum of log bin probabilities; -inf if any point falls in an empty bin or outside."""
        values = _values(data)
        total = np.sum(self.bins)
        idx = np.searchsorted(self.edges, values, side='right') - 1
        # The last edge is closed, as in numpy.histogram.
        idx[values == self.edges[-1]] = len(self.bins) - 1
        outside = (idx < 0) | (idx >= len(self.bins))
        if np.any(outside) or total == 0:
            return -np.inf
        with np.errstate(divide='ignore'):
            return float(np.sum(np.log(self.bins[idx] / total)))

    def draw(self, rng: np.random.Generator) -> np.ndarray:
        """Pick a bin with probability proportional to its count, then a uniform point in it."""
        k = rng.choice(len(self.bins), p=self.bins / np.sum(self.bins))
        return np.array([rng.uniform(self.edges[k], self.edges[k + 1])])


def histogram_moving_average(
    m: Optional[Histogram],
    bandwidth: int
) -> Optional[Histogram]:
    """
    Smooth a histogram with a moving average over its bins.

    Parameters
    ----------
    m : Histogram
        Histogram to smooth (not modified)
    bandwidth : int
        Number of bins in each average

    Returns
    -------
    Histogram or None
        New histogram with the same edges. Bins within ``bandwidth // 2`` of
        either end, where the window does not fit, are set to zero. None on
        bad input.

    Examples
    --------
    >>> h = Histogram([0, 3, 6, 3, 0], np.arange(6.0))
    >>> histogram_moving_average(h, 3).bins
    array([0., 3., 4., 3., 0.])
    """
    if not isinstance(m, Histogram):
        return stop("The first argument needs to be a Histogram model.", level=0)
    if bandwidth < 1:
        return stop("bandwidth must be >= 1.", level=0)

    smoothed = vector_moving_average(m.bins, bandwidth)
    if smoothed is None:
        return None
    half = bandwidth // 2
    out = m.copy()
    out.bins[:] = 0
    out.bins[half:half + len(smoothed)] = smoothed
    return out
