"""
Random draws for pyapop.
"""

import numpy as np
from typing import Optional, Sequence

from ..core import DataSet
from ..errors import stop
from ..options import opts
from ..utils.validation import validate_positive
from .models import Model

_spare_rng: Optional[np.random.Generator] = None


def rng_alloc(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create a random generator.

    Parameters
    ----------
    seed : int, optional
        Seed to use. If None, ``opts.rng_seed`` is used and then incremented,
        so successive calls give different streams.
    """
    if seed is None:
        seed = opts.rng_seed
        opts.rng_seed += 1
    return np.random.default_rng(seed)


def _get_spare_rng() -> np.random.Generator:
    global _spare_rng
    if _spare_rng is None:
        _spare_rng = rng_alloc()
    return _spare_rng


def rng_ghgb3(rng: np.random.Generator, a: Sequence[float]) -> float:
    """
    Draw from a Generalized Hypergeometric type B3 distribution.

    Devroye uses this as the base for many of his generators, including the
    Waring.

    Parameters
    ----------
    rng : numpy.random.Generator
    a : sequence of 3 floats
        Shape parameters, all positive

    Returns
    -------
    float
        An integer-valued draw, or NaN if a parameter is not positive
    """
    if len(a) != 3 or not all(x > 0 for x in a):
        return stop("All three inputs must be positive.", retval=np.nan, level=0)
    aa = rng.gamma(a[0], 1)
    b = rng.gamma(a[1], 1)
    c = rng.gamma(a[2], 1)
    return float(rng.poisson(aa * b / c))


def model_draws(
    model: Optional[Model],
    count: int = 1000,
    rng: Optional[np.random.Generator] = None,
    draws: Optional[DataSet] = None
) -> DataSet:
    """
    Make random draws from a model into the matrix of a DataSet.

    Parameters
    ----------
    model : Model
        Model with its parameters already set or estimated
    count : int, optional
        Number of draws. Ignored if ``draws`` is given (default: 1000)
    rng : numpy.random.Generator, optional
        Generator to use. If None, a spare generator kept by this module is
        used; it is seeded from ``opts.rng_seed`` the first time.
    draws : DataSet, optional
        Set whose matrix is to be filled, one draw per row

    Returns
    -------
    DataSet
        ``draws`` if given, otherwise a new set of shape (count, dsize).
        On failure ``error`` is set: 'n' if the model is None or its draw
        size is unknown, 's' if the ``draws`` matrix is narrower than a
        draw.

    Examples
    --------
    >>> from pyapop.distributions import MultivariateNormal
    >>> model = MultivariateNormal([0.0, 10.0], np.eye(2))
    >>> out = model_draws(model, count=5, rng=np.random.default_rng(1))
    >>> out.matrix.shape
    (5, 2)
    """
    if model is None or model.dsize <= 0:
        out = DataSet()
        out.error = 'n'
        message = ("Input model is None." if model is None
                   else "Input model has dsize == 0.")
        return stop(message, retval=out, level=0)

    if draws is not None:
        if draws.matrix is None:
            return stop("Input data set's matrix is None.", retval=draws, level=1)
        if draws.n_cols < model.dsize:
            draws.error = 's'
            return stop(
                "Input data set's matrix column count is less than the "
                "model's draw size.",
                retval=draws, level=1
            )
        count = draws.n_rows
        out = draws
    else:
        validate_positive(count, "count")
        out = DataSet(matrix=np.zeros((count, model.dsize)))

    if rng is None:
        rng = _get_spare_rng()
    for i in range(count):
        out.matrix[i, :model.dsize] = model.draw(rng)
    return out
