"""
Probability models for pyapop.

A model holds its parameters in a DataSet and knows how to estimate them
from data, evaluate the (log) likelihood of data and make random draws.

Classes:
    Model: Base class
    BetaModel: Beta distribution
    MultivariateNormal: Multivariate Normal distribution
"""

import numpy as np
from typing import Optional, Union
from scipy import stats
from scipy.linalg import cholesky

from ..core import DataSet
from ..errors import notify, stop
from ..linalg import covariance_matrix, det_and_inv, x_prime_sigma_x

DataLike = Union[DataSet, np.ndarray]


def _values(data: DataLike) -> np.ndarray:
    """Flatten the numeric part of a DataSet or array to 1D."""
    if isinstance(data, DataSet):
        if data.matrix is not None:
            return data.matrix.ravel()
        if data.vector is not None:
            return data.vector
        raise ValueError("DataSet has no numeric data")
    return np.asarray(data, dtype=float).ravel()


def _matrix(data: DataLike) -> np.ndarray:
    """The matrix of a DataSet, or an array viewed as one row per observation."""
    if isinstance(data, DataSet):
        if data.matrix is None:
            raise ValueError("DataSet has no matrix")
        return data.matrix
    m = np.asarray(data, dtype=float)
    return m.reshape(1, -1) if m.ndim == 1 else m


class Model:
    """
    Base class for probability models.

    Attributes
    ----------
    name : str
        Human-readable model name
    parameters : DataSet or None
        Parameter values; None until set or estimated
    error : str or None
        One-character code for a failure while building the model,
        e.g. 'r' for a parameter out of range
    """

    name = "Model"

    def __init__(self, parameters: Optional[DataSet] = None):
        self.parameters = parameters
        self.error = None

    @property
    def dsize(self) -> int:
        """Number of values in one draw (0 if not known yet)."""
        return 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.parameters!r})"

    def estimate(self, data: DataLike) -> 'Model':
        raise NotImplementedError

    def log_likelihood(self, data: DataLike) -> float:
        raise NotImplementedError

    def p(self, data: DataLike) -> float:
        """Likelihood of the data: exp(log_likelihood)."""
        return float(np.exp(self.log_likelihood(data)))

    def draw(self, rng: np.random.Generator) -> np.ndarray:
        raise NotImplementedError


class BetaModel(Model):
    """
    Beta distribution on [0, 1].

    Parameters
    ----------
    alpha, beta : float
        Shape parameters

    Examples
    --------
    >>> model = BetaModel(2.0, 3.0)
    >>> model.mean
    0.4
    """

    name = "Beta distribution"

    def __init__(self, alpha: float = np.nan, beta: float = np.nan):
        super().__init__(DataSet(vector=[alpha, beta]))

    @property
    def alpha(self) -> float:
        return float(self.parameters.vector[0])

    @property
    def beta(self) -> float:
        return float(self.parameters.vector[1])

    @property
    def dsize(self) -> int:
        return 1

    @property
    def mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        return a * b / ((a + b) ** 2 * (a + b + 1))

    def estimate(self, data: DataLike) -> 'BetaModel':
        """Method-of-moments fit. Returns self."""
        values = _values(data)
        values = values[~np.isnan(values)]
        fitted = beta_from_mean_var(float(np.mean(values)), float(np.var(values, ddof=1)))
        self.parameters = fitted.parameters
        self.error = fitted.error
        return self

    def log_likelihood(self, data: DataLike) -> float:
        return float(np.sum(stats.beta.logpdf(_values(data), self.alpha, self.beta)))

    def draw(self, rng: np.random.Generator) -> np.ndarray:
        return np.array([rng.beta(self.alpha, self.beta)])


def beta_from_mean_var(m: float, v: float) -> BetaModel:
    """
    Beta distribution with a given mean and variance.

    The (alpha, beta) parameters are hard to interpret, but there is a
    one-to-one mapping between them and (mean, variance) pairs, so this
    function takes the latter and works out the former.

    Parameters
    ----------
    m : float
        Mean, strictly between 0 and 1
    v : float
        Variance, strictly between 0 and m(1-m). The variance of a
        Uniform(0, 1) is 1/12; things get odd near that value with a mean far
        from 1/2.

    Returns
    -------
    BetaModel
        Model with alpha and beta set. If ``m`` or ``v`` is out of range the
        parameters are NaN and ``error`` is 'r'.

    Examples
    --------
    >>> model = beta_from_mean_var(0.4, 0.04)
    >>> round(model.alpha, 6), round(model.beta, 6)
    (2.0, 3.0)
    """
    if not 0 < m < 1:
        out = BetaModel()
        out.error = 'r'
        return stop(
            f"You asked for a beta distribution with mean {m}, but the mean "
            "of the beta will always be strictly between zero and one.",
            retval=out, level=0
        )
    if not 0 < v < m * (1 - m):
        out = BetaModel()
        out.error = 'r'
        return stop(
            f"You asked for a beta distribution with variance {v}, but with "
            f"mean {m} the variance must be strictly between 0 and {m * (1 - m)}.",
            retval=out, level=0
        )
    k = (m * (1 - m) / v) - 1
    return BetaModel(m * k, k * (1 - m))


class MultivariateNormal(Model):
    """
    Multivariate Normal distribution.

    The parameter DataSet holds the vector of means in its vector and the
    covariance matrix in its matrix.

    Parameters
    ----------
    mean : array_like, optional
        Vector of means
    cov : array_like, optional
        Covariance matrix

    Examples
    --------
    >>> model = MultivariateNormal([0.0, 0.0], np.eye(2))
    >>> round(model.log_likelihood(np.zeros((1, 2))), 4)
    -1.8379
    """

    name = "Multivariate normal distribution"

    def __init__(self, mean=None, cov=None):
        parameters = None
        if mean is not None and cov is not None:
            parameters = DataSet(vector=mean, matrix=cov)
        super().__init__(parameters)

    @property
    def mean(self) -> np.ndarray:
        return self.parameters.vector

    @property
    def cov(self) -> np.ndarray:
        return self.parameters.matrix

    @property
    def dsize(self) -> int:
        return 0 if self.parameters is None else len(self.parameters.vector)

    def estimate(self, data: DataLike) -> 'MultivariateNormal':
        """
        Set the means and covariance from data, one observation per row.

        Returns self.
        """
        m = _matrix(data)
        self.parameters = DataSet(
            vector=np.mean(m, axis=0),
            matrix=covariance_matrix(m, normalize=False)
        )
        return self

    def log_likelihood(self, data: DataLike) -> float:
        """
        Log likelihood of data, one observation per row.

        Returns -inf if the covariance matrix has zero determinant, so
        that maximizers look elsewhere.
        """
        x = _matrix(data)
        determinant, inverse = det_and_inv(self.cov, calc_det=True, calc_inv=True)
        if determinant == 0:
            notify(1, "The determinant of the given covariance is zero. Returning -inf.")
            return -np.inf

        dimensions = x.shape[1]
        ll = 0.0
        for row in x:
            ll -= x_prime_sigma_x(row - self.mean, inverse) / 2
            ll -= np.log(2 * np.pi) * dimensions / 2. + .5 * np.log(determinant)
        return float(ll)

    def draw(self, rng: np.random.Generator) -> np.ndarray:
        """One draw: lower Cholesky factor times standard normals, plus the mean."""
        z = rng.standard_normal(self.dsize)
        lower = cholesky(self.cov, lower=True)
        return lower @ z + self.mean
