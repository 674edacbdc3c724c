"""
Probability distributions for pyapop.

Classes:
    Model: Base class for models
    BetaModel: Beta distribution
    MultivariateNormal: Multivariate Normal distribution
    Histogram: Binned empirical distribution

Functions:
    beta_from_mean_var: Beta distribution from its mean and variance
    histogram_moving_average: Smooth a Histogram
    rng_alloc: Create a seeded random generator
    rng_ghgb3: Generalized Hypergeometric type B3 draw
    model_draws: Fill a DataSet with draws from a model
"""

from .models import (
    Model,
    BetaModel,
    MultivariateNormal,
    beta_from_mean_var,
)
from .histogram import Histogram, histogram_moving_average
from .sampling import rng_alloc, rng_ghgb3, model_draws

__all__ = [
    "Model",
    "BetaModel",
    "MultivariateNormal",
    "beta_from_mean_var",
    "Histogram",
    "histogram_moving_average",
    "rng_alloc",
    "rng_ghgb3",
    "model_draws",
]
