"""
pyapop: statistics odds and ends on top of numpy and scipy

A small toolkit of self-contained routines for working with statistical
data sets.

The toolkit provides:
- A DataSet type holding vector, matrix, text and weight columns by row
- In-place sorting of a DataSet by one column, and vector percentiles
- Text pasting and regular-expression substring extraction
- Distribution helpers (Beta from moments, multivariate Normal, histograms)
- Linear algebra conveniences (covariance, determinant/inverse, PCA, stacking)
- Generalized harmonic numbers and moving-average smoothing
- HDF5 storage of data sets
"""

__version__ = "1.0.0"
__author__ = "pyapop Contributors"
__license__ = "MIT"

# Global options and errors
from .options import opts, set_options
from .errors import InvalidArgumentError, PyapopError, PyapopWarning

# Import core classes
from .core import DataSet, Names

# Import sorting functions
from .sorting import data_sort, sort_indices, vector_percentiles

# Import text functions
from .text import text_paste, regex

# Import utilities
from .utils import (
    generalized_harmonic,
    vector_moving_average,
    system,
)

# Import linear algebra
from .linalg import (
    covariance_matrix,
    det_and_inv,
    x_prime_sigma_x,
    sv_decomposition,
    matrix_stack,
    matrix_rm_columns,
)

# Import distributions
from .distributions import (
    BetaModel,
    MultivariateNormal,
    Histogram,
    beta_from_mean_var,
    histogram_moving_average,
    model_draws,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Options and errors
    "opts",
    "set_options",
    "InvalidArgumentError",
    "PyapopError",
    "PyapopWarning",
    # Core classes
    "DataSet",
    "Names",
    # Sorting
    "data_sort",
    "sort_indices",
    "vector_percentiles",
    # Text
    "text_paste",
    "regex",
    # Utilities
    "generalized_harmonic",
    "vector_moving_average",
    "system",
    # Linear algebra
    "covariance_matrix",
    "det_and_inv",
    "x_prime_sigma_x",
    "sv_decomposition",
    "matrix_stack",
    "matrix_rm_columns",
    # Distributions
    "BetaModel",
    "MultivariateNormal",
    "Histogram",
    "beta_from_mean_var",
    "histogram_moving_average",
    "model_draws",
]
