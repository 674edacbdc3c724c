"""
Map and apply helpers for vectors and matrix rows.

The ``map`` functions return a new vector of results; the ``apply``
functions modify their input in place.
"""

import numpy as np
from typing import Callable

from .validation import validate_vector, validate_matrix


def matrix_map(m: np.ndarray, fn: Callable[[np.ndarray], float]) -> np.ndarray:
    """
    Apply ``fn`` to each row of a matrix and collect the results.

    Examples
    --------
    >>> matrix_map(np.array([[1.0, 2.0], [3.0, 4.0]]), np.sum)
    array([3., 7.])
    """
    validate_matrix(m)
    return np.array([fn(row) for row in m], dtype=float)


def vector_map(v: np.ndarray, fn: Callable[[float], float]) -> np.ndarray:
    """Apply ``fn`` to each element of a vector and collect the results."""
    validate_vector(v)
    return np.array([fn(x) for x in v], dtype=float)


def matrix_apply(m: np.ndarray, fn: Callable[[np.ndarray], None]) -> None:
    """
    Call ``fn`` on a view of each row of a matrix.

    ``fn`` is expected to modify the row in place.

    Examples
    --------
    >>> m = np.array([[1.0, 2.0], [3.0, 4.0]])
    >>> matrix_apply(m, lambda row: row.__imul__(2))
    >>> m
    array([[2., 4.],
           [6., 8.]])
    """
    validate_matrix(m)
    for row in m:
        fn(row)


def vector_apply(v: np.ndarray, fn: Callable[[float], float]) -> None:
    """Replace each element ``x`` of a vector with ``fn(x)``, in place."""
    validate_vector(v)
    for i in range(len(v)):
        v[i] = fn(v[i])
