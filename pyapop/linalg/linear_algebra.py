"""
Assorted linear algebra for pyapop.

Covariance matrices, determinants and inverses, the quadratic form x'Sx,
singular value decomposition / principal components, and matrix stacking
and column deletion.
"""

import warnings
import numpy as np
from typing import Optional, Sequence, Tuple
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve, svd

from ..errors import notify, stop
from ..utils.validation import validate_matrix, validate_square, validate_vector


def covariance_matrix(m: np.ndarray, normalize: bool = False) -> np.ndarray:
    """
    Variance/covariance matrix of the columns of a data matrix.

    Parameters
    ----------
    m : ndarray
        Data matrix: rows are observations, columns are variables
    normalize : bool, optional
        If True, subtract each column's mean from ``m`` in place and compute
        the result as X'X, which is faster but changes the input.
        If False, ``m`` is left alone (default: False)

    Returns
    -------
    ndarray
        Square matrix of shape (n_cols, n_cols)

    Examples
    --------
    >>> m = np.array([[1.0, 2.0], [3.0, 6.0], [5.0, 10.0]])
    >>> covariance_matrix(m)
    array([[ 4.,  8.],
           [ 8., 16.]])

    Notes
    -----
    The divisor is ``n_rows - 1`` (the unbiased sample covariance).
    """
    validate_matrix(m)
    n = m.shape[0]
    if n < 2:
        raise ValueError(f"Need at least 2 observations, got {n}")

    if normalize:
        m -= m.mean(axis=0)
        centred = m
    else:
        centred = m - m.mean(axis=0)
    return centred.T @ centred / (n - 1)


def det_and_inv(
    m: np.ndarray,
    calc_det: bool = True,
    calc_inv: bool = True
) -> Tuple[float, Optional[np.ndarray]]:
    """
    Determinant and/or inverse of a square matrix via LU decomposition.

    The input matrix is not modified.

    Parameters
    ----------
    m : ndarray
        Square matrix
    calc_det : bool, optional
        Whether to compute the determinant (default: True)
    calc_inv : bool, optional
        Whether to compute the inverse (default: True)

    Returns
    -------
    det : float
        The determinant, or 0.0 if ``calc_det`` is False
    inverse : ndarray or None
        The inverse, or None if ``calc_inv`` is False or ``m`` is singular

    Examples
    --------
    >>> det, inv = det_and_inv(np.array([[2.0, 0.0], [0.0, 4.0]]))
    >>> det
    8.0
    >>> inv
    array([[0.5 , 0.  ],
           [0.  , 0.25]])
    """
    validate_square(m)
    with warnings.catch_warnings():
        # Singular input is reported below.
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(m)

    diagonal = np.diag(lu)
    singular = np.any(diagonal == 0)

    the_determinant = 0.0
    if calc_det:
        sign = -1.0 if np.count_nonzero(piv != np.arange(len(piv))) % 2 else 1.0
        the_determinant = float(sign * np.prod(diagonal))

    inverse = None
    if calc_inv:
        if singular:
            notify(1, "Matrix is singular; no inverse. Returning None.")
        else:
            inverse = lu_solve((lu, piv), np.eye(m.shape[0]))
    return the_determinant, inverse


def x_prime_sigma_x(x: np.ndarray, sigma: np.ndarray) -> float:
    """
    Compute the quadratic form x' Sigma x.

    Parameters
    ----------
    x : ndarray
        1D vector
    sigma : ndarray
        Symmetric matrix

    Returns
    -------
    float
    """
    validate_vector(x)
    validate_square(sigma)
    if sigma.shape[0] != len(x):
        raise ValueError(
            f"sigma is {sigma.shape}, but x has {len(x)} elements"
        )
    return float(x @ sigma @ x)


def normalize_for_svd(m: np.ndarray) -> None:
    """
    Scale each row and column of a square matrix by sqrt(diag), in place.

    Parameters
    ----------
    m : ndarray
        Square matrix, usually X'X. Modified in place.
    """
    validate_square(m)
    diagonal = np.sqrt(np.diag(m).copy())
    m *= diagonal[np.newaxis, :]
    m *= diagonal[:, np.newaxis]


def sv_decomposition(
    data: np.ndarray,
    dimensions_we_want: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Singular value decomposition, a.k.a. principal component analysis.

    Parameters
    ----------
    data : ndarray
        Data matrix, observations in rows
    dimensions_we_want : int
        Number of eigenvectors (those with the largest eigenvalues) to keep

    Returns
    -------
    pc_space : ndarray
        Matrix of shape (n_cols, dimensions_we_want); column ``k`` is the
        ``k``-th eigenvector
    total_explained : ndarray
        The kept eigenvalues, each divided by the sum of all eigenvalues.
        Their total is the share of variance explained.

    Examples
    --------
    >>> rng = np.random.default_rng(0)
    >>> pc, explained = sv_decomposition(rng.normal(size=(50, 4)), 2)
    >>> pc.shape, explained.shape
    ((4, 2), (2,))
    """
    validate_matrix(data)
    n_cols = data.shape[1]
    if not 1 <= dimensions_we_want <= n_cols:
        raise ValueError(
            f"dimensions_we_want must be in [1, {n_cols}], got {dimensions_we_want}"
        )

    square = data.T @ data
    normalize_for_svd(square)
    _, all_evalues, vt = svd(square)
    eigenvectors = vt.T

    pc_space = eigenvectors[:, :dimensions_we_want].copy()
    total_explained = all_evalues[:dimensions_we_want] / np.sum(all_evalues)
    return pc_space, total_explained


def matrix_stack(
    m1: Optional[np.ndarray],
    m2: Optional[np.ndarray],
    posn: str = 't'
) -> Optional[np.ndarray]:
    """
    Put one matrix on top of, or to the left of, another.

    Parameters
    ----------
    m1 : ndarray
        The upper / left matrix
    m2 : ndarray
        The lower / right matrix
    posn : str, optional
        't' stacks ``m1`` on top of ``m2``; anything else (e.g. 'r') puts
        ``m2`` to the right of ``m1`` (default: 't')

    Returns
    -------
    ndarray or None
        New matrix with the stacked data. If one input is None, a copy of
        the other. None if the shapes do not line up.

    Examples
    --------
    >>> matrix_stack(np.ones((1, 2)), np.zeros((1, 2)))
    array([[1., 1.],
           [0., 0.]])
    >>> matrix_stack(np.ones((2, 1)), np.zeros((2, 1)), 'r')
    array([[1., 0.],
           [1., 0.]])
    """
    if m1 is None:
        return None if m2 is None else np.array(m2, dtype=float)
    if m2 is None:
        return np.array(m1, dtype=float)
    validate_matrix(m1)
    validate_matrix(m2)

    if posn == 't':
        if m1.shape[1] != m2.shape[1]:
            return stop(
                "When stacking matrices on top of each other, they have to "
                f"have the same number of columns ({m1.shape[1]} != "
                f"{m2.shape[1]}). Returning None.",
                level=0
            )
        return np.vstack([m1, m2]).astype(float)

    if m1.shape[0] != m2.shape[0]:
        return stop(
            "When stacking matrices side by side, they have to have the same "
            f"number of rows ({m1.shape[0]} != {m2.shape[0]}). Returning None.",
            level=0
        )
    return np.hstack([m1, m2]).astype(float)


def matrix_rm_columns(m: np.ndarray, use: Sequence[int]) -> np.ndarray:
    """
    Copy a matrix without some of its columns.

    Parameters
    ----------
    m : ndarray
        Matrix to subset
    use : sequence
        One flag per column; columns whose flag is zero / False are dropped

    Returns
    -------
    ndarray
        New matrix with only the kept columns

    Examples
    --------
    >>> matrix_rm_columns(np.arange(6.0).reshape(2, 3), [1, 0, 1])
    array([[0., 2.],
           [3., 5.]])
    """
    validate_matrix(m)
    use = np.asarray(use, dtype=bool)
    if use.shape != (m.shape[1],):
        raise ValueError(
            f"use has {use.size} flags, but the matrix has {m.shape[1]} columns"
        )
    return m[:, use].copy()
