"""
Linear algebra for pyapop.

Functions:
    covariance_matrix: Column covariance of a data matrix
    det_and_inv: Determinant and/or inverse via LU
    x_prime_sigma_x: The quadratic form x'Sx
    normalize_for_svd: Scale X'X by sqrt(diag) before SVD
    sv_decomposition: Principal components
    matrix_stack: Stack two matrices vertically or horizontally
    matrix_rm_columns: Drop columns from a matrix
"""

from .linear_algebra import (
    covariance_matrix,
    det_and_inv,
    x_prime_sigma_x,
    normalize_for_svd,
    sv_decomposition,
    matrix_stack,
    matrix_rm_columns,
)

__all__ = [
    "covariance_matrix",
    "det_and_inv",
    "x_prime_sigma_x",
    "normalize_for_svd",
    "sv_decomposition",
    "matrix_stack",
    "matrix_rm_columns",
]
