"""
Validation functions for pyapop.

This module provides functions for validating numeric input arrays and
parameters.
"""

import numpy as np


def validate_vector(
    v: np.ndarray,
    allow_nan: bool = True,
    allow_empty: bool = True
) -> None:
    """
    Validate a 1D numeric array.

    Parameters
    ----------
    v : ndarray
        Array to validate
    allow_nan : bool, optional
        Whether to allow NaN values (default: True)
    allow_empty : bool, optional
        Whether to allow zero-length input (default: True)

    Raises
    ------
    TypeError
        If v is not a numpy array
    ValueError
        If v is not 1D or contains invalid values

    Examples
    --------
    >>> validate_vector(np.array([1.0, 2.0, 3.0]))  # No error
    >>> validate_vector(np.array([[1.0, 2.0]]))  # Raises ValueError
    """
    if not isinstance(v, np.ndarray):
        raise TypeError(f"Vector must be numpy array, got {type(v)}")

    if v.ndim != 1:
        raise ValueError(f"Vector must be 1D, got {v.ndim} dimensions")

    if not allow_empty and v.size == 0:
        raise ValueError("Vector must not be empty")

    if not allow_nan and np.any(np.isnan(v)):
        raise ValueError("Vector contains NaN values")


def validate_matrix(
    m: np.ndarray,
    allow_nan: bool = True
) -> None:
    """
    Validate a 2D numeric array.

    Parameters
    ----------
    m : ndarray
        Array to validate
    allow_nan : bool, optional
        Whether to allow NaN values (default: True)

    Raises
    ------
    TypeError
        If m is not a numpy array
    ValueError
        If m is not 2D or contains invalid values
    """
    if not isinstance(m, np.ndarray):
        raise TypeError(f"Matrix must be numpy array, got {type(m)}")

    if m.ndim != 2:
        raise ValueError(f"Matrix must be 2D, got {m.ndim} dimensions")

    if not allow_nan and np.any(np.isnan(m)):
        raise ValueError("Matrix contains NaN values")


def validate_square(m: np.ndarray) -> None:
    """
    Validate that a matrix is square.

    Raises
    ------
    ValueError
        If m is not square

    Examples
    --------
    >>> validate_square(np.eye(3))  # No error
    >>> validate_square(np.ones((2, 3)))  # Raises ValueError
    """
    validate_matrix(m)
    if m.shape[0] != m.shape[1]:
        raise ValueError(f"Matrix must be square, got shape {m.shape}")


def validate_positive(
    value: float,
    param_name: str = "value"
) -> None:
    """
    Validate that a value is positive.

    Parameters
    ----------
    value : float
        Value to validate
    param_name : str, optional
        Name of parameter for error messages

    Raises
    ------
    TypeError
        If value is not a number
    ValueError
        If value is not positive

    Examples
    --------
    >>> validate_positive(1.0, "variance")  # No error
    >>> validate_positive(-1.0, "variance")  # Raises ValueError
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise TypeError(f"{param_name} must be a number, got {type(value)}")

    if value <= 0:
        raise ValueError(f"{param_name} must be positive, got {value}")
