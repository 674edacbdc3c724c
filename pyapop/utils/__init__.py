"""
Utility functions for pyapop.

Categories:
    Mathematical utilities (generalized harmonic numbers, smoothing)
    Map/apply helpers for vectors and matrices
    Shell commands
    Validation functions

Functions:
    generalized_harmonic: Memoized sum of 1/n^s
    vector_moving_average: Centred moving average
    matrix_map, vector_map, matrix_apply, vector_apply: Element/row mapping
    system: Run a formatted shell command
"""

from .math_utils import (
    generalized_harmonic,
    clear_harmonic_cache,
    vector_moving_average,
)
from .mapply import (
    matrix_map,
    vector_map,
    matrix_apply,
    vector_apply,
)
from .system import system
from .validation import (
    validate_vector,
    validate_matrix,
    validate_square,
    validate_positive,
)

__all__ = [
    # Math utilities
    "generalized_harmonic",
    "clear_harmonic_cache",
    "vector_moving_average",
    # Map/apply
    "matrix_map",
    "vector_map",
    "matrix_apply",
    "vector_apply",
    # Shell
    "system",
    # Validation functions
    "validate_vector",
    "validate_matrix",
    "validate_square",
    "validate_positive",
]
