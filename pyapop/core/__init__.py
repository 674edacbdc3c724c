"""
Core data structures for pyapop.

Classes:
    DataSet: Rows of vector, matrix, text and weight data
    Names: Row, column and text names for a DataSet
"""

from .names import Names
from .data import DataSet

__all__ = [
    "Names",
    "DataSet",
]
