"""
Sorting functions for pyapop.

One sorts a DataSet in place, the other returns percentiles of a vector.

Functions:
    data_sort: Sort a DataSet in place by one column
    sort_indices: Stable index sort that leaves NaNs in place
    vector_percentiles: 0th-100th percentiles of a vector
"""

from .data_sort import data_sort, sort_indices, find_min_unsorted
from .percentiles import vector_percentiles

__all__ = [
    "data_sort",
    "sort_indices",
    "find_min_unsorted",
    "vector_percentiles",
]
