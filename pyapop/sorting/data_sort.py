"""
In-place sorting of a DataSet by one column.

The rows of the set are reordered using a permutation computed from the
sort column. The permutation is applied by following its cycles, so only
one row at a time is held outside the table.
"""

import numpy as np
from typing import Optional, Sequence

from ..core import DataSet
from ..errors import stop


def sort_indices(values: Sequence[float]) -> np.ndarray:
    """
    Stable index sort that leaves NaNs where they are.

    Parameters
    ----------
    values : array_like
        1D numeric data

    Returns
    -------
    ndarray of int
        Permutation ``perm`` such that ``values[perm]`` is ascending over the
        non-NaN entries. A NaN at position ``k`` gives ``perm[k] == k``.

    Examples
    --------
    >>> sort_indices([3.0, 1.0, 2.0])
    array([1, 2, 0])
    >>> sort_indices([np.nan, 1.0, 0.0, np.nan])
    array([0, 2, 1, 3])

    Notes
    -----
    NaN is not ordered against anything, so NaN rows stay put and the
    comparable values are sorted around them. Whether the result is a total
    order over NaN-containing data depends on where the NaNs were.
    """
    values = np.asarray(values, dtype=float).ravel()
    perm = np.arange(len(values))
    slots = np.flatnonzero(~np.isnan(values))
    order = np.argsort(values[slots], kind='stable')
    perm[slots] = slots[order]
    return perm


def find_min_unsorted(marks: np.ndarray, height: int, start: int) -> int:
    """
    Find the first unmarked row at or after ``start``.

    Rows before ``start`` must already be marked.

    Returns
    -------
    int
        Index of the row, or -1 if every row from ``start`` on is marked
    """
    while start < height:
        if not marks[start]:
            return start
        start += 1
    return -1


def _resolve_sort_by(data: DataSet, sort_by: int) -> Optional[int]:
    if sort_by == 0 and data.matrix is None and data.vector is not None:
        return -1
    if sort_by == -1:
        return -1 if data.vector is not None else None
    if data.matrix is None or not 0 <= sort_by < data.n_cols:
        return None
    return sort_by


def data_sort(
    data: Optional[DataSet],
    sort_by: int = 0,
    asc: str = 'a'
) -> Optional[DataSet]:
    """
    Sort a DataSet in place by one column.

    Parameters
    ----------
    data : DataSet
        The set to reorder. Every component (vector, matrix, text,
        weights, row names) moves with its row.
    sort_by : int, optional
        Matrix column to sort by; -1 means the vector. The default, 0, means
        matrix column zero, or the vector if there is no matrix.
    asc : str, optional
        'd' or 'D' (or any string starting with them) sorts in descending
        order; anything else sorts ascending (default: 'a')

    Returns
    -------
    DataSet or None
        The same object, so calls can be chained. None if ``data`` is None
        or ``sort_by`` names a column that does not exist; in that case
        nothing is modified.

    Examples
    --------
    >>> d = DataSet(matrix=[[3.0], [1.0], [2.0]], text=[['c'], ['a'], ['b']])
    >>> data_sort(d).text.ravel().tolist()
    ['a', 'b', 'c']
    >>> data_sort(d, asc='d').text.ravel().tolist()
    ['c', 'b', 'a']

    Notes
    -----
    - NaNs in the sort column stay in their rows' original positions; see
      ``sort_indices``.
    - The sort is stable in both directions: rows with equal keys keep
      their original order, so re-sorting a sorted set changes nothing.
    - Row names shorter than the table are padded with empty strings
      first, so every name travels with its row.
    """
    if data is None:
        return stop("You gave me None data to sort. Returning None.", level=1)
    column = _resolve_sort_by(data, sort_by)
    if column is None:
        return stop(
            f"Can't sort by column {sort_by}: the data set has "
            f"{data.n_cols} matrix columns and "
            f"{'a' if data.vector is not None else 'no'} vector. Returning None.",
            level=1
        )

    keys = data.column(column)
    height = len(keys)
    if asc and asc[0] in 'dD':
        # Index-sort the reversed column, then reverse: ties and NaNs keep
        # their original order.
        perm = (height - 1) - sort_indices(keys[::-1])
        for j in range(height // 2):
            perm[j], perm[height - 1 - j] = perm[height - 1 - j], perm[j]
    else:
        perm = sort_indices(keys)

    rownames = data.names.rownames
    if rownames and len(rownames) < height:
        # Every row needs a slot so names move with their rows.
        rownames.extend([""] * (height - len(rownames)))

    marks = np.zeros(height, dtype=bool)
    start = 0
    while True:
        start = find_min_unsorted(marks, height, start)
        if start == -1:
            break
        i = start
        first_row = data.get_row(start)
        marks[start] = True
        while perm[i] != start:
            data.set_row(i, data.get_row(perm[i]))
            marks[perm[i]] = True
            i = perm[i]
        data.set_row(i, first_row)
    return data
