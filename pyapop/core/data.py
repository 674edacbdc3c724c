"""
DataSet class for pyapop.

A DataSet bundles the pieces of a statistical table that share a row index:
a free-standing numeric vector, a numeric matrix, a grid of text and a
vector of weights. Any of them may be absent. Row ``i`` of the set is
the ``i``-th element of the vector, the ``i``-th matrix row, the ``i``-th
text row and the ``i``-th weight, taken together.
"""

import numpy as np
from typing import Optional, Sequence, Tuple, Union
from pathlib import Path

from .names import Names


def _as_text_grid(text) -> Optional[np.ndarray]:
    if text is None:
        return None
    grid = np.array(text, dtype=object)
    if grid.size == 0:
        return None
    if grid.ndim == 1:
        grid = grid.reshape(-1, 1)
    if grid.ndim != 2:
        raise ValueError(f"text must be 2D, got {grid.ndim} dimensions")
    return grid


class DataSet:
    """
    Table of rows with optional vector, matrix, text and weight parts.

    Parameters
    ----------
    vector : array_like, optional
        1D numeric data
    matrix : array_like, optional
        2D numeric data, one observation per row
    text : array_like of str, optional
        2D grid of strings, one row per observation
    weights : array_like, optional
        1D observation weights
    names : Names, optional
        Row, column and text names

    Attributes
    ----------
    vector : ndarray or None
    matrix : ndarray or None
    text : ndarray of object or None
    weights : ndarray or None
    names : Names
    error : str or None
        One-character code set by routines that report failure through the
        returned data set (e.g. 'n' for a missing model)

    Examples
    --------
    >>> d = DataSet(matrix=[[3.0], [1.0], [2.0]], text=[['c'], ['a'], ['b']])
    >>> d.n_rows
    3
    >>> d.get_row(1).text
    array([['a']], dtype=object)

    Notes
    -----
    Every component that is present must have the same number of rows.
    Row names may be shorter than the table.
    """

    def __init__(
        self,
        vector: Optional[Sequence[float]] = None,
        matrix: Optional[Sequence[Sequence[float]]] = None,
        text: Optional[Sequence[Sequence[str]]] = None,
        weights: Optional[Sequence[float]] = None,
        names: Optional[Names] = None
    ):
        self.vector = None if vector is None else np.array(vector, dtype=float).ravel()
        if matrix is None:
            self.matrix = None
        else:
            self.matrix = np.array(matrix, dtype=float)
            if self.matrix.ndim == 1:
                self.matrix = self.matrix.reshape(-1, 1)
            if self.matrix.ndim != 2:
                raise ValueError(
                    f"matrix must be 2D, got {self.matrix.ndim} dimensions"
                )
        self.text = _as_text_grid(text)
        self.weights = None if weights is None else np.array(weights, dtype=float).ravel()
        self.names = names.copy() if names is not None else Names()
        self.error = None

        self._check_heights()

    def _check_heights(self) -> None:
        heights = {
            part: len(getattr(self, part))
            for part in ('vector', 'matrix', 'text', 'weights')
            if getattr(self, part) is not None
        }
        if len(set(heights.values())) > 1:
            raise ValueError(f"Components have different row counts: {heights}")

    @property
    def n_rows(self) -> int:
        """Number of rows (0 for an empty set)."""
        for part in (self.vector, self.matrix, self.text, self.weights):
            if part is not None:
                return len(part)
        return 0

    @property
    def n_cols(self) -> int:
        """Number of matrix columns (0 without a matrix)."""
        return 0 if self.matrix is None else self.matrix.shape[1]

    @property
    def text_shape(self) -> Tuple[int, int]:
        """Shape of the text grid, (0, 0) if there is no text."""
        return (0, 0) if self.text is None else self.text.shape

    def __len__(self) -> int:
        return self.n_rows

    def __repr__(self) -> str:
        parts = []
        if self.vector is not None:
            parts.append("vector")
        if self.matrix is not None:
            parts.append(f"matrix {self.matrix.shape[0]}x{self.matrix.shape[1]}")
        if self.text is not None:
            parts.append(f"text {self.text.shape[0]}x{self.text.shape[1]}")
        if self.weights is not None:
            parts.append("weights")
        return f"DataSet({self.n_rows} rows: {', '.join(parts) or 'empty'})"

    def __eq__(self, other: 'DataSet') -> bool:
        """Full content comparison; NaNs in the same place compare equal."""
        if not isinstance(other, DataSet):
            return False
        for part in ('vector', 'matrix', 'weights'):
            mine, theirs = getattr(self, part), getattr(other, part)
            if (mine is None) != (theirs is None):
                return False
            if mine is not None and not np.array_equal(mine, theirs, equal_nan=True):
                return False
        if (self.text is None) != (other.text is None):
            return False
        if self.text is not None and not np.array_equal(self.text, other.text):
            return False
        return self.names == other.names

    def column(self, j: int) -> np.ndarray:
        """
        Return a view of one column.

        Parameters
        ----------
        j : int
            Matrix column index, or -1 for the vector

        Returns
        -------
        ndarray
            1D view into the data (writes go through to the set)
        """
        if j == -1:
            if self.vector is None:
                raise IndexError("Column -1 requested, but there is no vector")
            return self.vector
        if self.matrix is None:
            raise IndexError(f"Column {j} requested, but there is no matrix")
        if not 0 <= j < self.matrix.shape[1]:
            raise IndexError(
                f"Column {j} out of range for matrix with "
                f"{self.matrix.shape[1]} columns"
            )
        return self.matrix[:, j]

    def get_row(self, i: int) -> 'DataSet':
        """
        Get a self-contained copy of row ``i``.

        The returned one-row DataSet shares no memory with this one, so it
        stays valid while row ``i`` is overwritten.

        Parameters
        ----------
        i : int
            Row index

        Returns
        -------
        DataSet
            One-row snapshot of every component
        """
        if not 0 <= i < self.n_rows:
            raise IndexError(f"Row {i} out of range for {self.n_rows} rows")
        row = DataSet()
        if self.vector is not None:
            row.vector = self.vector[i:i + 1].copy()
        if self.matrix is not None:
            row.matrix = self.matrix[i:i + 1].copy()
        if self.text is not None:
            row.text = self.text[i:i + 1].copy()
        if self.weights is not None:
            row.weights = self.weights[i:i + 1].copy()
        row.names = Names(self.names.colnames, textnames=self.names.textnames,
                          vector=self.names.vector)
        if i < len(self.names.rownames):
            row.names.rownames = [self.names.rownames[i]]
        return row

    def set_row(self, i: int, row: 'DataSet') -> None:
        """
        Overwrite row ``i`` with the contents of a one-row DataSet.

        Parameters
        ----------
        i : int
            Row index
        row : DataSet
            One-row set with the same components as this one

        Notes
        -----
        If this set has a name for row ``i``, it is replaced by the name of
        ``row``, or by an empty string when ``row`` has none.

        Raises
        ------
        ValueError
            If ``row`` is missing a component this set has
        """
        if not 0 <= i < self.n_rows:
            raise IndexError(f"Row {i} out of range for {self.n_rows} rows")
        for part in ('vector', 'matrix', 'text', 'weights'):
            mine = getattr(self, part)
            if mine is None:
                continue
            source = getattr(row, part)
            if source is None:
                raise ValueError(f"Row has no {part}, but the data set does")
            mine[i] = source[0]
        if i < len(self.names.rownames):
            self.names.rownames[i] = row.names.rownames[0] if row.names.rownames else ""

    def text_alloc(self, rows: int, cols: int) -> 'DataSet':
        """
        Resize the text grid, keeping existing cells.

        New cells are empty strings. Returns self.
        """
        grid = np.full((rows, cols), "", dtype=object)
        if self.text is not None:
            keep_r = min(rows, self.text.shape[0])
            keep_c = min(cols, self.text.shape[1])
            grid[:keep_r, :keep_c] = self.text[:keep_r, :keep_c]
        self.text = grid
        return self

    def copy(self) -> 'DataSet':
        """
        Create a deep copy of the DataSet.

        Returns
        -------
        DataSet
            Copy of this DataSet
        """
        out = DataSet(
            None if self.vector is None else self.vector.copy(),
            None if self.matrix is None else self.matrix.copy(),
            None,
            None if self.weights is None else self.weights.copy(),
            self.names
        )
        out.text = None if self.text is None else self.text.copy()
        out.error = self.error
        return out

    def to_dict(self) -> dict:
        """
        Convert DataSet to dictionary for serialization.

        Returns
        -------
        dict
            Dictionary representation
        """
        return {
            'vector': self.vector,
            'matrix': self.matrix,
            'text': None if self.text is None else self.text.tolist(),
            'weights': self.weights,
            'colnames': self.names.colnames,
            'rownames': self.names.rownames,
            'textnames': self.names.textnames,
            'vector_name': self.names.vector,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'DataSet':
        """
        Create DataSet from dictionary.

        Parameters
        ----------
        data : dict
            Dictionary as produced by ``to_dict``

        Returns
        -------
        DataSet
        """
        names = Names(
            data.get('colnames'),
            data.get('rownames'),
            data.get('textnames'),
            data.get('vector_name')
        )
        return cls(
            vector=data.get('vector'),
            matrix=data.get('matrix'),
            text=data.get('text'),
            weights=data.get('weights'),
            names=names
        )

    # I/O methods
    def save(self, filename: Union[str, Path], compression: Optional[str] = 'gzip') -> None:
        """
        Save DataSet to HDF5 file.

        Notes
        -----
        Requires h5py package. Install with: pip install h5py
        """
        from ..io import save_data_hdf5
        save_data_hdf5(self, str(filename), compression=compression)

    @classmethod
    def load(cls, filename: Union[str, Path]) -> 'DataSet':
        """
        Load DataSet from HDF5 file.

        Notes
        -----
        Requires h5py package. Install with: pip install h5py
        """
        from ..io import load_data_hdf5
        return load_data_hdf5(str(filename))
