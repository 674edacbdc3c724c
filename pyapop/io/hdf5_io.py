"""
HDF5 I/O functions for pyapop.

This module provides functions to save and load DataSet objects to/from
HDF5 format.

Note: Requires h5py package. Install with: pip install h5py
"""

import numpy as np
from typing import Optional
import warnings

# Try to import h5py, but make it optional
try:
    import h5py
    HAS_H5PY = True
except ImportError:
    HAS_H5PY = False
    h5py = None


def _check_h5py():
    """Check if h5py is available and raise helpful error if not."""
    if not HAS_H5PY:
        raise ImportError(
            "h5py is required for HDF5 I/O operations. "
            "Install it with: pip install h5py"
        )


def _encode(strings) -> np.ndarray:
    """UTF-8 encode a (possibly 2D) collection of strings to a bytes array."""
    grid = np.array(strings, dtype=object)
    return np.array(
        [str(s).encode('utf-8') for s in grid.ravel()], dtype='S'
    ).reshape(grid.shape)


def _decode(raw: np.ndarray) -> np.ndarray:
    return np.array(
        [b.decode('utf-8') for b in raw.ravel()], dtype=object
    ).reshape(raw.shape)


def save_data_hdf5(data, filename: str, compression: Optional[str] = 'gzip'):
    """
    Save DataSet object to HDF5 file.

    Parameters
    ----------
    data : DataSet
        DataSet object to save
    filename : str
        Path to output HDF5 file
    compression : str, optional
        Compression algorithm ('gzip', 'lzf', or None)
        Default: 'gzip'

    Examples
    --------
    >>> from pyapop.core import DataSet
    >>> data = DataSet(matrix=np.array([[1.0, 2.0], [3.0, 4.0]]),
    ...                text=[['a'], ['b']])
    >>> save_data_hdf5(data, 'data.h5')

    Notes
    -----
    Only the components that are present (and name lists that are not
    empty) are written.
    """
    _check_h5py()

    from ..core import DataSet
    if not isinstance(data, DataSet):
        raise TypeError(f"Expected DataSet object, got {type(data)}")

    with h5py.File(filename, 'w') as f:
        # Save numeric components
        for part in ('vector', 'matrix', 'weights'):
            values = getattr(data, part)
            if values is not None and values.size:
                f.create_dataset(part, data=values, compression=compression)

        # Save text grid
        if data.text is not None and data.text.size:
            f.create_dataset('text', data=_encode(data.text), compression=compression)

        # Save names
        for part in ('colnames', 'rownames', 'textnames'):
            names = getattr(data.names, part)
            if names:
                f.create_dataset(part, data=_encode(names), compression=compression)
        if data.names.vector is not None:
            f.attrs['vector_name'] = data.names.vector

        # Save metadata
        f.attrs['type'] = 'DataSet'
        f.attrs['version'] = '1.0'


def load_data_hdf5(filename: str):
    """
    Load DataSet object from HDF5 file.

    Parameters
    ----------
    filename : str
        Path to HDF5 file

    Returns
    -------
    DataSet
        Loaded DataSet object

    Examples
    --------
    >>> data = load_data_hdf5('data.h5')
    >>> print(data.n_rows)
    """
    _check_h5py()

    from ..core import DataSet, Names

    with h5py.File(filename, 'r') as f:
        # Verify file type
        if f.attrs.get('type') != 'DataSet':
            warnings.warn(
                f"File does not have 'DataSet' type marker. "
                f"Found: {f.attrs.get('type')}"
            )

        # Load data
        parts = {
            part: f[part][:] if part in f else None
            for part in ('vector', 'matrix', 'weights')
        }
        text = _decode(f['text'][:]) if 'text' in f else None
        names = Names(
            *[
                list(_decode(f[part][:])) if part in f else None
                for part in ('colnames', 'rownames', 'textnames')
            ],
            vector=f.attrs.get('vector_name')
        )

    return DataSet(
        vector=parts['vector'],
        matrix=parts['matrix'],
        text=text,
        weights=parts['weights'],
        names=names
    )
