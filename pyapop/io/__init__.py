"""
Input/Output functions for pyapop.

Formats Supported:
    HDF5: Efficient binary format - requires h5py

Functions:
    HDF5 I/O (requires h5py):
        save_data_hdf5: Save DataSet to HDF5
        load_data_hdf5: Load DataSet from HDF5
"""

from .hdf5_io import (
    save_data_hdf5,
    load_data_hdf5,
    HAS_H5PY
)

__all__ = [
    "save_data_hdf5",
    "load_data_hdf5",
    "HAS_H5PY",
]
