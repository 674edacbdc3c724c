"""
Shared fixtures for pyapop tests.
"""

import pytest
import numpy as np

from pyapop.core import DataSet, Names
from pyapop.options import opts
from pyapop.utils import clear_harmonic_cache


@pytest.fixture(autouse=True)
def reset_options():
    """Give every test default options and an empty harmonic cache."""
    opts.reset()
    clear_harmonic_cache()
    yield
    opts.reset()


@pytest.fixture
def letters():
    """Three rows keyed 3, 1, 2 with text 'c', 'a', 'b'."""
    return DataSet(
        matrix=np.array([[3.0, 30.0], [1.0, 10.0], [2.0, 20.0]]),
        text=[['c'], ['a'], ['b']],
        names=Names(colnames=['key', 'tens'], rownames=['r_c', 'r_a', 'r_b'])
    )
