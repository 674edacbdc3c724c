"""
Global options for pyapop.

A single module-level ``opts`` object controls how chatty the library is
and what happens when a routine hits a bad input.

Attributes
----------
verbose : int
    0 silences diagnostics, 1 (default) emits warnings about bad input,
    2 and 3 add progressively more detail (3 echoes pasted text, etc.).
stop_on_warning : bool
    If True, routines that would normally report a problem through their
    return value raise the corresponding exception instead.
rng_seed : int
    Seed for the next spare random generator created by the library.
    Incremented every time one is created.
"""

from typing import Any


class Options:
    """Container for library-wide settings."""

    _defaults = {
        'verbose': 1,
        'stop_on_warning': False,
        'rng_seed': 479901,
    }

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Restore every option to its default value."""
        for name, value in self._defaults.items():
            setattr(self, name, value)

    def __repr__(self) -> str:
        settings = ", ".join(
            f"{name}={getattr(self, name)!r}" for name in self._defaults
        )
        return f"Options({settings})"


opts = Options()


def set_options(**kwargs: Any) -> None:
    """
    Update one or more global options.

    Parameters
    ----------
    **kwargs
        Option names and their new values

    Raises
    ------
    KeyError
        If an unknown option name is given
    TypeError
        If a value has the wrong type

    Examples
    --------
    >>> set_options(verbose=0)
    >>> opts.verbose
    0
    """
    for name, value in kwargs.items():
        if name not in Options._defaults:
            raise KeyError(f"Unknown option: {name}")
        if name in ('verbose', 'rng_seed'):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value)}")
        elif name == 'stop_on_warning':
            value = bool(value)
        setattr(opts, name, value)
