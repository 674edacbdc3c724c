"""
Exceptions, warnings and diagnostic helpers for pyapop.

Most routines in the library report bad input softly: they emit a
diagnostic (a ``PyapopWarning``) and hand back a sentinel such as None,
NaN or -1. Setting ``opts.stop_on_warning`` turns those
soft failures into exceptions.
"""

import warnings
from typing import Any, Type

from .options import opts


class PyapopError(Exception):
    """Base class for pyapop errors."""


class InvalidArgumentError(PyapopError, ValueError):
    """An argument is missing, out of range or otherwise unusable."""


class PyapopWarning(UserWarning):
    """Diagnostic emitted by pyapop routines."""


def notify(level: int, message: str) -> None:
    """
    Emit a diagnostic if the verbosity is at least ``level``.

    Parameters
    ----------
    level : int
        Minimum ``opts.verbose`` at which the message is shown
    message : str
        Diagnostic text
    """
    if opts.verbose >= level:
        warnings.warn(message, PyapopWarning, stacklevel=3)


def stop(
    message: str,
    retval: Any = None,
    level: int = 0,
    error: Type[Exception] = InvalidArgumentError
) -> Any:
    """
    Report a failed precondition.

    Notifies at ``level``; raises ``error`` if ``opts.stop_on_warning`` is
    set, otherwise returns ``retval`` so the caller can write
    ``return stop(...)``.

    Examples
    --------
    >>> def f(x):
    ...     if x is None:
    ...         return stop("You gave me None.", retval=-1)
    ...     return x
    """
    if opts.verbose >= level:
        warnings.warn(message, PyapopWarning, stacklevel=3)
    if opts.stop_on_warning:
        raise error(message)
    return retval
