"""
Shell command helper.
"""

import subprocess


def system(fmt: str, *args) -> int:
    """
    Run a shell command built with printf-style formatting.

    Parameters
    ----------
    fmt : str
        Command template, e.g. ``"ls -l %s"``
    *args
        Values substituted into ``fmt`` with the ``%`` operator

    Returns
    -------
    int
        Exit status of the command

    Examples
    --------
    >>> system("test -d %s", "/tmp")
    0
    """
    command = fmt % args if args else fmt
    return subprocess.call(command, shell=True)
