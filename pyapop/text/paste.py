"""
Joining the text grid of a DataSet into a single string.
"""

from typing import Any, Callable, Optional

from ..core import DataSet
from ..errors import notify

PruneFunction = Callable[[DataSet, int, int, Any], bool]


def text_paste(
    strings: Optional[DataSet],
    between: str = " ",
    before: Optional[str] = None,
    after: Optional[str] = None,
    between_cols: Optional[str] = None,
    prune: Optional[PruneFunction] = None,
    prune_parameter: Any = None
) -> str:
    """
    Join the text of a DataSet into one string.

    Parameters
    ----------
    strings : DataSet
        Set whose text grid is to be joined
    between : str, optional
        Text between rows (default: a single space)
    before : str, optional
        Text at the head of the result
    after : str, optional
        Text at the tail of the result
    between_cols : str, optional
        Text between the cells of a row (default: same as ``between``)
    prune : callable, optional
        ``prune(strings, row, col, prune_parameter)`` returns True to keep
        the cell and False to drop it. Rows with every cell dropped are
        skipped entirely.
    prune_parameter : any, optional
        Passed through to ``prune``

    Returns
    -------
    str
        ``before``, the joined text, then ``after``. With no data or no
        text only ``before`` and ``after`` are returned.

    Examples
    --------
    >>> cols = DataSet(text=[['age'], ['height'], ['weight']])
    >>> text_paste(cols, between=", ", before="select ", after=" from t")
    'select age, height, weight from t'

    >>> grid = DataSet(text=[['a', 'b'], ['c', 'd']])
    >>> text_paste(grid, between="</tr><tr>", between_cols="</td><td>")
    'a</td><td>b</tr><tr>c</td><td>d'

    Notes
    -----
    With ``opts.verbose >= 3`` the result is also emitted as a diagnostic.
    """
    if between_cols is None:
        between_cols = between

    lines = []
    if strings is not None and strings.text is not None:
        n_rows, n_cols = strings.text.shape
        for i in range(n_rows):
            cells = [
                str(strings.text[i, j]) for j in range(n_cols)
                if prune is None or prune(strings, i, j, prune_parameter)
            ]
            if cells:
                lines.append(between_cols.join(cells))

    out = (before or "") + between.join(lines) + (after or "")
    notify(3, out)
    return out
