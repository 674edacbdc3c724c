"""
Regular expression search with substring extraction.
"""

import re
from typing import Optional, Tuple, Union

from ..core import DataSet
from ..errors import stop


def regex(
    string: Optional[str],
    pattern: Optional[str],
    substrings: bool = False,
    use_case: str = 'n'
) -> Union[int, Tuple[int, Optional[DataSet]]]:
    """
    Search a string with a regular expression.

    Parameters
    ----------
    string : str
        The string to search
    pattern : str
        The regular expression. Parenthesized groups mark the substrings
        to return.
    substrings : bool, optional
        If True, collect the groups of every successive match into the text
        grid of a DataSet: the groups of the first match fill row 0, the
        next match (starting where the first one ended) fills row 1, and so
        on to the end of the string (default: False)
    use_case : str, optional
        'y' for a case-sensitive search, anything else for case-insensitive
        (default: 'n')

    Returns
    -------
    int or (int, DataSet)
        Without ``substrings``: 1 if the pattern matches, 0 if not, -1 if
        the pattern is None or does not compile.
        With ``substrings``: the number of matches and the DataSet of
        groups (an empty DataSet if nothing matched). A group that took no
        part in a match is an empty string.

    Examples
    --------
    >>> regex("p values", "p.val")
    1
    >>> count, subs = regex("a1 b2 c3", "([a-z])([0-9])", substrings=True)
    >>> count
    3
    >>> subs.text.tolist()
    [['a', '1'], ['b', '2'], ['c', '3']]

    Notes
    -----
    - A None ``string`` is not an error: the result is 0, or (0, None).
    - Anchors such as ``^`` only match at the real start of the string,
      not at the start of later searches.
    """
    if string is None:
        return (0, None) if substrings else 0
    failed = (-1, None) if substrings else -1
    if pattern is None:
        return stop("You gave me a None regex.", retval=failed, level=0)

    flags = 0 if use_case == 'y' else re.IGNORECASE
    try:
        compiled = re.compile(pattern, flags)
    except re.error as exc:
        return stop(
            f"This regular expression didn't compile: \"{pattern}\" ({exc})",
            retval=failed, level=0
        )

    if not substrings:
        return 1 if compiled.search(string) else 0

    out = DataSet()
    found_ct = 0
    pos = 0
    while True:
        match = compiled.search(string, pos)
        if match is None:
            break
        found_ct += 1
        out.text_alloc(found_ct, compiled.groups)
        for i in range(compiled.groups):
            group = match.group(i + 1)
            if group:
                out.text[found_ct - 1, i] = group
        # An empty match would be found again at the same place.
        if match.end() == match.start() or match.end() >= len(string):
            break
        pos = match.end()
    return found_ct, out
