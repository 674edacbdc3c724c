"""
Names class for pyapop.

A Names object stores the labels attached to a DataSet: one list each for
row names, matrix column names and text column names, plus an optional
title for the vector.
"""

from typing import List, Optional


class Names:
    """
    Labels for the parts of a DataSet.

    Parameters
    ----------
    colnames : list of str, optional
        Matrix column names
    rownames : list of str, optional
        Row names
    textnames : list of str, optional
        Text column names
    vector : str, optional
        Name of the vector component

    Examples
    --------
    >>> names = Names(colnames=['age', 'weight'])
    >>> names.add('height', 'c')
    3
    >>> names.colnames
    ['age', 'weight', 'height']
    """

    _kinds = {'c': 'colnames', 'r': 'rownames', 't': 'textnames'}

    def __init__(
        self,
        colnames: Optional[List[str]] = None,
        rownames: Optional[List[str]] = None,
        textnames: Optional[List[str]] = None,
        vector: Optional[str] = None
    ):
        self.colnames = list(colnames) if colnames is not None else []
        self.rownames = list(rownames) if rownames is not None else []
        self.textnames = list(textnames) if textnames is not None else []
        self.vector = vector

    def add(self, name: str, kind: str = 'c') -> int:
        """
        Add a name.

        Parameters
        ----------
        name : str
            The name to add
        kind : str, optional
            'c' for a matrix column, 'r' for a row, 't' for a text column,
            'v' to set the vector name (default: 'c')

        Returns
        -------
        int
            Number of names of that kind after adding. Always 1 for 'v'.
        """
        if not isinstance(name, str):
            raise TypeError(f"name must be str, got {type(name)}")
        if kind == 'v':
            self.vector = name
            return 1
        if kind not in self._kinds:
            raise ValueError(f"kind must be one of 'c', 'r', 't', 'v', got {kind!r}")
        target = getattr(self, self._kinds[kind])
        target.append(name)
        return len(target)

    def copy(self) -> 'Names':
        return Names(
            self.colnames.copy(),
            self.rownames.copy(),
            self.textnames.copy(),
            self.vector
        )

    def __eq__(self, other: 'Names') -> bool:
        if not isinstance(other, Names):
            return False
        return (
            self.colnames == other.colnames
            and self.rownames == other.rownames
            and self.textnames == other.textnames
            and self.vector == other.vector
        )

    def __repr__(self) -> str:
        return (
            f"Names({len(self.rownames)} rows, {len(self.colnames)} cols, "
            f"{len(self.textnames)} text cols)"
        )

    def show(self) -> str:
        """Return a printable summary of every name list."""
        lines = []
        if self.vector is not None:
            lines.append(f"Vector: {self.vector}")
        if self.colnames:
            lines.append("Column names: " + "\t".join(self.colnames))
        if self.textnames:
            lines.append("Text names: " + "\t".join(self.textnames))
        if self.rownames:
            lines.append("Row names: " + "\t".join(self.rownames))
        return "\n".join(lines)
