"""
Text utilities for pyapop.

Functions:
    text_paste: Join the text grid of a DataSet into one string
    regex: Regular expression search with substring extraction
"""

from .paste import text_paste
from .regex import regex

__all__ = [
    "text_paste",
    "regex",
]
