"""
Unit tests for text pasting and regex extraction.
"""

import pytest
import numpy as np
from pyapop.core import DataSet
from pyapop.errors import PyapopWarning
from pyapop.options import opts
from pyapop.text import text_paste, regex


class TestTextPaste:
    """Tests for text_paste function."""

    def test_sql_query(self):
        """Test building a query from a column of names."""
        cols = DataSet(text=[['age'], ['height'], ['weight']])
        out = text_paste(cols, between=", ", before="select ", after=" from t")
        assert out == "select age, height, weight from t"

    def test_default_separator(self):
        """Test default single-space separator."""
        assert text_paste(DataSet(text=[['a'], ['b']])) == "a b"

    def test_between_cols_defaults_to_between(self):
        """Test that cells and rows share a separator by default."""
        grid = DataSet(text=[['a', 'b'], ['c', 'd']])
        assert text_paste(grid, between="|") == "a|b|c|d"

    def test_html_table(self):
        """Test separate row and column separators."""
        grid = DataSet(text=[['a', 'b'], ['c', 'd']])
        out = text_paste(
            grid, before="<tr><td>", after="</td></tr>",
            between="</td></tr>\n<tr><td>", between_cols="</td><td>"
        )
        assert out == "<tr><td>a</td><td>b</td></tr>\n<tr><td>c</td><td>d</td></tr>"

    def test_none_data(self):
        """Test that None data gives only before and after."""
        assert text_paste(None, before="[", after="]") == "[]"
        assert text_paste(None) == ""

    def test_no_text(self):
        assert text_paste(DataSet(vector=[1.0]), before="x") == "x"

    def test_prune_column(self):
        """Test pruning all but one column."""
        grid = DataSet(text=[['a', 'b', 'c'], ['d', 'e', 'f']])

        def only_col(data, row, col, wanted):
            return col == wanted

        assert text_paste(grid, between=",", prune=only_col, prune_parameter=1) == "b,e"

    def test_prune_blank_cells(self):
        """Test that pruned cells leave no stray separators."""
        grid = DataSet(text=[['a', ''], ['', ''], ['b', 'c']])

        def not_blank(data, row, col, _):
            return data.text[row, col] != ''

        out = text_paste(grid, between="; ", between_cols="-", prune=not_blank)
        assert out == "a; b-c"

    def test_verbose_echo(self):
        """Test that verbose >= 3 echoes the result."""
        opts.verbose = 3
        with pytest.warns(PyapopWarning, match="a b"):
            text_paste(DataSet(text=[['a'], ['b']]))


class TestRegex:
    """Tests for regex function."""

    def test_simple_match(self):
        """Test match / no match."""
        assert regex("p values", "p.val") == 1
        assert regex("P value", "p.val") == 1
        assert regex("tempeval", "p.val") == 1
        assert regex("nothing here", "p.val") == 0

    def test_case_sensitive(self):
        """Test use_case='y'."""
        assert regex("P value", "p.val", use_case='y') == 0
        assert regex("p value", "p.val", use_case='y') == 1

    def test_substrings(self):
        """Test extracting groups from every match."""
        count, subs = regex("a1 b2 c3", "([a-z])([0-9])", substrings=True)
        assert count == 3
        assert subs.text.tolist() == [['a', '1'], ['b', '2'], ['c', '3']]

    def test_unmatched_group_is_blank(self):
        """Test that an optional group that did not match is empty."""
        count, subs = regex("key=", "([a-z]+)=([0-9]*)", substrings=True)
        assert count == 1
        assert subs.text.tolist() == [['key', '']]

    def test_no_match_substrings(self):
        """Test that no match gives an empty DataSet."""
        count, subs = regex("abc", "([0-9])", substrings=True)
        assert count == 0
        assert subs.text is None

    def test_anchor_only_at_start(self):
        """Test that ^ does not match at the start of later searches."""
        count, subs = regex("ab ab", "^(ab)", substrings=True)
        assert count == 1

    def test_empty_match_terminates(self):
        """Test that a pattern matching the empty string stops."""
        count, _ = regex("abc", "(x*)", substrings=True)
        assert count == 1

    def test_empty_match_later_counted_once(self):
        """Test that an empty match past the start is recorded once."""
        count, subs = regex("abc", "(x?)(?=c)", substrings=True)
        assert count == 1
        assert subs.text.tolist() == [['']]

    def test_none_string(self):
        """Test that a None string is not an error."""
        assert regex(None, "a") == 0
        assert regex(None, "a", substrings=True) == (0, None)

    def test_none_pattern(self):
        with pytest.warns(PyapopWarning):
            assert regex("abc", None) == -1

    def test_bad_pattern(self):
        """Test that a pattern that does not compile returns -1."""
        with pytest.warns(PyapopWarning, match="didn't compile"):
            assert regex("abc", "(unclosed") == -1
        with pytest.warns(PyapopWarning):
            assert regex("abc", "(unclosed", substrings=True) == (-1, None)
