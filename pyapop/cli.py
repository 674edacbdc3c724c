#!/usr/bin/env python3
"""
pyapop Command Line Interface

Sort numeric tables and compute percentiles from the shell.

Usage:
    pyapop sort <file> [--column N] [--descending] [--delimiter D]
    pyapop percentiles <file> [--column N] [--rounding d|u|a]

Examples:
    # Sort a comma-separated table by its third column, largest first
    pyapop sort data.csv --column 2 --descending --delimiter ,

    # 95th percentile of the first column
    pyapop percentiles data.txt | sed -n 96p
"""

import argparse
import sys

import numpy as np

from . import __version__
from .core import DataSet
from .options import set_options
from .sorting import data_sort, vector_percentiles


def _load_table(path: str, delimiter) -> np.ndarray:
    return np.loadtxt(path, delimiter=delimiter, ndmin=2)


def cmd_sort(args: argparse.Namespace) -> int:
    """Sort a table by one column and print it."""
    data = DataSet(matrix=_load_table(args.input, args.delimiter))
    asc = 'd' if args.descending else 'a'
    if data_sort(data, args.column, asc) is None:
        print(f"Error: can't sort by column {args.column}", file=sys.stderr)
        return 1
    np.savetxt(sys.stdout, data.matrix, delimiter=args.delimiter or "\t", fmt="%g")
    return 0


def cmd_percentiles(args: argparse.Namespace) -> int:
    """Print the 0th-100th percentiles of one column, one per line."""
    table = _load_table(args.input, args.delimiter)
    if not 0 <= args.column < table.shape[1]:
        print(f"Error: column {args.column} out of range", file=sys.stderr)
        return 1
    pctiles = vector_percentiles(table[:, args.column], args.rounding)
    if pctiles is None:
        print("Error: no data", file=sys.stderr)
        return 1
    for value in pctiles:
        print(f"{value:g}")
    return 0


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="pyapop",
        description="Statistics utilities: sorting and percentiles of numeric tables."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        type=int,
        default=1,
        help="Diagnostic level, 0 for silence (default: 1)"
    )
    subparsers = parser.add_subparsers(dest="command")

    sort_parser = subparsers.add_parser("sort", help="Sort a table by one column")
    sort_parser.add_argument("input", help="Input text file, one row per line")
    sort_parser.add_argument(
        "-c", "--column",
        type=int,
        default=0,
        help="Column to sort by (default: 0)"
    )
    sort_parser.add_argument(
        "-d", "--descending",
        action="store_true",
        help="Sort largest first"
    )
    sort_parser.add_argument(
        "--delimiter",
        default=None,
        help="Column delimiter (default: whitespace)"
    )
    sort_parser.set_defaults(func=cmd_sort)

    pct_parser = subparsers.add_parser("percentiles", help="Percentiles of one column")
    pct_parser.add_argument("input", help="Input text file, one row per line")
    pct_parser.add_argument(
        "-c", "--column",
        type=int,
        default=0,
        help="Column to use (default: 0)"
    )
    pct_parser.add_argument(
        "-r", "--rounding",
        default="d",
        choices=["d", "u", "a"],
        help="Round down, up, or average between points (default: d)"
    )
    pct_parser.add_argument(
        "--delimiter",
        default=None,
        help="Column delimiter (default: whitespace)"
    )
    pct_parser.set_defaults(func=cmd_percentiles)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    set_options(verbose=args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
