#!/usr/bin/env python3
# boxtable/table/parsing.py
from __future__ import annotations

"""
Delimited content helpers.

Bulk content is a single string: rows separated by '\\n', cells by '\\t'.
There is no escaping; a literal tab or newline inside a value is a delimiter.
"""

from typing import List, Sequence

from .errors import MalformedInput

ROW_SEPARATOR = "\n"
CELL_SEPARATOR = "\t"


def split_rows(text: str) -> List[str]:
    """Split text into rows, dropping the empty rows left by trailing newlines."""
    rows = text.split(ROW_SEPARATOR)
    while rows and rows[-1] == "":
        rows.pop()
    return rows


def parse_content(text: str) -> List[List[str]]:
    """Parse delimited text into a row-major grid of cells."""
    return [row.split(CELL_SEPARATOR) for row in split_rows(text)]


def check_rectangular(rows: Sequence[Sequence[str]], *, what: str = "row") -> int:
    """
    Ensure every row has the same cell count as the first one.

    Returns the column count (0 for an empty grid).
    """
    if not rows:
        return 0
    expected = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != expected:
            raise MalformedInput(
                f"{what} {index + 1} has {len(row)} cells, expected {expected}")
    return expected


def transpose(rows: Sequence[Sequence[str]]) -> List[List[str]]:
    """Turn a rectangular row-major grid into column-major order."""
    column_count = check_rectangular(rows)
    return [[row[i] for row in rows] for i in range(column_count)]
