#!/usr/bin/env python3
# boxtable/table/__init__.py
from __future__ import annotations

"""
Package for the table builder.

Provides:
- Table: accumulate columns or bulk content, render a bordered text table.
- Error taxonomy (`TableError`, `InvalidConfiguration`, `MalformedInput`).
- Delimited content helpers (`parse_content`, `split_rows`, `transpose`).
"""

from .errors import TableError, InvalidConfiguration, MalformedInput
from .parsing import (
    CELL_SEPARATOR,
    ROW_SEPARATOR,
    check_rectangular,
    parse_content,
    split_rows,
    transpose,
)
from .builder import Table, horizontal_separator, table_width

__all__ = [
    "Table",
    "TableError",
    "InvalidConfiguration",
    "MalformedInput",
    "CELL_SEPARATOR",
    "ROW_SEPARATOR",
    "check_rectangular",
    "parse_content",
    "split_rows",
    "transpose",
    "horizontal_separator",
    "table_width",
]
