#!/usr/bin/env python3
# boxtable/__init__.py
from __future__ import annotations

"""
boxtable: render tabular data as a fixed-width, box-drawn text table.

    >>> from boxtable import Table
    >>> table = Table()
    >>> table.add_column(["a", "bb"], "Col")
    >>> print(table.render(), end="")
    +======+
    | Col |
    +======+
    | a   |
    +------+
    | bb  |
    +------+
"""

__version__ = "0.1.0"

from boxtable.table import (  # noqa: E402
    Table,
    TableError,
    InvalidConfiguration,
    MalformedInput,
)
from boxtable.ui import format_table, print_table  # noqa: E402

__all__ = [
    "__version__",
    "Table",
    "TableError",
    "InvalidConfiguration",
    "MalformedInput",
    "format_table",
    "print_table",
]
