#!/usr/bin/env python3
# boxtable/ui/static/table.py
from __future__ import annotations

from typing import List, Optional, Sequence

from boxtable.table import MalformedInput, Table, transpose
from boxtable.ui.utils import print_line


def format_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    padding: int = 1,
) -> str:
    """Return a bordered table string for row-major data."""
    str_rows: List[List[str]] = [[str(cell) for cell in row] for row in rows]
    columns = transpose(str_rows)

    table = Table(padding=padding)
    if headers is None:
        for column in columns:
            table.add_column(column)
        return table.render()

    str_headers = [str(h) for h in headers]
    if not str_rows:
        columns = [[] for _ in str_headers]
    elif len(str_headers) != len(columns):
        raise MalformedInput(
            f"Got {len(str_headers)} headers for {len(columns)} columns")
    for column, header in zip(columns, str_headers):
        table.add_column(column, header)
    return table.render()


def print_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    padding: int = 1,
    file=None,
) -> None:
    """Print a formatted table to the given file (stdout by default)."""
    text = format_table(rows, headers, padding=padding)
    print_line(text.rstrip("\n"), file=file)
