#!/usr/bin/env python3
# boxtable/table/builder.py
from __future__ import annotations

"""
Fixed-width, box-drawn text tables.

A Table accumulates columns (optionally headered), either one at a time or
parsed from tab/newline-delimited bulk content, and renders them as:

    +=====================+
    | Header 1 | Header 2 |
    +=====================+
    | Value 1  | Value 1  |
    +---------------------+
    ...

Header mode is active only when every column has a header.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidConfiguration, MalformedInput
from .parsing import check_rectangular, parse_content, transpose

log = logging.getLogger(__name__)

PLAIN_SEPARATOR = "-"
HEADER_SEPARATOR = "="
CORNER = "+"
BORDER = "|"


def table_width(column_widths: Sequence[int]) -> int:
    """Length of the fill between the corner characters of a separator line."""
    if not column_widths:
        return 0
    return sum(column_widths) + 1


def horizontal_separator(width: int, sep_char: str = PLAIN_SEPARATOR) -> str:
    return f"{CORNER}{sep_char * width}{CORNER}\n"


class Table:
    """
    Builder for a bordered text table.

    Args:
        padding: spaces inserted on each side of every cell. Must be >= 1.
    """

    def __init__(self, padding: int = 1) -> None:
        if isinstance(padding, bool) or not isinstance(padding, int):
            raise InvalidConfiguration(
                f"Padding must be an integer, got {padding!r}")
        if padding < 1:
            raise InvalidConfiguration("Padding value cannot be less than 1")
        self._padding = padding
        self._columns: List[List[str]] = []
        self._headers: List[str] = []
        self._column_widths: List[int] = []

    # ---------------- Read-only views ----------------

    @property
    def padding(self) -> int:
        return self._padding

    @property
    def columns(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(column) for column in self._columns)

    @property
    def headers(self) -> Tuple[str, ...]:
        return tuple(self._headers)

    @property
    def column_widths(self) -> Tuple[int, ...]:
        return tuple(self._column_widths)

    @property
    def row_count(self) -> int:
        return len(self._columns[0]) if self._columns else 0

    @property
    def has_header(self) -> bool:
        """True only when every column has a header (partial headers are ignored)."""
        return bool(self._columns) and len(self._headers) == len(self._columns)

    @property
    def width(self) -> int:
        return table_width(self._column_widths)

    def __len__(self) -> int:
        return len(self._columns)

    # ---------------- Ingestion ----------------

    def add_column(self, cells: Iterable[object], header: Optional[str] = None) -> None:
        """
        Append a column, optionally with a header label.

        The column width is the longest cell (or header) plus padding on both
        sides. Every column must have the same number of rows.
        """
        column = [str(cell) for cell in cells]
        if self._columns and len(column) != self.row_count:
            raise MalformedInput(
                f"Column {len(self._columns) + 1} has {len(column)} rows, "
                f"expected {self.row_count}")

        gutter = self._padding * 2
        length = max((len(cell) for cell in column), default=0) + gutter
        if header is not None:
            header = str(header)
            length = max(length, len(header) + gutter)
            self._headers.append(header)

        self._columns.append(column)
        self._column_widths.append(length)
        log.debug("Added column %d (%d rows, width %d, header=%r)",
                  len(self._columns), len(column), length, header)

    def add_bulk_content(self, body: str, header: Optional[str] = None) -> None:
        """
        Parse tab/newline-delimited text and add one column per cell position.

        The first row decides the column count; every other row (and the
        header line, when given) must match it. Nothing is added when the
        content is malformed.
        """
        rows = parse_content(body)
        check_rectangular(rows)

        labels: Optional[List[str]] = None
        if header is not None:
            header_rows = parse_content(header)
            if len(header_rows) != 1:
                raise MalformedInput(
                    f"Header must be a single row, got {len(header_rows)}")
            labels = header_rows[0]
            if rows and len(labels) != len(rows[0]):
                raise MalformedInput(
                    f"Header has {len(labels)} cells, expected {len(rows[0])}")
        if self._columns and (rows or labels) and len(rows) != self.row_count:
            raise MalformedInput(
                f"Content has {len(rows)} rows, expected {self.row_count}")

        columns = transpose(rows)
        if labels is not None and not columns:
            columns = [[] for _ in labels]
        log.debug("Parsed bulk content into %d columns x %d rows",
                  len(columns), len(rows))

        for index, column in enumerate(columns):
            if labels is None:
                self.add_column(column)
            else:
                self.add_column(column, labels[index])

    # ---------------- Rendering ----------------

    def _render_row(self, cells: Sequence[str], pad: str) -> str:
        parts = []
        for index, cell in enumerate(cells):
            content = f"{pad}{cell}{pad}"
            parts.append(content.ljust(self._column_widths[index]))
        return BORDER + BORDER.join(parts) + BORDER + "\n"

    def render(self) -> str:
        """Return the table as text, one newline-terminated line per border or row."""
        if not self._columns or not self._columns[0]:
            return ""

        width = table_width(self._column_widths)
        plain = horizontal_separator(width, PLAIN_SEPARATOR)
        emphasis = horizontal_separator(width, HEADER_SEPARATOR)
        pad = " " * self._padding
        has_header = self.has_header

        lines: List[str] = []
        if has_header:
            lines.append(emphasis)
            lines.append(self._render_row(self._headers, pad))

        for i in range(self.row_count):
            lines.append(emphasis if has_header and i == 0 else plain)
            lines.append(self._render_row([column[i] for column in self._columns], pad))
        lines.append(plain)

        log.debug("Rendered %d columns x %d rows (width %d)",
                  len(self._columns), self.row_count, width + 2)
        return "".join(lines)

    format = render

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"Table(padding={self._padding}, columns={len(self._columns)}, "
                f"rows={self.row_count}, headers={len(self._headers)})")
