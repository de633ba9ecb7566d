#!/usr/bin/env python3
# boxtable/table/errors.py
from __future__ import annotations

"""
Error taxonomy for the table builder.

- TableError: common base, catch it to handle every builder failure.
- InvalidConfiguration: bad construction-time settings (padding < 1).
- MalformedInput: content that does not form a rectangular grid.
"""


class TableError(Exception):
    """Base class for all table builder errors."""


class InvalidConfiguration(TableError, ValueError):
    """Raised when the builder is constructed with invalid settings."""


class MalformedInput(TableError, ValueError):
    """Raised when rows or columns have inconsistent shapes."""
