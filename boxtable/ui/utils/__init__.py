#!/usr/bin/env python3
# boxtable/ui/utils/__init__.py
from __future__ import annotations
from .ansi import ANSI, ANSI_REGEX, strip_ansi
from .console import PRINT_MUTEX, print_line

__all__ = [
    "ANSI",
    "ANSI_REGEX",
    "strip_ansi",
    "PRINT_MUTEX",
    "print_line",
]
