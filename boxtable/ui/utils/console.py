#!/usr/bin/env python3
# boxtable/ui/utils/console.py
from __future__ import annotations

import sys
import threading

# Single shared print mutex for all UI output (tables, session replies, logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Thread-safe print of one block of text followed by a newline."""
    target = sys.stdout if file is None else file
    with PRINT_MUTEX:
        target.write(f"{text}\n")
        if flush:
            target.flush()
