#!/usr/bin/env python3
# boxtable/ui/utils/ansi.py
from __future__ import annotations

import re

# SGR codes used to colour log records on a terminal
ANSI = {
    "reset": "\x1b[0m",
    "red": "\x1b[31m",
    "yellow": "\x1b[33m",
    "magenta": "\x1b[35m",
    "bright_black": "\x1b[90m",
}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Drop escape sequences, e.g. from cell text before it reaches a log file."""
    return ANSI_REGEX.sub("", text)
