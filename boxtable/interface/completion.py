#!/usr/bin/env python3
# boxtable/interface/completion.py
from __future__ import annotations

"""
Session command completion.

Only the first token of a ':' command line is completed; data rows never
receive suggestions.
"""

from typing import Iterable

from .session import COMMAND_PREFIX

# Session verbs, in the order shown by ':help'
BUILT_IN_COMMANDS: tuple[str, ...] = (
    ":header", ":render", ":show", ":reset", ":padding", ":help", ":quit", ":exit")


def suggest(text_before_cursor: str, commands: Iterable[str] = BUILT_IN_COMMANDS) -> list[str]:
    """Return command names completing the current buffer, or [] for data rows."""
    if not text_before_cursor.startswith(COMMAND_PREFIX):
        return []
    if any(ch.isspace() for ch in text_before_cursor):
        return []
    return sorted(w for w in commands if w.startswith(text_before_cursor))
