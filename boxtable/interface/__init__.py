#!/usr/bin/env python3
# boxtable/interface/__init__.py
from __future__ import annotations

"""
Package for the demonstration front-ends.

Provides:
- Interactive table session and ':' command dispatch.
- Command completion helpers.
- Line readers for the shell (prompt_toolkit on a terminal, plain input when piped).

The Typer console script lives in `boxtable.interface.app` and is not
imported here, so library users never pay for it.
"""

from .session import TableSession, unescape_tabs, HELP_TEXT, COMMAND_PREFIX
from .completion import suggest, BUILT_IN_COMMANDS
from .cli import BaseCLI, CommandCompleter, PromptToolkitCLI, completing_command, make_cli, PROMPT_TEXT

__all__ = [
    # session
    "TableSession",
    "unescape_tabs",
    "HELP_TEXT",
    "COMMAND_PREFIX",
    # completion
    "suggest",
    "BUILT_IN_COMMANDS",
    # cli
    "BaseCLI",
    "CommandCompleter",
    "PromptToolkitCLI",
    "completing_command",
    "make_cli",
    "PROMPT_TEXT",
]
