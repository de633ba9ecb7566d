#!/usr/bin/env python3
# boxtable/interface/session.py
from __future__ import annotations

"""
Interactive table session and line dispatch.

Every line that does not start with ':' is a data row (cells separated by a
tab, or by the two-character escape '\\t'). Lines starting with ':' are
session commands:

  :header <cells>   set the header row
  :render / :show   print the table
  :reset            drop rows and header
  :padding <n>      change cell padding
  :help             list commands
  :quit / :exit     leave the session
"""

import difflib
import logging
from typing import Callable, Dict, List, Optional, Tuple

from boxtable.table import CELL_SEPARATOR, Table, TableError, parse_content
from boxtable.ui import format_table

log = logging.getLogger(__name__)

COMMAND_PREFIX = ":"

# Short hint used in unknown command errors
HELP_TEXT = "Type ':help' for a list of commands."


def unescape_tabs(text: str) -> str:
    """Turn the two-character sequence '\\t' into a real tab."""
    return text.replace("\\t", CELL_SEPARATOR)


class TableSession:
    """Accumulates rows typed by the user and renders them on demand."""

    def __init__(self, padding: int = 1) -> None:
        # Validate early so a bad padding fails before any input is read
        Table(padding=padding)
        self.padding = padding
        self.rows: List[str] = []
        self.header: Optional[str] = None
        self._commands: Dict[str, Tuple[Callable[[str], Optional[str]], str]] = {
            "header": (self._cmd_header, "Set the header row (tab-separated)"),
            "render": (self._cmd_render, "Print the table"),
            "show": (self._cmd_render, "Alias for :render"),
            "reset": (self._cmd_reset, "Drop all rows and the header"),
            "padding": (self._cmd_padding, "Change cell padding (integer >= 1)"),
            "help": (self._cmd_help, "List commands"),
            "quit": (self._cmd_quit, "Leave the session"),
            "exit": (self._cmd_quit, "Alias for :quit"),
        }

    @property
    def command_names(self) -> List[str]:
        return [f"{COMMAND_PREFIX}{name}" for name in self._commands]

    def build(self) -> Table:
        """Build a Table from the rows and header collected so far."""
        table = Table(padding=self.padding)
        table.add_bulk_content("\n".join(self.rows), self.header)
        return table

    # ---------------- Dispatch ----------------

    def handle_line(self, input_line: str) -> Optional[str]:
        """
        Execute one line of input.

        Returns a printable string, or None if nothing should be printed.
        Raises SystemExit on ':quit'.
        """
        line = input_line.rstrip("\r\n")
        if not line.strip():
            return None

        if not line.startswith(COMMAND_PREFIX):
            return self._add_row(unescape_tabs(line))

        name, _, argument = line[len(COMMAND_PREFIX):].partition(" ")
        entry = self._commands.get(name.lower())
        if entry is None:
            return f"Unknown command: {COMMAND_PREFIX}{name}.{self._suggest_similar(name)} {HELP_TEXT}"

        handler, _ = entry
        try:
            return handler(argument)
        except TableError as exc:
            log.debug("Command %r failed: %s", name, exc)
            return f"[error] {exc}"

    def _suggest_similar(self, name: str) -> str:
        matches = difflib.get_close_matches(name, list(self._commands), n=3, cutoff=0.6)
        return (f" Did you mean: {', '.join(COMMAND_PREFIX + m for m in matches)}?"
                if matches else "")

    def _expected_cells(self) -> Optional[int]:
        if self.rows:
            return len(parse_content(self.rows[0])[0])
        if self.header is not None:
            return len(parse_content(self.header)[0])
        return None

    def _add_row(self, row: str) -> Optional[str]:
        cells = row.split(CELL_SEPARATOR)
        expected = self._expected_cells()
        if expected is not None and len(cells) != expected:
            return f"[error] Row has {len(cells)} cells, expected {expected}"
        self.rows.append(row)
        log.debug("Row %d added (%d cells)", len(self.rows), len(cells))
        return None

    # ---------------- Commands ----------------

    def _cmd_header(self, argument: str) -> Optional[str]:
        header = unescape_tabs(argument)
        if not header:
            self.header = None
            return "Header cleared."
        if self.rows:
            expected = len(parse_content(self.rows[0])[0])
            got = len(header.split(CELL_SEPARATOR))
            if got != expected:
                return f"[error] Header has {got} cells, expected {expected}"
        self.header = header
        return None

    def _cmd_render(self, _argument: str) -> Optional[str]:
        text = self.build().render()
        return text.rstrip("\n") if text else "(empty table)"

    def _cmd_reset(self, _argument: str) -> Optional[str]:
        self.rows.clear()
        self.header = None
        return "Table cleared."

    def _cmd_padding(self, argument: str) -> Optional[str]:
        try:
            padding = int(argument.strip())
        except ValueError:
            return f"[error] Padding must be an integer, got {argument.strip()!r}"
        Table(padding=padding)
        self.padding = padding
        return None

    def _cmd_help(self, _argument: str) -> Optional[str]:
        rows = [[f"{COMMAND_PREFIX}{name}", description]
                for name, (_, description) in self._commands.items()]
        return format_table(rows, headers=["Command", "Description"]).rstrip("\n")

    def _cmd_quit(self, _argument: str) -> Optional[str]:
        raise SystemExit()
