#!/usr/bin/env python3
# boxtable/interface/cli.py
from __future__ import annotations

"""
Line readers for the interactive table shell.

On a terminal the shell reads through prompt_toolkit, where Tab types a cell
separator (or completes a ':' command). Piped input goes through `input()`.
"""

from pathlib import Path
from typing import Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings

from boxtable.table import CELL_SEPARATOR
from .completion import suggest
from .session import COMMAND_PREFIX

PROMPT_TEXT = "boxtable> "


def completing_command(text: str) -> bool:
    """True while the cursor is still inside a ':' command name."""
    return text.startswith(COMMAND_PREFIX) and " " not in text


class BaseCLI:
    """Reads rows with `input()`; used for piped stdin and as the base reader."""

    def setup(self) -> None:
        pass

    def get_line(self) -> str:
        return input(PROMPT_TEXT)

    def teardown(self) -> None:
        pass

    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


class CommandCompleter(Completer):
    """Offers ':' command names; data rows get no completions."""

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        prefix = document.text_before_cursor
        if not completing_command(prefix):
            return
        for word in suggest(prefix):
            yield Completion(word, start_position=-len(prefix))


class PromptToolkitCLI(BaseCLI):
    """Terminal reader with persistent history and Tab-as-cell-separator."""

    def __init__(self, history_file: Path, *, enable_completion: bool = True) -> None:
        self._history_file = history_file
        self._completer = CommandCompleter() if enable_completion else None
        self._session: PromptSession | None = None

    def _bindings(self) -> KeyBindings:
        bindings = KeyBindings()

        @bindings.add("tab")
        def _(event):
            buffer = event.app.current_buffer
            if self._completer is not None and completing_command(buffer.document.text_before_cursor):
                buffer.start_completion(select_first=False)
            else:
                buffer.insert_text(CELL_SEPARATOR)

        return bindings

    def setup(self) -> None:
        self._history_file.parent.mkdir(parents=True, exist_ok=True)
        self._session = PromptSession(
            history=FileHistory(str(self._history_file)),
            completer=self._completer,
            complete_while_typing=self._completer is not None,
            key_bindings=self._bindings(),
        )

    def get_line(self) -> str:
        if self._session is None:
            self.setup()
        return self._session.prompt(PROMPT_TEXT)


def make_cli(history_file: Path, *, interactive: bool = True,
             enable_completion: bool = True) -> BaseCLI:
    """Pick the reader: prompt_toolkit on a terminal, plain `input()` otherwise."""
    if interactive:
        return PromptToolkitCLI(history_file, enable_completion=enable_completion)
    return BaseCLI()
