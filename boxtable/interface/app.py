#!/usr/bin/env python3
# boxtable/interface/app.py
"""Command-line interface for boxtable.

Thin wrapper around Table that reads tab-delimited content and prints it as a
bordered table.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from boxtable import __version__
from boxtable.config import AppConfig, load_config
from boxtable.table import Table, TableError
from boxtable.ui import init_logger, print_line

from .cli import make_cli
from .session import TableSession, unescape_tabs

log = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="boxtable - render tab-delimited data as a bordered text table",
)


def _fail(message: str) -> NoReturn:
    print_line(f"[error] {message}", file=sys.stderr)
    raise typer.Exit(1)


def _settings(ctx: typer.Context) -> AppConfig:
    if isinstance(ctx.obj, AppConfig):
        return ctx.obj
    try:
        config = load_config()
    except ValueError as exc:
        _fail(f"Invalid configuration: {exc}")
    ctx.obj = config
    return config


@app.command(name="render")
def render(
    ctx: typer.Context,
    file: Annotated[
        Path | None,
        typer.Argument(
            help="Tab-delimited input file (reads stdin when omitted)",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    header: Annotated[
        str | None,
        typer.Option(
            "--header",
            "-H",
            help="Header row; separate cells with a tab or a literal \\t",
        ),
    ] = None,
    padding: Annotated[
        int | None,
        typer.Option("--padding", "-p", help="Spaces on each side of a cell"),
    ] = None,
) -> None:
    """Render tab/newline-delimited content as a table.

    Examples:
        printf 'a\\tb\\nc\\td\\n' | boxtable render
        boxtable render data.tsv --header 'Name\\tValue'
    """
    config = _settings(ctx)
    body = file.read_text(encoding="utf-8") if file is not None else sys.stdin.read()

    try:
        table = Table(padding=config.padding if padding is None else padding)
        table.add_bulk_content(body, None if header is None else unescape_tabs(header))
    except TableError as exc:
        _fail(str(exc))

    text = table.render()
    if not text:
        log.info("Nothing to render")
        return
    print_line(text.rstrip("\n"))


@app.command(name="shell")
def shell(
    ctx: typer.Context,
    padding: Annotated[
        int | None,
        typer.Option("--padding", "-p", help="Spaces on each side of a cell"),
    ] = None,
) -> None:
    """Start an interactive session; type ':help' for commands."""
    config = _settings(ctx)
    try:
        session = TableSession(padding=config.padding if padding is None else padding)
    except TableError as exc:
        _fail(str(exc))

    cli = make_cli(config.history_file_path,
                   interactive=sys.stdin.isatty(),
                   enable_completion=config.enable_completion)

    with cli:
        while True:
            try:
                line = cli.get_line()
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            try:
                output = session.handle_line(line)
            except SystemExit:
                break
            if output:
                print_line(output)


@app.command(name="demo")
def demo(ctx: typer.Context) -> None:
    """Print sample tables built column by column and from bulk content."""
    _settings(ctx)
    column = [f"Value {i}" for i in range(1, 6)]
    by_column = Table()
    by_column.add_column(column, "Header 1")
    by_column.add_column(column, "Header 2")

    by_content = Table()
    by_content.add_bulk_content(
        "Value 1\tValue 1\nValue 2\tValue 2\nValue 3\tValue 3\n",
        "Header 1\tHeader 2\n",
    )

    print_line("Column mode (with header):\n")
    print_line(by_column.render())
    print_line("Content mode (with header):\n")
    print_line(by_content.render())


@app.callback(invoke_without_command=True)
def default_callback(
    ctx: typer.Context,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version"),
    ] = False,
) -> None:
    """boxtable - render tab-delimited data as a bordered text table.

    Without a subcommand, starts the interactive shell.
    """
    if version:
        print_line(f"boxtable {__version__}")
        raise typer.Exit(0)

    config = _settings(ctx)
    level = "DEBUG" if debug else (config.log_level or "WARNING")
    init_logger(
        "boxtable",
        level=level,
        logfile=str(config.log_file_path) if config.log_file_path else None,
    )
    log.debug("Loaded configuration: %s", config)

    if ctx.invoked_subcommand is None:
        shell(ctx)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
