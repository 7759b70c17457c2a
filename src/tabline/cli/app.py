"""Typer CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tabline.cli.core.input import InputReader
from tabline.cli.core.terminal import Terminal
from tabline.cli.renderer import TerminalRenderer
from tabline.config import LOG_LEVELS, AppConfig
from tabline.core.controller import AppController
from tabline.core.shortcuts import ShortcutContext, get_shortcut_registry
from tabline.log import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="tabline",
        help="Tabbed terminal UI with an editable input line and a message log.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def run(
        title: Annotated[Optional[str], typer.Option("--title", "-t", help="Title shown in the tab bar")] = None,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write logs to this file")] = None,
        log_level: Annotated[
            Optional[str],
            typer.Option("--log-level", help=f"Log level ({', '.join(LOG_LEVELS)})"),
        ] = None,
    ) -> None:
        """Start the interactive UI. Press [bold]e[/] to edit, [bold]q[/] to quit."""
        try:
            config = AppConfig.from_env(title=title, log_file=log_file, log_level=log_level)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e

        setup_logging(config)

        if not Terminal.is_interactive():
            console.print("[red]tabline run needs an interactive terminal on stdin[/]")
            raise typer.Exit(1)

        controller = AppController()
        renderer = TerminalRenderer(title=config.title)
        try:
            with Terminal.managed_mode():
                controller.run(InputReader(), renderer)
        except (OSError, EOFError) as e:
            # Terminal is already restored by managed_mode at this point
            logger.exception("Failed to read input")
            console.print(f"[red]Error reading input: {e}[/]")
            raise typer.Exit(1) from e

    @app.command()
    def keys() -> None:
        """List the key bindings of each input mode."""
        registry = get_shortcut_registry()
        out = Console()

        for context in ShortcutContext:
            table = Table(title=f"{context.name.capitalize()} mode", title_justify="left")
            table.add_column("Keys", style="bold cyan")
            table.add_column("Action")
            for shortcut in registry.get_for_context(context):
                table.add_row(shortcut.key_display, shortcut.description)
            if context == ShortcutContext.EDITING:
                table.add_row("any character", "Insert it at the cursor")
            out.print(table)

    return app
