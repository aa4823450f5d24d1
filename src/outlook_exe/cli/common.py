"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

console = Console()
error_console = Console(stderr=True)


def exit_error(message: str, code: int = 1) -> NoReturn:
    """Print ``message`` in red on stderr and exit.

    Args:
        message: Error description shown to the user.
        code: Process exit code.

    Raises:
        typer.Exit: Always.
    """
    error_console.print(f"[red]Error:[/] {escape(message)}")
    raise typer.Exit(code)


__all__ = [
    "console",
    "error_console",
    "exit_error",
]
