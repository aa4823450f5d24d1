"""Typer application for the outlook-exe command line."""

from __future__ import annotations

from typing import Annotated

import typer

from outlook_exe import meta
from outlook_exe.cli.commands.compose import compose
from outlook_exe.cli.common import console

app = typer.Typer(
    name=meta.__app_name__,
    help=f"{meta.__app_name__}: {meta.__description__}",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{meta.__app_name__} {meta.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
) -> None:
    """Compose Outlook messages from the command line."""


app.command("compose")(compose)


__all__ = ["app"]
