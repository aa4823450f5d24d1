"""Open a pre-filled Outlook compose window."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from outlook_exe.builder import MessageBuilder
from outlook_exe.cli.common import console, exit_error
from outlook_exe.config import OutlookConfig, load_config
from outlook_exe.escaping import parse_message_argument
from outlook_exe.exceptions import LaunchError, OutlookConfigError
from outlook_exe.locator import find_outlook
from outlook_exe.logging import init_logging

# ─────────────────────────────────────────────────────────────────────────────
# Rendering
# ─────────────────────────────────────────────────────────────────────────────


def _render_dry_run(builder: MessageBuilder, executable: str | None) -> None:
    """Print the command line and the decoded fields.

    Args:
        builder: Populated message builder.
        executable: Resolved executable, None when Outlook was not found.
    """
    argv = builder.command_line(executable or "OUTLOOK.EXE")

    table = Table(title="Outlook command line", show_lines=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Argument", style="cyan")
    for index, arg in enumerate(argv):
        table.add_row(str(index), escape(repr(arg)))
    console.print(table)

    try:
        fields = parse_message_argument(builder.message_argument())
    except ValueError:
        console.print("[yellow]Message fields could not be decoded.[/]")
    else:
        _render_fields(fields, builder.attachment)

    if executable is None:
        console.print("[yellow]Outlook executable not found on this host.[/]")


def _render_fields(fields: dict[str, object], attachment: str) -> None:
    """Print the decoded message fields.

    Args:
        fields: Output of :func:`parse_message_argument`.
        attachment: Attachment path, empty when unset.
    """
    details = Table(show_header=False, box=None)
    details.add_column("Field", style="dim")
    details.add_column("Value")
    for name in ("to", "cc", "bcc"):
        recipients = fields[name]
        if recipients:
            details.add_row(name, escape("; ".join(recipients)))  # type: ignore[arg-type]
    for name in ("subject", "body"):
        if fields[name]:
            details.add_row(name, escape(str(fields[name])))
    if attachment:
        details.add_row("attachment", escape(attachment))
    console.print(details)


# ─────────────────────────────────────────────────────────────────────────────
# Command
# ─────────────────────────────────────────────────────────────────────────────


def compose(
    to: Annotated[Optional[list[str]], typer.Option("--to", "-t", help="Recipient address (repeatable).")] = None,
    cc: Annotated[Optional[list[str]], typer.Option("--cc", help="CC address (repeatable).")] = None,
    bcc: Annotated[Optional[list[str]], typer.Option("--bcc", help="BCC address (repeatable).")] = None,
    subject: Annotated[str, typer.Option("--subject", "-s", help="Subject line.")] = "",
    body: Annotated[str, typer.Option("--body", "-b", help="Message body.")] = "",
    body_file: Annotated[
        Optional[Path],
        typer.Option("--body-file", help="Read the message body from a UTF-8 text file."),
    ] = None,
    attach: Annotated[Optional[str], typer.Option("--attach", "-a", help="File to attach.")] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML file with an 'outlook:' section."),
    ] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Print the command line instead of launching.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Open an Outlook compose window pre-filled with the given fields."""
    if verbose:
        init_logging(logging.DEBUG)

    if body and body_file:
        exit_error("--body and --body-file are mutually exclusive")
    if body_file is not None:
        try:
            body = body_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            exit_error(f"Cannot read body file {body_file}: {exc}")

    try:
        config = load_config(config_path) if config_path else OutlookConfig()
    except OutlookConfigError as exc:
        exit_error(str(exc))

    builder = MessageBuilder(config=config)
    if to:
        builder.with_recipient(*to)
    if cc:
        builder.with_recipient_cc(*cc)
    if bcc:
        builder.with_recipient_bcc(*bcc)
    builder.with_subject(subject).with_body(body)
    if attach:
        builder.with_attachment(attach)

    if dry_run:
        _render_dry_run(builder, find_outlook(config))
        return

    try:
        proc = builder.spawn()
    except LaunchError as exc:
        exit_error(str(exc))

    pid = getattr(proc, "pid", None)
    suffix = f" (pid {pid})" if pid is not None else ""
    console.print(f"[green]✓[/] Outlook compose window opened{suffix}")


__all__ = ["compose"]
