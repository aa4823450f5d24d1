"""Open a pre-filled Outlook compose window using :class:`outlook_exe.MessageBuilder`."""

from __future__ import annotations

from outlook_exe import LaunchError, MessageBuilder
from outlook_exe.logging import init_logging


def open_compose_window() -> None:
    """Draft a message with every field set and hand it to Outlook."""
    init_logging("DEBUG")
    try:
        proc = (
            MessageBuilder.new()
            .with_recipient("noreply@example.org")
            .with_subject("Hello, World!")
            .with_body("Line with spaces\nAnother line")
            .with_attachment("C:/tmp/file.txt")
            .spawn()
        )
    except LaunchError as exc:
        print(f"Outlook could not be started: {exc}")
        return
    print(f"Outlook started with pid {proc.pid}")


if __name__ == "__main__":  # pragma: no cover - manual example
    open_compose_window()
