"""Fluent builder for Outlook compose windows.

Examples:
    >>> from outlook_exe import MessageBuilder
    >>> proc = (
    ...     MessageBuilder.new()
    ...     .with_recipient("noreply@example.org")
    ...     .with_subject("Hello, World!")
    ...     .with_body("Line with spaces\\nAnother line")
    ...     .with_attachment("C:/tmp/file.txt")
    ...     .spawn()
    ... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from outlook_exe.config import OutlookConfig
from outlook_exe.escaping import build_message_argument, percent_escape
from outlook_exe.launcher import SubprocessLauncher
from outlook_exe.locator import require_outlook
from outlook_exe.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from outlook_exe.launcher import ProcessLauncher

logger = logging.getLogger(__name__)


class MessageBuilder:
    """Draft an Outlook message and open it in a compose window.

    Every ``with_*`` method overwrites its field and returns the builder
    so calls can be chained. Empty values count as unset and are left
    out of the command line. The builder can be spawned more than once.

    Args:
        config: Executable discovery and compose form settings.
        launcher: Object used to start the process, a
            :class:`~outlook_exe.launcher.SubprocessLauncher` by default.

    Examples:
        >>> builder = MessageBuilder().with_recipient("a@example.org").with_subject("Hi")
        >>> builder.message_argument()
        'a@example.org&subject=Hi'
    """

    def __init__(
        self,
        config: OutlookConfig | None = None,
        launcher: ProcessLauncher | None = None,
    ) -> None:
        self.to: list[str] = []
        self.cc: list[str] = []
        self.bcc: list[str] = []
        self.subject = ""
        self.body = ""
        self.attachment = ""
        self.config = config or OutlookConfig()
        self.launcher: ProcessLauncher = launcher or SubprocessLauncher()
        self.spawned = False

    @classmethod
    def new(cls) -> MessageBuilder:
        """Return a builder with every field unset."""
        return cls()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(to={self.to!r}, cc={self.cc!r}, bcc={self.bcc!r}, "
            f"subject={self.subject!r}, body={self.body!r}, attachment={self.attachment!r})"
        )

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def with_recipient(self, *addresses: str) -> MessageBuilder:
        """Set the primary recipients.

        Args:
            addresses: One or more addresses, replacing any previous ones.

        Returns:
            The builder.
        """
        self.to = list(addresses)
        return self

    def with_recipient_cc(self, *addresses: str) -> MessageBuilder:
        """Set the carbon-copy recipients."""
        self.cc = list(addresses)
        return self

    def with_recipient_bcc(self, *addresses: str) -> MessageBuilder:
        """Set the blind carbon-copy recipients."""
        self.bcc = list(addresses)
        return self

    def with_subject(self, subject: str) -> MessageBuilder:
        """Set the subject line."""
        self.subject = subject
        return self

    def with_body(self, body: str) -> MessageBuilder:
        """Set the message body. Line breaks are kept as typed."""
        self.body = body
        return self

    def with_attachment(self, path: str | os.PathLike[str]) -> MessageBuilder:
        """Set the file to attach.

        Outlook's switches only attach a single file per invocation, so a
        second call replaces the first path. The path is passed through
        as text and is not checked for existence.

        Args:
            path: File to attach.

        Returns:
            The builder.
        """
        self.attachment = os.fspath(path)
        return self

    def with_config(self, config: OutlookConfig) -> MessageBuilder:
        """Replace the executable discovery settings."""
        self.config = config
        return self

    def with_launcher(self, launcher: ProcessLauncher) -> MessageBuilder:
        """Replace the process launcher."""
        self.launcher = launcher
        return self

    # ------------------------------------------------------------------
    # Command line
    # ------------------------------------------------------------------

    def message_argument(self) -> str:
        """Return the composite value of the ``/m`` switch."""
        return build_message_argument(
            to=self.to,
            cc=self.cc,
            bcc=self.bcc,
            subject=self.subject,
            body=self.body,
        )

    def arguments(self) -> list[str]:
        """Return the switches passed to OUTLOOK.EXE, without the executable.

        Returns:
            ``["/c", <class>, "/m", <composite>]`` followed by
            ``["/a", <path>]`` when an attachment is set.
        """
        args = ["/c", self.config.message_class, "/m", self.message_argument()]
        if self.attachment:
            args.extend(["/a", percent_escape(self.attachment)])
        return args

    def command_line(self, executable: str) -> list[str]:
        """Return the full argv for ``executable``."""
        return [executable, *self.arguments()]

    def spawn(self) -> Any:
        """Open the drafted message in Outlook and return immediately.

        Returns:
            The process handle returned by the launcher
            (:class:`subprocess.Popen` for the default launcher).

        Raises:
            ExecutableNotFoundError: If OUTLOOK.EXE cannot be located.
            LaunchError: If the process cannot be started.
        """
        executable = require_outlook(self.config)
        args = self.arguments()
        logger.log(TRACE_LEVEL, "Outlook argv: %r", [executable, *args])
        handle = self.launcher.spawn(executable, args)
        self.spawned = True
        pid = getattr(handle, "pid", None)
        if pid is not None:
            logger.info("Outlook started: %s (pid=%d)", executable, pid)
        return handle


__all__ = [
    "MessageBuilder",
]
