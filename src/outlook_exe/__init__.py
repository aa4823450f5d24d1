"""Convenience wrappers for command-line invocation of Outlook.

Build a message with the fluent :class:`MessageBuilder` and open it in an
Outlook compose window, ready for the user to press "Send".

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

from outlook_exe.builder import MessageBuilder
from outlook_exe.config import OutlookConfig, load_config
from outlook_exe.escaping import (
    build_message_argument,
    parse_message_argument,
    percent_escape,
    percent_unescape,
)
from outlook_exe.exceptions import (
    ExecutableNotFoundError,
    LaunchError,
    OutlookConfigError,
    OutlookError,
)
from outlook_exe.launcher import ProcessLauncher, SubprocessLauncher
from outlook_exe.locator import find_outlook, require_outlook
from outlook_exe.meta import __version__

__all__ = [
    "ExecutableNotFoundError",
    "LaunchError",
    "MessageBuilder",
    "OutlookConfig",
    "OutlookConfigError",
    "OutlookError",
    "ProcessLauncher",
    "SubprocessLauncher",
    "__version__",
    "build_message_argument",
    "find_outlook",
    "load_config",
    "parse_message_argument",
    "percent_escape",
    "percent_unescape",
    "require_outlook",
]
