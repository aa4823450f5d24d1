"""Logging setup for outlook_exe.

Modules log through ``logging.getLogger(__name__)`` under the
``outlook_exe`` namespace. Nothing is printed until an application calls
:func:`init_logging`, which attaches a Rich console handler to the
package logger.

Examples:
    >>> from outlook_exe.logging import init_logging
    >>> logger = init_logging("DEBUG")  # doctest: +SKIP
    >>> logger.debug("ready")  # doctest: +SKIP
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

#: Custom level below DEBUG for very chatty diagnostics (full argv dumps).
TRACE_LEVEL = 5

#: Name of the package root logger.
ROOT_LOGGER_NAME = "outlook_exe"

logging.addLevelName(TRACE_LEVEL, "TRACE")

_handler: RichHandler | None = None


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name == "TRACE":
        return TRACE_LEVEL
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def init_logging(level: int | str = logging.INFO, *, console: Console | None = None) -> logging.Logger:
    """Attach a Rich console handler to the package logger.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.

    Args:
        level: Threshold as a number or name (``"TRACE"``, ``"DEBUG"``, ...).
        console: Rich console to write to, stderr by default.

    Returns:
        The configured ``outlook_exe`` logger.

    Raises:
        ValueError: If the level name is unknown.
    """
    global _handler  # pylint: disable=global-statement

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    _handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(_resolve_level(level))
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``outlook_exe`` namespace.

    Args:
        name: Child name, with or without the ``outlook_exe.`` prefix.
            None returns the package root logger.

    Returns:
        A standard library logger.

    Examples:
        >>> get_logger("cli").name
        'outlook_exe.cli'
        >>> get_logger("outlook_exe.builder").name
        'outlook_exe.builder'
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


__all__ = [
    "ROOT_LOGGER_NAME",
    "TRACE_LEVEL",
    "get_logger",
    "init_logging",
]
