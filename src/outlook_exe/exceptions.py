"""Specialized exceptions raised by the outlook_exe package.

Exception hierarchy::

    OutlookError (base for all package errors)
        OutlookConfigError (invalid configuration, also ValueError)
        LaunchError (Outlook process could not be started, also OSError)
            ExecutableNotFoundError (OUTLOOK.EXE could not be located)
"""

from __future__ import annotations


class OutlookError(Exception):
    """Base exception for all outlook_exe errors.

    All package-specific exceptions inherit from this class,
    allowing for easy catching of any outlook_exe error.
    """


class OutlookConfigError(OutlookError, ValueError):
    """Configuration is invalid.

    Raised when an :class:`~outlook_exe.config.OutlookConfig` value is
    out of range, or when a YAML config file cannot be read or contains
    unknown keys.
    """


class LaunchError(OutlookError, OSError):
    """The Outlook process could not be started.

    Attributes:
        executable: Path of the executable that failed, None if unknown.
        reason: Description of the failure.

    Examples:
        >>> raise LaunchError("C:/OUTLOOK.EXE", "permission denied")
        Traceback (most recent call last):
        ...
        outlook_exe.exceptions.LaunchError: Cannot start 'C:/OUTLOOK.EXE': permission denied
    """

    def __init__(self, executable: str | None, reason: str) -> None:
        """Initialize LaunchError.

        Args:
            executable: Path of the executable, None if it was never resolved.
            reason: Description of the failure.
        """
        target = f"'{executable}'" if executable else "Outlook"
        super().__init__(f"Cannot start {target}: {reason}")
        self.executable = executable
        self.reason = reason


class ExecutableNotFoundError(LaunchError):
    """OUTLOOK.EXE could not be located on this host.

    Attributes:
        searched: Human-readable list of the locations that were tried.
    """

    def __init__(self, searched: tuple[str, ...] = ()) -> None:
        """Initialize ExecutableNotFoundError.

        Args:
            searched: Locations tried during discovery.
        """
        reason = "OUTLOOK.EXE not found"
        if searched:
            reason += f" (searched: {', '.join(searched)})"
        super().__init__(None, reason)
        self.searched = searched


__all__ = [
    "ExecutableNotFoundError",
    "LaunchError",
    "OutlookConfigError",
    "OutlookError",
]
