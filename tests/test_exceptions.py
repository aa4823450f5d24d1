"""Tests for the outlook_exe.exceptions module."""

from __future__ import annotations

import pytest

from outlook_exe.exceptions import (
    ExecutableNotFoundError,
    LaunchError,
    OutlookConfigError,
    OutlookError,
)


class TestErrorHierarchy:
    """Tests for the exception hierarchy."""

    def test_config_error_is_outlook_error(self) -> None:
        """OutlookConfigError inherits from OutlookError and ValueError."""
        assert issubclass(OutlookConfigError, OutlookError)
        assert issubclass(OutlookConfigError, ValueError)

    def test_launch_error_is_os_error(self) -> None:
        """LaunchError inherits from OutlookError and OSError."""
        assert issubclass(LaunchError, OutlookError)
        assert issubclass(LaunchError, OSError)

    def test_not_found_is_launch_error(self) -> None:
        """ExecutableNotFoundError inherits from LaunchError."""
        assert issubclass(ExecutableNotFoundError, LaunchError)


class TestLaunchError:
    """Tests for LaunchError."""

    def test_attributes(self) -> None:
        """Store executable and reason."""
        exc = LaunchError("C:/OUTLOOK.EXE", "permission denied")
        assert exc.executable == "C:/OUTLOOK.EXE"
        assert exc.reason == "permission denied"

    def test_message(self) -> None:
        """Format the message with executable and reason."""
        exc = LaunchError("C:/OUTLOOK.EXE", "permission denied")
        assert str(exc) == "Cannot start 'C:/OUTLOOK.EXE': permission denied"

    def test_message_without_executable(self) -> None:
        """Fall back to a generic name when the executable is unknown."""
        assert str(LaunchError(None, "boom")) == "Cannot start Outlook: boom"

    def test_catch_as_os_error(self) -> None:
        """Callers handling OSError also catch launch failures."""
        with pytest.raises(OSError):
            raise LaunchError("x", "y")


class TestExecutableNotFoundError:
    """Tests for ExecutableNotFoundError."""

    def test_default_message(self) -> None:
        """Without search details the message is short."""
        exc = ExecutableNotFoundError()
        assert exc.executable is None
        assert exc.searched == ()
        assert str(exc) == "Cannot start Outlook: OUTLOOK.EXE not found"

    def test_searched_locations_listed(self) -> None:
        """Searched locations are part of the message."""
        exc = ExecutableNotFoundError(("HKLM\\Key", "PATH"))
        assert "searched: HKLM\\Key, PATH" in str(exc)
