"""Command-line interface for outlook_exe."""

from outlook_exe.cli.app import app

__all__ = ["app"]
