"""Tests for __main__ entry point.

These tests verify that the CLI can be invoked through python -m outlook_exe.
"""

import os
import runpy
import subprocess
import sys
from subprocess import CompletedProcess
from unittest.mock import patch

import pytest

# pylint: disable=import-outside-toplevel


def test_main_module_invocation() -> None:
    """Test that `python -m outlook_exe --help` runs without errors."""
    # Force UTF-8 encoding for Rich/Typer output on Windows
    env = os.environ.copy()
    env["PYTHONIOENCODING"] = "utf-8"

    result: CompletedProcess[bytes] = subprocess.run(
        [sys.executable, "-m", "outlook_exe", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        env=env,
    )
    stdout = result.stdout.decode("utf-8", errors="replace") if result.stdout else ""
    stderr = result.stderr.decode("utf-8", errors="replace") if result.stderr else ""

    assert result.returncode == 0, f"CLI failed: stdout={stdout!r}, stderr={stderr!r}"
    combined_output = stdout + stderr
    assert "compose" in combined_output, f"Expected 'compose' in output: {combined_output!r}"


def test_main_function_calls_app() -> None:
    """Test that main() calls the CLI app."""
    with patch("outlook_exe.__main__.app") as mock_app:
        from outlook_exe.__main__ import main

        main()
        mock_app.assert_called_once_with(prog_name="outlook-exe")


def test_main_module_guard_executes(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the __main__ guard invokes the CLI when run as a module."""
    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def fake_call(_self: object, *args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr("typer.main.Typer.__call__", fake_call)
    monkeypatch.delitem(sys.modules, "outlook_exe.__main__", raising=False)
    runpy.run_module("outlook_exe.__main__", run_name="__main__")

    assert calls == [((), {"prog_name": "outlook-exe"})]
