"""Shared pytest fixtures for the outlook_exe test suite."""

from __future__ import annotations

# Disable Rich colors and force wide terminal BEFORE any imports
# Rich checks these at import time
import os

os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"
os.environ["FORCE_COLOR"] = "0"
os.environ["COLUMNS"] = "200"  # Prevent text wrapping in CLI output

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

import pytest

from outlook_exe.builder import MessageBuilder
from outlook_exe.config import OutlookConfig
from outlook_exe.locator import registry_lookup

# pylint: disable=redefined-outer-name

FAKE_OUTLOOK = "C:/Program Files/Microsoft Office/root/Office16/OUTLOOK.EXE"


@dataclass
class FakeProcess:
    """Stand-in for ``subprocess.Popen`` returned by the recording launcher."""

    pid: int


class RecordingLauncher:
    """Launcher double that records every spawn request."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str]]] = []

    def spawn(self, executable: str, arguments: Sequence[str]) -> Any:
        """Record the request and return a fake process handle."""
        self.calls.append((executable, list(arguments)))
        return FakeProcess(pid=4242 + len(self.calls))

    @property
    def last_arguments(self) -> list[str]:
        """Arguments of the most recent spawn."""
        return self.calls[-1][1]


@pytest.fixture
def launcher() -> RecordingLauncher:
    """Provide a fresh recording launcher."""

    return RecordingLauncher()


@pytest.fixture
def fake_config() -> OutlookConfig:
    """Config pointing at a fixed executable path, bypassing discovery."""

    return OutlookConfig(executable=FAKE_OUTLOOK)


@pytest.fixture
def builder(fake_config: OutlookConfig, launcher: RecordingLauncher) -> MessageBuilder:
    """Builder wired to the fake executable and the recording launcher."""

    return MessageBuilder(config=fake_config, launcher=launcher)


@pytest.fixture(autouse=True)
def _clear_registry_cache() -> Iterator[None]:
    """Reset the memoized registry lookup around every test."""
    registry_lookup.cache_clear()
    yield
    registry_lookup.cache_clear()
