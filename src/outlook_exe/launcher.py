"""Process launchers used by :class:`~outlook_exe.builder.MessageBuilder`.

Spawning is hidden behind the :class:`ProcessLauncher` protocol so the
argument assembly can be exercised without starting Outlook: tests
inject a launcher that only records what it was asked to run.
"""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from outlook_exe.exceptions import LaunchError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@runtime_checkable
class ProcessLauncher(Protocol):
    """Protocol for objects able to start an external process.

    Examples:
        >>> def open_compose(launcher: ProcessLauncher) -> Any:
        ...     return launcher.spawn("OUTLOOK.EXE", ["/c", "ipm.note"])
    """

    def spawn(self, executable: str, arguments: Sequence[str]) -> Any:
        """Start ``executable`` with ``arguments`` without waiting for it.

        Args:
            executable: Path of the program to run.
            arguments: Command-line arguments, one element per argument.

        Returns:
            A handle on the started process.

        Raises:
            LaunchError: If the process cannot be started.
        """
        ...


class SubprocessLauncher:
    """Start processes with :class:`subprocess.Popen`.

    No shell is involved: every argument reaches the child as a
    separate argv element. The call returns as soon as the process is
    created.

    Examples:
        >>> launcher = SubprocessLauncher()
        >>> proc = launcher.spawn("C:/Office/OUTLOOK.EXE", ["/c", "ipm.note"])  # doctest: +SKIP
        >>> proc.pid  # doctest: +SKIP
        4242
    """

    def spawn(self, executable: str, arguments: Sequence[str]) -> subprocess.Popen[bytes]:
        """Start the process.

        Args:
            executable: Path of the program to run.
            arguments: Command-line arguments.

        Returns:
            The :class:`subprocess.Popen` handle of the child.

        Raises:
            LaunchError: If the executable is missing, not executable, or
                the OS refuses to create the process.
        """
        cmd = [executable, *arguments]
        logger.debug("SubprocessLauncher: cmd=%r", cmd)
        try:
            proc = subprocess.Popen(cmd)  # noqa: S603
        except OSError as exc:
            raise LaunchError(executable, exc.strerror or str(exc)) from exc
        return proc


__all__ = [
    "ProcessLauncher",
    "SubprocessLauncher",
]
