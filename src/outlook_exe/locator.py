"""Locate the Outlook executable on the host.

Resolution order:

1. ``OutlookConfig.executable`` when set explicitly.
2. The default value of ``HKLM\\<registry_subkey>`` (Windows "App Paths"
   registration written by the Office installer).
3. A ``PATH`` lookup of ``OUTLOOK.EXE`` / ``outlook`` when
   ``OutlookConfig.search_path`` is enabled.
"""

from __future__ import annotations

import functools
import logging
import shutil
import sys

from outlook_exe.config import OutlookConfig
from outlook_exe.exceptions import ExecutableNotFoundError
from outlook_exe.logging import TRACE_LEVEL

log = logging.getLogger(__name__)

#: Names tried with :func:`shutil.which` when the registry has no entry.
PATH_CANDIDATES = ("OUTLOOK.EXE", "outlook")


@functools.lru_cache(maxsize=8)
def registry_lookup(subkey: str) -> str | None:
    """Read the default value of ``HKEY_LOCAL_MACHINE\\<subkey>``.

    The result is cached for the lifetime of the process.

    Args:
        subkey: Registry path below HKEY_LOCAL_MACHINE.

    Returns:
        The registered executable path, or None when the key is missing
        or the host is not Windows.
    """
    if sys.platform != "win32":
        return None

    import winreg  # pylint: disable=import-outside-toplevel

    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, subkey) as key:
            value, _ = winreg.QueryValueEx(key, "")
    except OSError:
        log.log(TRACE_LEVEL, "Registry key HKLM\\%s not found", subkey)
        return None
    return str(value) if value else None


def find_outlook(config: OutlookConfig | None = None) -> str | None:
    """Resolve the path of OUTLOOK.EXE.

    Args:
        config: Discovery settings, defaults when None.

    Returns:
        Path to the executable, or None when it cannot be located.
    """
    config = config or OutlookConfig()

    if config.executable:
        log.debug("Using configured Outlook executable: %s", config.executable)
        return config.executable

    executable = registry_lookup(config.registry_subkey)
    if executable:
        log.debug("Outlook executable from registry: %s", executable)
        return executable

    if config.search_path:
        for candidate in PATH_CANDIDATES:
            executable = shutil.which(candidate)
            if executable:
                log.debug("Outlook executable from PATH: %s", executable)
                return executable

    return None


def require_outlook(config: OutlookConfig | None = None) -> str:
    """Resolve OUTLOOK.EXE or raise.

    Args:
        config: Discovery settings, defaults when None.

    Returns:
        Path to the executable.

    Raises:
        ExecutableNotFoundError: If no location yields an executable.
    """
    config = config or OutlookConfig()
    executable = find_outlook(config)
    if executable is None:
        searched = [f"HKLM\\{config.registry_subkey}"]
        if config.search_path:
            searched.append("PATH")
        raise ExecutableNotFoundError(tuple(searched))
    return executable


__all__ = [
    "PATH_CANDIDATES",
    "find_outlook",
    "registry_lookup",
    "require_outlook",
]
