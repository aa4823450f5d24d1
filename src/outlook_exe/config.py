"""Configuration for locating and invoking Outlook.

Settings can be built programmatically or read from a YAML file with
an ``outlook:`` section::

    outlook:
      executable: "C:/Program Files/Microsoft Office/root/Office16/OUTLOOK.EXE"
      message_class: ipm.note
      search_path: false
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from outlook_exe.exceptions import OutlookConfigError

log = logging.getLogger(__name__)

#: Registry key under HKEY_LOCAL_MACHINE registering OUTLOOK.EXE.
DEFAULT_REGISTRY_SUBKEY = "SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\App Paths\\OUTLOOK.EXE"

#: Outlook form opened by ``/c``: a new mail message.
DEFAULT_MESSAGE_CLASS = "ipm.note"

#: Name of the section read from YAML config files.
CONFIG_SECTION = "outlook"


@dataclass(frozen=True, slots=True)
class OutlookConfig:
    """Settings controlling executable discovery and the compose form.

    Attributes:
        executable: Explicit path to OUTLOOK.EXE. Skips discovery when set.
        registry_subkey: HKLM subkey whose default value is the executable path.
        search_path: Fall back to a ``PATH`` lookup when the registry has no entry.
        message_class: Outlook form passed to the ``/c`` switch.

    Examples:
        >>> config = OutlookConfig(executable="C:/Office/OUTLOOK.EXE")
        >>> config.message_class
        'ipm.note'
    """

    executable: str | None = None
    registry_subkey: str = DEFAULT_REGISTRY_SUBKEY
    search_path: bool = True
    message_class: str = DEFAULT_MESSAGE_CLASS

    def __post_init__(self) -> None:
        """Validate configuration values.

        Raises:
            OutlookConfigError: If any configuration value is invalid.
        """
        if self.executable is not None and not str(self.executable).strip():
            raise OutlookConfigError("executable cannot be empty")
        if not self.registry_subkey:
            raise OutlookConfigError("registry_subkey cannot be empty")
        if not self.message_class or not self.message_class.strip():
            raise OutlookConfigError("message_class cannot be empty")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OutlookConfig:
        """Build a config from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of field names to values.

        Returns:
            Validated OutlookConfig.

        Raises:
            OutlookConfigError: If a key is unknown or a value has the wrong type.
        """
        allowed = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise OutlookConfigError(f"Unknown outlook config keys: {', '.join(unknown)}")

        executable = data.get("executable")
        if executable is not None and not isinstance(executable, str):
            raise OutlookConfigError(f"executable must be a string, got {type(executable).__name__}")
        search_path = data.get("search_path", True)
        if not isinstance(search_path, bool):
            raise OutlookConfigError(f"search_path must be a boolean, got {search_path!r}")
        for key in ("registry_subkey", "message_class"):
            if key in data and not isinstance(data[key], str):
                raise OutlookConfigError(f"{key} must be a string, got {type(data[key]).__name__}")

        return cls(**data)


def load_config(path: str | Path) -> OutlookConfig:
    """Load an :class:`OutlookConfig` from a YAML file.

    The ``outlook:`` section is used when present, otherwise the
    top-level mapping. An empty file yields the defaults.

    Args:
        path: Path to the YAML file.

    Returns:
        Validated OutlookConfig.

    Raises:
        OutlookConfigError: If the file cannot be read, is not valid YAML,
            or contains invalid settings.
    """
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OutlookConfigError(f"Cannot read config file {config_path}: {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise OutlookConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise OutlookConfigError(f"Config file {config_path} must contain a mapping")

    section = data.get(CONFIG_SECTION, data)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise OutlookConfigError(f"'{CONFIG_SECTION}' section in {config_path} must be a mapping")

    log.debug("Loaded outlook config from %s: %s", config_path, section)
    return OutlookConfig.from_dict(section)


__all__ = [
    "CONFIG_SECTION",
    "DEFAULT_MESSAGE_CLASS",
    "DEFAULT_REGISTRY_SUBKEY",
    "OutlookConfig",
    "load_config",
]
