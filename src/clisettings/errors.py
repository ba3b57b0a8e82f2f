"""Exception classes for settings persistence and validation.

All errors raised by the settings layer derive from ``ClisettingsError`` so
the CLI can report them uniformly and exit with a non-zero status.
"""

from __future__ import annotations

from pathlib import Path


class ClisettingsError(Exception):
    """Base class for all settings errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


class ConfigReadError(ClisettingsError):
    """Raised when the settings file exists but cannot be read or parsed."""

    def __init__(
        self, path: Path, message: str, original_error: Exception | None = None
    ) -> None:
        """Initialize with read failure details.

        Args:
            path: Location of the settings file
            message: Description of the failure
            original_error: The original exception that was caught
        """
        super().__init__(f"Unable to read config file {path}: {message}")
        self.path = path
        self.original_error = original_error


class ConfigWriteError(ClisettingsError):
    """Raised when the settings file cannot be written."""

    def __init__(
        self, path: Path, message: str, original_error: Exception | None = None
    ) -> None:
        """Initialize with write failure details.

        Args:
            path: Location of the settings file
            message: Description of the failure
            original_error: The original exception that was caught
        """
        super().__init__(f"Unable to write config file {path}: {message}")
        self.path = path
        self.original_error = original_error


class InvalidSettingValueError(ClisettingsError):
    """Raised when a registered validator rejects a setting value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f'Invalid value "{value}" for setting "{name}": {reason}')
        self.name = name
        self.value = value
        self.reason = reason
