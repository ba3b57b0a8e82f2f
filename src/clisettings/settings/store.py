"""Persistence of the settings mapping as a single JSON file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv
from pydantic import TypeAdapter, ValidationError

from clisettings.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH
from clisettings.errors import ConfigReadError, ConfigWriteError
from clisettings.utils.file import atomic_write_text, ensure_directory_exists

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)

Settings = dict[str, str]

_SETTINGS_ADAPTER: Final = TypeAdapter(Settings)


def default_config_path() -> Path:
    """Return the settings file location.

    ``CLISETTINGS_CONFIG`` takes precedence over the per-user default.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


class SettingsStore:
    """Reads and writes the whole settings mapping.

    There is no cached state: every ``read`` goes back to disk and every
    ``write`` replaces the file with the full mapping it is given. A missing
    or blank file reads as an empty mapping. Content that is not a JSON
    object of strings raises ``ConfigReadError`` rather than being discarded,
    so a damaged file is never silently overwritten by the next ``set``.
    """

    def __init__(self, path: Path, create_dirs: bool = False) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON settings file
            create_dirs: Create missing parent directories on write
        """
        self.path = path
        self.create_dirs = create_dirs

    @classmethod
    def default(cls) -> SettingsStore:
        """Store at the well-known per-user location."""
        return cls(default_config_path(), create_dirs=True)

    def read(self) -> Settings:
        """Load the persisted mapping.

        Returns:
            Settings mapping, empty if the file does not exist or is blank

        Raises:
            ConfigReadError: If the file cannot be read, is not UTF-8 or is not a JSON
                object mapping strings to strings
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No config file at %s", self.path)
            return {}
        except OSError as exc:
            raise ConfigReadError(self.path, exc.strerror or str(exc), exc) from exc
        except UnicodeDecodeError as exc:
            raise ConfigReadError(self.path, "not valid UTF-8", exc) from exc

        if not raw.strip():
            return {}

        try:
            return _SETTINGS_ADAPTER.validate_json(raw, strict=True)
        except ValidationError as err:
            raise ConfigReadError(
                self.path, "expected a JSON object of string values", err
            ) from err

    def write(self, settings: Settings) -> None:
        """Persist the entire mapping, replacing any previous content.

        Args:
            settings: Complete settings mapping

        Raises:
            ConfigWriteError: If the file cannot be written or a value cannot be encoded
        """
        text = json.dumps(settings, indent=2, ensure_ascii=False) + "\n"
        try:
            if self.create_dirs:
                ensure_directory_exists(self.path.parent)
            atomic_write_text(self.path, text)
        except OSError as exc:
            raise ConfigWriteError(self.path, exc.strerror or str(exc), exc) from exc
        except UnicodeEncodeError as exc:
            raise ConfigWriteError(self.path, "value is not valid UTF-8", exc) from exc
        logger.debug("Saved %d setting(s) to %s", len(settings), self.path)
