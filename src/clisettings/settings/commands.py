"""The ``config list|set|delete`` operations."""

from __future__ import annotations

import logging
from typing import Final

from clisettings.output.protocols import Output
from clisettings.settings.store import Settings, SettingsStore
from clisettings.settings.validators import SettingValidator

logger: Final = logging.getLogger(__name__)

TABLE_HEADERS: Final = ("Setting", "Value")


class SettingsCommands:
    """List, set and delete persisted settings.

    Each operation reads the current mapping from the store, changes it in
    memory and writes the whole mapping back. Validation runs before any
    write, so a rejected value never touches the file. Errors from the store
    and validators propagate to the caller.
    """

    def __init__(
        self,
        store: SettingsStore,
        output: Output,
        validator: SettingValidator | None = None,
    ) -> None:
        """Initialize the command set.

        Args:
            store: Settings persistence
            output: Sink for user-facing messages
            validator: Validation registry (default: endpoint validation only)
        """
        self.store = store
        self.output = output
        self.validator = validator or SettingValidator()

    def list(self) -> Settings:
        """Show every stored setting.

        Returns:
            The settings mapping that was shown
        """
        self.output.info("Getting config settings")
        settings = self.store.read()

        if not settings:
            if self.output.context.json_output:
                self.output.structured({})
            else:
                self.output.info("No config settings found")
            return settings

        self.output.table(settings, TABLE_HEADERS)
        return settings

    def delete(self, name: str) -> bool:
        """Remove a setting.

        Args:
            name: Setting name

        Returns:
            True if the setting existed and was removed
        """
        settings = self.store.read()
        if name not in settings:
            self.output.warn(f'Setting "{name}" does not exist')
            return False

        self.output.info(f'Deleting "{name}"')
        del settings[name]
        self.store.write(settings)
        self.output.info("Changes saved")
        return True

    def set(self, name: str, value: str) -> str:
        """Store a setting, validating it first when a rule is registered.

        Args:
            name: Setting name
            value: Raw value

        Returns:
            The value that was stored

        Raises:
            InvalidSettingValueError: If validation fails; nothing is written
        """
        settings = self.store.read()
        value = self.validator.validate(name, value)

        self.output.info(f'Setting "{name}" to value "{value}"')
        settings[name] = value
        self.store.write(settings)
        self.output.info("Changes saved")
        logger.debug("Setting %s updated in %s", name, self.store.path)
        return value
