"""Settings management.

This package provides:
- SettingsStore: reads and writes the persisted settings file
- SettingValidator: per-setting validation and normalisation rules
- SettingsCommands: list/set/delete operations behind ``config``
- apply_global_settings: derives the OutputContext at process start
"""

from clisettings.settings.commands import SettingsCommands
from clisettings.settings.startup import apply_global_settings
from clisettings.settings.store import Settings, SettingsStore, default_config_path
from clisettings.settings.validators import (
    DEFAULT_VALIDATORS,
    SettingValidator,
    validate_endpoint,
)

__all__ = [
    "DEFAULT_VALIDATORS",
    "SettingValidator",
    "Settings",
    "SettingsCommands",
    "SettingsStore",
    "apply_global_settings",
    "default_config_path",
    "validate_endpoint",
]
