"""Apply persisted switches to output behaviour at process start."""

from __future__ import annotations

import logging
from typing import Final

from clisettings.constants import LABELS_SETTING, LOGO_SETTING, OFF
from clisettings.errors import ClisettingsError
from clisettings.output.context import OutputContext
from clisettings.settings.store import SettingsStore

logger: Final = logging.getLogger(__name__)


def apply_global_settings(store: SettingsStore, json_output: bool = False) -> OutputContext:
    """Derive the OutputContext from the stored settings.

    ``labels=off`` makes output terse and ``logo=off`` hides the banner; any
    other value, or no value, keeps the defaults. Never raises: if the
    settings cannot be read the default context is returned.

    Args:
        store: Settings persistence
        json_output: Whether structured output was requested on the command line

    Returns:
        OutputContext for this process
    """
    try:
        settings = store.read()
    except (ClisettingsError, OSError, ValueError) as exc:
        logger.debug("Ignoring stored settings at startup: %s", exc)
        return OutputContext(json_output=json_output)

    return OutputContext(
        terse=settings.get(LABELS_SETTING) == OFF,
        logo_enabled=settings.get(LOGO_SETTING) != OFF,
        json_output=json_output,
    )
