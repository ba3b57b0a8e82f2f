"""Validation and normalisation rules for individual settings."""

from __future__ import annotations

import logging
import urllib.parse
from collections.abc import Callable, Mapping
from typing import Final

from pydantic import HttpUrl, TypeAdapter, ValidationError

from clisettings.constants import ENDPOINT_SETTING
from clisettings.errors import InvalidSettingValueError

logger: Final = logging.getLogger(__name__)

ValidatorFunc = Callable[[str], str]

_URL_ADAPTER: Final = TypeAdapter(HttpUrl)


def validate_endpoint(value: str) -> str:
    """Check that ``value`` is an http(s) URL with a host.

    The normalised form has a lower-case scheme and host, no default port
    and no trailing slash on the path, e.g. ``HTTPS://Example.com:443/api/``
    becomes ``https://example.com/api``. Query and fragment are left as-is.

    Args:
        value: Raw value supplied by the user

    Returns:
        Normalised URL

    Raises:
        InvalidSettingValueError: If the value is not a valid http(s) URL
    """
    try:
        url = _URL_ADAPTER.validate_python(value.strip())
    except ValidationError as err:
        reason = err.errors()[0]["msg"]
        raise InvalidSettingValueError(ENDPOINT_SETTING, value, reason) from err
    parts = urllib.parse.urlsplit(str(url))
    return urllib.parse.urlunsplit(parts._replace(path=parts.path.rstrip("/")))


DEFAULT_VALIDATORS: Final[Mapping[str, ValidatorFunc]] = {
    ENDPOINT_SETTING: validate_endpoint,
}


class SettingValidator:
    """Registry mapping setting names to validator functions.

    A validator takes the raw string and returns the value to store, or
    raises ``InvalidSettingValueError``. Names without a validator are
    stored exactly as given.

    Examples:
        validator = SettingValidator()
        validator.validate("endpoint", "https://Example.com/")  # "https://example.com"
        validator.validate("region", "west")  # "west"
    """

    def __init__(self, validators: Mapping[str, ValidatorFunc] | None = None) -> None:
        self._validators: dict[str, ValidatorFunc] = dict(
            DEFAULT_VALIDATORS if validators is None else validators
        )

    def register(self, name: str, func: ValidatorFunc) -> None:
        """Add or replace the validator for ``name``."""
        self._validators[name] = func

    def is_registered(self, name: str) -> bool:
        return name in self._validators

    def validate(self, name: str, value: str) -> str:
        """Run the validator registered for ``name``, if any.

        Args:
            name: Setting name
            value: Raw value

        Returns:
            Normalised value, or ``value`` unchanged for unregistered names

        Raises:
            InvalidSettingValueError: If the registered validator rejects it
        """
        func = self._validators.get(name)
        if func is None:
            return value
        normalized = func(value)
        if normalized != value:
            logger.debug("Normalised %s: %r -> %r", name, value, normalized)
        return normalized
