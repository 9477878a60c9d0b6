"""Config validation errors."""
from __future__ import annotations

from logchain.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Logging configuration could not be read or wired."""

    code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``LOGCHAIN_*`` value, override or route entry was rejected.

    Raised while settings are built or while routes are wired; never skipped
    by :class:`~logchain.config.settings.factory.SettingsFactory`.
    """

    code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value)},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
