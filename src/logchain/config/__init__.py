"""Config – 12-factor settings and loaders."""

from logchain.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggingSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from logchain.config.validation import (
    ConfigError,
    InvalidSettingValueError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
