"""Config settings – 12-factor env-based configuration."""
from logchain.config.settings.base import Settings
from logchain.config.settings.factory import SettingsFactory
from logchain.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from logchain.config.settings.logging_settings import LoggingSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggingSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
