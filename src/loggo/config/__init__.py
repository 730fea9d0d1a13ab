"""Config – 12-factor settings and loaders."""

from loggo.config.settings import EnvSettingsLoader, LoggerSettings, Settings, SettingsLoader
from loggo.config.validation import ConfigError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "LoggerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
