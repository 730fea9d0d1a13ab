"""Config settings – 12-factor env-based configuration."""
from loggo.config.settings.base import Settings
from loggo.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from loggo.config.settings.logger import LoggerSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LoggerSettings", "Settings", "SettingsLoader"]
