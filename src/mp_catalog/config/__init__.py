"""Config – 12-factor settings and loaders."""

from mp_catalog.config.settings import EnvSettingsLoader, ExportSettings, Settings, SettingsLoader
from mp_catalog.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigurationError",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
