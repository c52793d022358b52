"""Config settings – 12-factor env-based configuration."""
from mp_catalog.config.settings.base import Settings
from mp_catalog.config.settings.export import ExportSettings
from mp_catalog.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ExportSettings", "Settings", "SettingsLoader"]
