"""Config settings – environment-based configuration."""
from metric_pusher.config.settings.base import Settings
from metric_pusher.config.settings.exporter import ExporterSettings
from metric_pusher.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ExporterSettings", "Settings", "SettingsLoader"]
