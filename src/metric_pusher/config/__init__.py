"""Config – exporter settings, loaders and validation errors."""

from metric_pusher.config.settings import (
    EnvSettingsLoader,
    ExporterSettings,
    Settings,
    SettingsLoader,
)
from metric_pusher.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "ExporterSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
