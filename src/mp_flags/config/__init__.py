"""Config – 12-factor settings and loaders for the flag engine."""

from mp_flags.config.loaders import EnvSettingsLoader, SettingsLoader
from mp_flags.config.settings import FlagSettings, Settings
from mp_flags.config.validation import (
    ConfigError,
    InvalidEnvironmentError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UnparseableSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FlagSettings",
    "InvalidEnvironmentError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "UnparseableSettingError",
]
