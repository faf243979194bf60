"""Config – 12-factor settings, loaders, and validation errors."""

from physical.config.settings import (
    EnvSettingsLoader,
    HealthCheckSettings,
    Settings,
    SettingsLoader,
    require_route_path,
    resolve_log_level,
)
from physical.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "HealthCheckSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "require_route_path",
    "resolve_log_level",
]
