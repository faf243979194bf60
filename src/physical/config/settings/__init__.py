"""Config settings – 12-factor env-based configuration."""
from physical.config.settings.base import (
    HealthCheckSettings,
    Settings,
    require_route_path,
    resolve_log_level,
)
from physical.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "EnvSettingsLoader",
    "HealthCheckSettings",
    "Settings",
    "SettingsLoader",
    "require_route_path",
    "resolve_log_level",
]
