"""Config settings – Settings base class and the health endpoint settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from physical.config.validation.errors import InvalidSettingValueError


def require_route_path(path: str, *, setting_name: str = "path", settings_class: str | None = None) -> str:
    """Return *path* unchanged, or raise when no request could ever reach it."""
    if not path.startswith("/"):
        raise InvalidSettingValueError(
            setting_name, path, "must start with '/'", settings_class=settings_class
        )
    return path


def resolve_log_level(level: int | str, *, setting_name: str = "log_level", settings_class: str | None = None) -> int:
    """Map a level name (any case) or number onto a stdlib logging level."""
    if isinstance(level, int):
        return level
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise InvalidSettingValueError(
            setting_name, level, "is not a logging level", settings_class=settings_class
        )
    return number


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _env_key(self, field_name: str) -> str:
        return f"{self._prefix}_{field_name}".upper().lstrip("_")


@dataclasses.dataclass
class HealthCheckSettings(Settings):
    """Where and how the health endpoint is served.

    Read from ``HEALTHCHECK_PATH``, ``HEALTHCHECK_ROUTE_NAME``,
    ``HEALTHCHECK_LOG_LEVEL`` and ``HEALTHCHECK_JSON_LOGS``.
    """

    _prefix: ClassVar[str] = "HEALTHCHECK"

    path: str = "/healthcheck"
    route_name: str = "HealthCheck"
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        owner = type(self).__name__
        require_route_path(self.path, setting_name=self._env_key("path"), settings_class=owner)
        if not self.route_name:
            raise InvalidSettingValueError(
                self._env_key("route_name"), self.route_name, "must not be empty", settings_class=owner
            )
        resolve_log_level(self.log_level, setting_name=self._env_key("log_level"), settings_class=owner)
        self.log_level = self.log_level.upper()

    @property
    def log_level_number(self) -> int:
        return resolve_log_level(self.log_level)


__all__ = ["HealthCheckSettings", "Settings", "require_route_path", "resolve_log_level"]
