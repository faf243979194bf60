"""Config validation errors.

Every error names the offending setting and, when known, the settings
class it belongs to, so a failed startup log reads e.g.
``{"code": "invalid_setting_value", "detail": {"setting": "HEALTHCHECK_PATH",
"settings_class": "HealthCheckSettings", ...}}``.
"""
from __future__ import annotations

from typing import Any

from physical.kernel.errors import ApplicationError


def _setting_detail(setting_name: str, settings_class: str | None) -> dict[str, Any]:
    detail: dict[str, Any] = {"setting": setting_name}
    if settings_class is not None:
        detail["settings_class"] = settings_class
    return detail


class ConfigError(ApplicationError):
    """Settings could not be loaded or do not describe a usable endpoint."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, settings_class: str | None = None) -> None:
        super().__init__(
            f"{setting_name} is not set",
            detail=_setting_detail(setting_name, settings_class),
        )
        self.setting_name = setting_name
        self.settings_class = settings_class


class InvalidSettingValueError(ConfigError):
    """A value was supplied but the health endpoint cannot use it."""

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        settings_class: str | None = None,
    ) -> None:
        detail = _setting_detail(setting_name, settings_class)
        detail.update(value=repr(value), reason=reason)
        super().__init__(f"{setting_name}={value!r} {reason}", detail=detail)
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.settings_class = settings_class


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
