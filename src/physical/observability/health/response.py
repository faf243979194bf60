"""Health check data model — what a single probe reports.

Wire format of one entry::

    {
        "actionable": true,
        "healthy": false,
        "name": "Failing Check",
        "type": "SELF",
        "severity": "CRITICAL",
        "message": "...",
        "dependent_on": {"service_name": "Upstream"},
        "additional_info": {"foo": "bar"},
        "link": "https://..."
    }

Optional keys are left out entirely when unset or empty.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

__all__ = [
    "CheckType",
    "Dependency",
    "HealthCheckResponse",
    "SEVERITY_CRITICAL",
    "SEVERITY_DOWN",
    "SEVERITY_WARNING",
    "Severity",
    "TYPE_EXTERNAL_DEPENDENCY",
    "TYPE_INFRASTRUCTURE",
    "TYPE_INTERNAL_DEPENDENCY",
    "TYPE_INTERNET_CONNECTIVITY",
    "TYPE_METRICS",
    "TYPE_SELF",
]

E = TypeVar("E", bound=Enum)


class CheckType(str, Enum):
    SELF = "SELF"
    METRICS = "METRICS"
    INFRASTRUCTURE = "INFRASTRUCTURE"
    INTERNAL_DEPENDENCY = "INTERNAL_DEPENDENCY"
    EXTERNAL_DEPENDENCY = "EXTERNAL_DEPENDENCY"
    INTERNET_CONNECTIVITY = "INTERNET_CONNECTIVITY"


class Severity(str, Enum):
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    DOWN = "DOWN"


TYPE_SELF = CheckType.SELF
TYPE_METRICS = CheckType.METRICS
TYPE_INFRASTRUCTURE = CheckType.INFRASTRUCTURE
TYPE_INTERNAL_DEPENDENCY = CheckType.INTERNAL_DEPENDENCY
TYPE_EXTERNAL_DEPENDENCY = CheckType.EXTERNAL_DEPENDENCY
TYPE_INTERNET_CONNECTIVITY = CheckType.INTERNET_CONNECTIVITY

SEVERITY_CRITICAL = Severity.CRITICAL
SEVERITY_WARNING = Severity.WARNING
SEVERITY_DOWN = Severity.DOWN


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _parse_enum(enum_cls: type[E], value: Any) -> E | Any:
    """Map a wire string back onto *enum_cls*, keeping unknown strings as-is."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass
class Dependency:
    """Upstream service a check's health is contingent on."""

    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"service_name": self.name} if self.name else {}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Dependency:
        return cls(name=data.get("service_name"))


@dataclass
class HealthCheckResponse:
    """Result of invoking one probe."""

    actionable: bool
    healthy: bool
    name: str
    type: CheckType | str
    severity: Severity | str | None = None
    message: str | None = None
    dependency: Dependency | None = None
    additional_info: dict[str, Any] | None = None
    link: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "actionable": self.actionable,
            "healthy": self.healthy,
            "name": self.name,
            "type": _enum_value(self.type),
        }
        if self.severity:
            payload["severity"] = _enum_value(self.severity)
        if self.message:
            payload["message"] = self.message
        if self.dependency is not None and self.dependency.name:
            payload["dependent_on"] = self.dependency.to_dict()
        if self.additional_info:
            payload["additional_info"] = dict(self.additional_info)
        if self.link:
            payload["link"] = self.link
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HealthCheckResponse:
        dependency = data.get("dependent_on")
        return cls(
            actionable=bool(data.get("actionable", False)),
            healthy=bool(data.get("healthy", False)),
            name=data.get("name", ""),
            type=_parse_enum(CheckType, data.get("type", "")),
            severity=_parse_enum(Severity, data.get("severity")),
            message=data.get("message"),
            dependency=Dependency.from_dict(dependency) if dependency else None,
            additional_info=data.get("additional_info"),
            link=data.get("link"),
        )
