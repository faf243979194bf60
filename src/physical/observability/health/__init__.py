"""Observability – Health Checks."""
from physical.observability.health.check import (
    FunctionHealthCheck,
    HealthCheck,
    Probe,
    as_health_check,
)
from physical.observability.health.registry import (
    CollectedResponse,
    HealthRegistry,
    add_check,
    default_registry,
    initialize,
)
from physical.observability.health.response import (
    SEVERITY_CRITICAL,
    SEVERITY_DOWN,
    SEVERITY_WARNING,
    TYPE_EXTERNAL_DEPENDENCY,
    TYPE_INFRASTRUCTURE,
    TYPE_INTERNAL_DEPENDENCY,
    TYPE_INTERNET_CONNECTIVITY,
    TYPE_METRICS,
    TYPE_SELF,
    CheckType,
    Dependency,
    HealthCheckResponse,
    Severity,
)
from physical.observability.health.serialization import (
    Serializer,
    json_serializer,
    serialize_collected,
)

__all__ = [
    "SEVERITY_CRITICAL",
    "SEVERITY_DOWN",
    "SEVERITY_WARNING",
    "TYPE_EXTERNAL_DEPENDENCY",
    "TYPE_INFRASTRUCTURE",
    "TYPE_INTERNAL_DEPENDENCY",
    "TYPE_INTERNET_CONNECTIVITY",
    "TYPE_METRICS",
    "TYPE_SELF",
    "CheckType",
    "CollectedResponse",
    "Dependency",
    "FunctionHealthCheck",
    "HealthCheck",
    "HealthCheckResponse",
    "HealthRegistry",
    "Probe",
    "Serializer",
    "Severity",
    "add_check",
    "as_health_check",
    "default_registry",
    "initialize",
    "json_serializer",
    "serialize_collected",
]
