"""Health registry — ordered probes and the per-request aggregate."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from physical.observability.health.check import HealthCheck, Probe, as_health_check
from physical.observability.health.response import HealthCheckResponse
from physical.observability.logging import get_logger

__all__ = [
    "CollectedResponse",
    "HealthRegistry",
    "add_check",
    "default_registry",
    "initialize",
]

logger = get_logger(__name__)


@dataclass
class CollectedResponse:
    healthy: list[HealthCheckResponse] = field(default_factory=list)
    unhealthy: list[HealthCheckResponse] = field(default_factory=list)

    @property
    def is_healthy(self) -> bool:
        return not self.unhealthy

    def add(self, response: HealthCheckResponse) -> None:
        if response.healthy:
            self.healthy.append(response)
        else:
            self.unhealthy.append(response)

    def to_dict(self) -> dict[str, Any]:
        return {
            "healthy": [r.to_dict() for r in self.healthy],
            "unhealthy": [r.to_dict() for r in self.unhealthy],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CollectedResponse:
        return cls(
            healthy=[HealthCheckResponse.from_dict(r) for r in data.get("healthy") or []],
            unhealthy=[HealthCheckResponse.from_dict(r) for r in data.get("unhealthy") or []],
        )


class HealthRegistry:
    """Runs registered health checks and partitions their results.

    Probes run sequentially, in registration order, on the calling thread.
    There is no timeout and no isolation: a probe that hangs hangs the
    caller, and an exception raised by a probe propagates out of
    :meth:`perform_checks`.

    The probe list is not locked. Register everything before the endpoint
    starts serving traffic.
    """

    def __init__(self) -> None:
        self._checks: list[HealthCheck] = []

    def initialize(self) -> None:
        """Drop every registered probe."""
        self._checks = []
        logger.debug("health_registry.initialized")

    def add_check(self, probe: Probe) -> Probe:
        """Append *probe*; returns it unchanged so this works as a decorator."""
        check = as_health_check(probe)
        self._checks.append(check)
        logger.debug("health_check.registered", check=check.name, position=len(self._checks))
        return probe

    @property
    def checks(self) -> tuple[HealthCheck, ...]:
        return tuple(self._checks)

    def __len__(self) -> int:
        return len(self._checks)

    def perform_checks(self) -> CollectedResponse:
        collected = CollectedResponse()
        for check in tuple(self._checks):
            collected.add(check.check())
        return collected


default_registry = HealthRegistry()


def initialize() -> None:
    """Reset the process-wide registry."""
    default_registry.initialize()


def add_check(probe: Probe) -> Probe:
    """Register *probe* on the process-wide registry."""
    return default_registry.add_check(probe)
