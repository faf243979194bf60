from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Union

from physical.observability.health.response import HealthCheckResponse

__all__ = ["FunctionHealthCheck", "HealthCheck", "Probe", "as_health_check"]


class HealthCheck(ABC):
    """A probe: anything that can report its own health on demand."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def check(self) -> HealthCheckResponse: ...

    def __call__(self) -> HealthCheckResponse:
        return self.check()


class FunctionHealthCheck(HealthCheck):
    """Health check backed by a zero-argument callable."""

    def __init__(self, fn: Callable[[], HealthCheckResponse]) -> None:
        self._fn = fn

    @property
    def name(self) -> str:
        return getattr(self._fn, "__name__", repr(self._fn))

    @property
    def fn(self) -> Callable[[], HealthCheckResponse]:
        return self._fn

    def check(self) -> HealthCheckResponse:
        return self._fn()


Probe = Union[HealthCheck, Callable[[], HealthCheckResponse]]


def as_health_check(probe: Any) -> HealthCheck:
    if isinstance(probe, HealthCheck):
        return probe
    if callable(probe):
        return FunctionHealthCheck(probe)
    raise TypeError(f"health check must be callable, got {type(probe).__name__}")
