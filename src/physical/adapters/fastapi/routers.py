"""FastAPI adapter – health check endpoint and application factory."""
from __future__ import annotations

from typing import Any

from physical.config.settings import EnvSettingsLoader, HealthCheckSettings, require_route_path
from physical.observability.health.registry import HealthRegistry, default_registry
from physical.observability.health.serialization import (
    Serializer,
    json_serializer,
    serialize_collected,
)
from physical.observability.logging import JsonLoggerFactory, get_logger

logger = get_logger(__name__)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'physical[fastapi]' to use the FastAPI adapter"
        ) from exc


def create_health_check(
    router: Any,
    path: str | None = None,
    *,
    registry: HealthRegistry | None = None,
    serializer: Serializer | None = None,
    settings: HealthCheckSettings | None = None,
    reset: bool = True,
) -> HealthRegistry:
    """Bind ``GET path`` on *router* to a handler that runs every probe.

    Parameters
    ----------
    router:
        A ``FastAPI`` application or ``APIRouter``.
    path:
        Route path; defaults to ``settings.path`` (``/healthcheck``). Must start
        with ``/``, else :class:`InvalidSettingValueError` is raised.
    registry:
        Registry whose probes the endpoint runs. Defaults to the
        process-wide :data:`default_registry`.
    serializer:
        Body encoder; defaults to compact JSON.
    settings:
        Source of the default path and of the route name (``HealthCheck``).
    reset:
        Initialize *registry* after binding, dropping probes registered
        earlier. Pass ``False`` to keep them.

    Responds 200 when every probe reported healthy and the body encoded,
    500 otherwise. The body is ``{"healthy": [...], "unhealthy": [...]}``,
    or empty when encoding failed.
    """
    _require_fastapi()
    from fastapi import Response  # type: ignore[import-untyped]

    settings = settings or HealthCheckSettings()
    path = require_route_path(path or settings.path)
    if registry is None:
        registry = default_registry
    encode = serializer or json_serializer

    def health_check():  # noqa: ANN202
        collected = registry.perform_checks()
        body, error = serialize_collected(collected, encode)

        if error is not None:
            logger.error("health_check.serialization_failed", path=path, error=error.to_dict())
        elif collected.unhealthy:
            logger.warning(
                "health_check.unhealthy",
                path=path,
                checks=[r.name for r in collected.unhealthy],
            )

        status_code = 200 if error is None and collected.is_healthy else 500
        logger.debug(
            "health_check.completed",
            path=path,
            status=status_code,
            healthy=len(collected.healthy),
            unhealthy=len(collected.unhealthy),
        )
        return Response(content=body, status_code=status_code, media_type="application/json")

    router.add_api_route(
        path,
        health_check,
        methods=["GET"],
        name=settings.route_name,
        response_class=Response,
    )
    if reset:
        registry.initialize()
    logger.info("health_check.endpoint_bound", path=path, route=settings.route_name)
    return registry


def FastAPIHealthApp(
    settings: HealthCheckSettings | None = None,
    registry: HealthRegistry | None = None,
    configure_logging: bool = True,
) -> Any:
    """Return a ``FastAPI`` application serving only the health endpoint.

    Settings default to the ``HEALTHCHECK_*`` environment variables. The
    registry is reset when the endpoint is bound, so register probes after
    building the app.
    """
    _require_fastapi()
    from fastapi import FastAPI  # type: ignore[import-untyped]

    settings = settings or EnvSettingsLoader().load(HealthCheckSettings)
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level_number, json=settings.json_logs)

    app = FastAPI(title="physical")
    create_health_check(app, settings.path, registry=registry, settings=settings)
    return app


__all__ = ["FastAPIHealthApp", "create_health_check"]
