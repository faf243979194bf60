"""FastAPI adapter – health check endpoint."""
from physical.adapters.fastapi.routers import FastAPIHealthApp, create_health_check

__all__ = ["FastAPIHealthApp", "create_health_check"]
