"""
physical – HTTP health check aggregation.

Import path convention::

    from physical.observability.health import HealthCheckResponse, add_check
    from physical.adapters.fastapi import create_health_check
    from physical.config import HealthCheckSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
