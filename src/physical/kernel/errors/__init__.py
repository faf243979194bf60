"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        └── SerializationError
"""

from physical.kernel.errors.application import ApplicationError
from physical.kernel.errors.base import BaseError
from physical.kernel.errors.infrastructure import InfrastructureError, SerializationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "SerializationError",
]
