"""Infrastructure errors — failures at the I/O and wire-format boundary."""

from __future__ import annotations

from typing import Any

from physical.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Failure outside the health model itself (encoding, transport)."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """A health payload could not be encoded into a response body."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if payload_type is not None:
            detail["payload_type"] = payload_type
        super().__init__(message, detail=detail, **kwargs)
        self.payload_type = payload_type


__all__ = ["InfrastructureError", "SerializationError"]
