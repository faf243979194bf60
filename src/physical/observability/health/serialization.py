"""Health payload encoding.

A serializer turns the plain-dict form of a :class:`CollectedResponse` into
response bytes. It signals failure by raising :class:`SerializationError`;
the endpoint then answers 500 with whatever body could be produced.
"""
from __future__ import annotations

import json
from typing import Any, Callable

from physical.kernel.errors import SerializationError
from physical.observability.health.registry import CollectedResponse

__all__ = ["Serializer", "json_serializer", "serialize_collected"]

Serializer = Callable[[dict[str, Any]], bytes]


def json_serializer(payload: dict[str, Any]) -> bytes:
    """Compact UTF-8 JSON. NaN and infinity are rejected, not emitted."""
    try:
        return json.dumps(
            payload, ensure_ascii=False, allow_nan=False, separators=(",", ":")
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Could not encode health payload: {exc}",
            payload_type=type(payload).__name__,
            cause=exc,
        ) from exc


def serialize_collected(
    collected: CollectedResponse,
    serializer: Serializer = json_serializer,
) -> tuple[bytes, SerializationError | None]:
    """Encode *collected*; returns ``(body, error)``.

    On failure the body is empty and the error describes why.
    """
    try:
        return serializer(collected.to_dict()), None
    except SerializationError as exc:
        return b"", exc
    except (TypeError, ValueError) as exc:
        return b"", SerializationError(
            f"Could not encode health payload: {exc}",
            payload_type=type(collected).__name__,
            cause=exc,
        )
