"""Observability – structured logging helpers."""
from physical.observability.logging.factory import JsonLoggerFactory
from physical.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
]
