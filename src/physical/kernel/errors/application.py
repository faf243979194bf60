"""Application errors — misuse of the library by its caller."""

from __future__ import annotations

from physical.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The library was wired or configured incorrectly."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
