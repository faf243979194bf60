"""Root error class for the physical error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error raised by ``physical``.

    ``code`` is a stable slug for log events. ``detail`` holds the
    structured context that :meth:`to_dict` hands to structlog, e.g. the
    setting or payload that was rejected.
    """

    default_code: str = "error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = dict(self.detail)
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["BaseError"]
