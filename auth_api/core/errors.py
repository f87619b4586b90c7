"""Shared error primitives and the public error envelope."""

from __future__ import annotations

from enum import StrEnum
from http import HTTPStatus


class ErrorCode(StrEnum):
    """Canonical error codes surfaced by the login flow."""

    INVALID_TOKEN_EXPIRY = "INVALID_TOKEN_EXPIRY"  # noqa: S105
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ApplicationError(Exception):
    """Domain error that the host layer renders in the public API."""

    def __init__(
        self,
        code: ErrorCode | str,
        message: str,
        *,
        status_code: int = HTTPStatus.BAD_REQUEST,
        details: object | None = None,
    ) -> None:
        super().__init__(message)
        self.code = str(code)
        self.message = message
        self.status_code = int(status_code)
        self.details = details

    def to_payload(self) -> dict[str, dict[str, object]]:
        return build_error_payload(code=self.code, message=self.message, details=self.details)


class InvalidExpiryError(ApplicationError):
    """Raised when an issued token carries an unusable lifetime.

    The issuer owns the lifetime, so this maps to a server-side failure
    rather than a client error.
    """

    def __init__(self, message: str, *, expires_in: int | None, unit: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TOKEN_EXPIRY,
            message=message,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            details={"expires_in": expires_in, "unit": unit},
        )
        self.expires_in = expires_in
        self.unit = unit


def build_error_payload(
    *,
    code: ErrorCode | str | None,
    message: str,
    details: object | None = None,
) -> dict[str, dict[str, object]]:
    error_section: dict[str, object] = {
        "code": str(code) if code is not None else str(ErrorCode.INTERNAL_ERROR),
        "message": message,
    }
    if details is not None:
        error_section["details"] = details
    return {"error": error_section}


__all__ = [
    "ApplicationError",
    "ErrorCode",
    "InvalidExpiryError",
    "build_error_payload",
]
