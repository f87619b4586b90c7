"""Assemble login responses from grants issued by the authentication service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Final

from auth_api.core.config import ExpiresInUnit, settings
from auth_api.core.errors import InvalidExpiryError
from auth_api.schemas.auth import LoginResponse

logger = logging.getLogger(__name__)

_UNIT_STEPS: Final[dict[str, timedelta]] = {
    "seconds": timedelta(seconds=1),
    "milliseconds": timedelta(milliseconds=1),
}


@dataclass(frozen=True, slots=True)
class IssuedToken:
    """Token grant handed over after credentials were verified."""

    token: str
    expires_at: datetime
    issued_at: datetime | None = None


def _current_time() -> datetime:
    """Return timezone-aware UTC timestamp."""

    return datetime.now(timezone.utc)


def to_unit(delta: timedelta, unit: ExpiresInUnit) -> int:
    """Convert ``delta`` to whole units, rounding towards negative infinity."""

    try:
        step = _UNIT_STEPS[unit]
    except KeyError as exc:
        raise ValueError(f"Unsupported expiresIn unit: {unit!r}") from exc
    return delta // step


class LoginResponseAssembler:
    """Turn an issued token into the payload returned to login callers.

    The assembler never inspects the token. It only converts the grant's
    lifetime into the configured unit and refuses lifetimes the caller could
    not use (negative, or above the configured ceiling).
    """

    def __init__(
        self,
        *,
        unit: ExpiresInUnit = "seconds",
        max_expires_in_seconds: int | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if unit not in _UNIT_STEPS:
            raise ValueError(f"Unsupported expiresIn unit: {unit!r}")
        self.unit = unit
        self.max_expires_in_seconds = max_expires_in_seconds
        self._clock = clock or _current_time

    def from_grant(self, grant: IssuedToken) -> LoginResponse:
        """Build a response whose expiresIn counts from issuance (or now) to expiry."""

        if grant.expires_at.tzinfo is None or (
            grant.issued_at is not None and grant.issued_at.tzinfo is None
        ):
            raise InvalidExpiryError(
                "Token expiry timestamps must be timezone-aware.",
                expires_in=None,
                unit=self.unit,
            )

        reference = grant.issued_at or self._clock()
        return self._assemble(grant.token, to_unit(grant.expires_at - reference, self.unit))

    def from_duration(self, token: str, expires_in: int) -> LoginResponse:
        """Build a response from a lifetime already expressed in the configured unit."""

        return self._assemble(token, expires_in)

    def _assemble(self, token: str, expires_in: int) -> LoginResponse:
        self._check_expires_in(expires_in)

        response = LoginResponse().set_token(token).set_expires_in(expires_in)

        logger.debug(
            "Login response assembled",
            extra={"expires_in": expires_in, "expires_in_unit": self.unit},
        )
        return response

    def _check_expires_in(self, expires_in: int) -> None:
        if expires_in < 0:
            logger.warning(
                "Rejected token grant with negative lifetime",
                extra={"expires_in": expires_in, "expires_in_unit": self.unit},
            )
            raise InvalidExpiryError(
                "Issued token is already expired.",
                expires_in=expires_in,
                unit=self.unit,
            )

        if self.max_expires_in_seconds is None:
            return

        ceiling = self.max_expires_in_seconds * (_UNIT_STEPS["seconds"] // _UNIT_STEPS[self.unit])
        if expires_in > ceiling:
            logger.warning(
                "Rejected token grant above lifetime ceiling",
                extra={"expires_in": expires_in, "expires_in_unit": self.unit, "ceiling": ceiling},
            )
            raise InvalidExpiryError(
                f"Issued token lifetime exceeds {self.max_expires_in_seconds} seconds.",
                expires_in=expires_in,
                unit=self.unit,
            )


def get_login_response_assembler() -> LoginResponseAssembler:
    """Factory returning an assembler configured from current settings."""

    return LoginResponseAssembler(
        unit=settings.expires_in_unit,
        max_expires_in_seconds=settings.max_expires_in_seconds,
    )


__all__ = [
    "IssuedToken",
    "LoginResponseAssembler",
    "get_login_response_assembler",
    "to_unit",
]
