"""
Pydantic schemas for authentication endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LoginResponse(BaseModel):
    """Response payload for POST /auth/login."""

    token: str | None = Field(default=None, description="Opaque bearer token")
    expires_in: int = Field(
        default=0,
        alias="expiresIn",
        description="Remaining token lifetime relative to issuance",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        serialize_by_alias=True,
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "expiresIn": 3600,
            }
        },
    )

    def set_token(self, token: str | None) -> LoginResponse:
        """Store the bearer token as given and return ``self``."""
        self.token = token
        return self

    def set_expires_in(self, expires_in: int) -> LoginResponse:
        """Store the remaining lifetime as given and return ``self``."""
        self.expires_in = expires_in
        return self

    def to_payload(self) -> dict[str, Any]:
        """Return the wire representation with camelCase keys."""
        return self.model_dump(by_alias=True)


__all__ = ["LoginResponse"]
