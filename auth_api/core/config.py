"""
Configuration module for the Auth API login payload.

The Settings object centralizes environment-driven configuration with strict
typing and validation rules so that the rest of the codebase can rely on a
single source of truth.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ExpiresInUnit = Literal["seconds", "milliseconds"]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    expires_in_unit: ExpiresInUnit = Field(
        default="seconds",
        alias="EXPIRES_IN_UNIT",
        description="Unit of the expiresIn field reported to login callers.",
    )
    max_expires_in_seconds: int | None = Field(
        default=None,
        alias="MAX_EXPIRES_IN_SECONDS",
        description="Upper bound for token lifetimes accepted from the issuer.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object, info: ValidationInfo) -> str:
        if not isinstance(value, str):
            field = (info.field_name or "value").upper()
            raise ValueError(f"{field} must be a level name such as INFO or DEBUG.")
        trimmed = value.strip().upper()
        if not trimmed:
            raise ValueError("LOG_LEVEL must not be empty.")
        return trimmed

    @field_validator("expires_in_unit", mode="before")
    @classmethod
    def _normalize_unit(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("max_expires_in_seconds")
    @classmethod
    def _validate_max_expires_in(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("MAX_EXPIRES_IN_SECONDS must be a positive integer.")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance so configuration is evaluated once."""
    return Settings()


settings = get_settings()
