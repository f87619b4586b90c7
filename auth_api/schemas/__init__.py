"""Public exports for Pydantic schemas."""

from __future__ import annotations

from .auth import LoginResponse

__all__ = ["LoginResponse"]
