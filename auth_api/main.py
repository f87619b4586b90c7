"""Entrypoint used by the host request layer to bootstrap the login flow."""

from __future__ import annotations

from auth_api.core.config import settings
from auth_api.core.logging import configure_logging
from auth_api.services.login_response import LoginResponseAssembler, get_login_response_assembler


def configure() -> LoginResponseAssembler:
    """Configure logging from settings and return the assembler to use per login."""

    configure_logging(settings.log_level)
    return get_login_response_assembler()


__all__ = ["configure"]
