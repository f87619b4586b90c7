"""Service layer for assembling login payloads."""

from auth_api.services.login_response import (
    IssuedToken,
    LoginResponseAssembler,
    get_login_response_assembler,
)

__all__ = ["IssuedToken", "LoginResponseAssembler", "get_login_response_assembler"]
