"""
Login payload package for the Auth API.

It exposes the response schema returned by the login endpoint, the
issuer-side assembler that fills it, and the shared core utilities.
"""

from auth_api.core.version import APP_VERSION

__version__ = APP_VERSION
