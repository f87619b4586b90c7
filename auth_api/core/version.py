"""Installed version of the auth-api distribution."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Final

DISTRIBUTION_NAME: Final[str] = "auth-api"


def _installed_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        # Running from a checkout that was never installed.
        return "0.0.0"


APP_VERSION: Final[str] = _installed_version()

__all__ = ["APP_VERSION"]
