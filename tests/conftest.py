from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Final

import pytest

_TEST_ENV_VARS: Final[dict[str, str]] = {
    "LOG_LEVEL": "DEBUG",
    "EXPIRES_IN_UNIT": "seconds",
}

for key, value in _TEST_ENV_VARS.items():
    os.environ.setdefault(key, value)


FIXED_NOW: Final[datetime] = datetime(2025, 1, 8, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW
