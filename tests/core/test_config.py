from __future__ import annotations

import pytest
from pydantic import ValidationError
from pydantic_settings import PydanticBaseSettingsSource

from auth_api.core.config import Settings, get_settings

SettingsPayload = dict[str, object]


class NoEnvSettings(Settings):
    """Helper subclass that ignores environment variables and .env files."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[Settings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


def build_settings(**overrides: object) -> Settings:
    return NoEnvSettings.model_validate(overrides)


def test_defaults_report_seconds() -> None:
    settings = build_settings()

    assert settings.expires_in_unit == "seconds"
    assert settings.max_expires_in_seconds is None
    assert settings.log_level == "INFO"


def test_unit_is_normalized() -> None:
    settings = build_settings(EXPIRES_IN_UNIT="  Milliseconds ")

    assert settings.expires_in_unit == "milliseconds"


def test_unknown_unit_is_rejected() -> None:
    with pytest.raises(ValidationError):
        build_settings(EXPIRES_IN_UNIT="minutes")


@pytest.mark.parametrize("value", [0, -30])
def test_max_expires_in_must_be_positive(value: int) -> None:
    with pytest.raises(ValidationError, match="MAX_EXPIRES_IN_SECONDS"):
        build_settings(MAX_EXPIRES_IN_SECONDS=value)


def test_log_level_is_upper_cased() -> None:
    assert build_settings(LOG_LEVEL=" debug ").log_level == "DEBUG"


def test_blank_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError, match="LOG_LEVEL must not be empty"):
        build_settings(LOG_LEVEL="   ")


def test_environment_variables_are_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPIRES_IN_UNIT", "milliseconds")
    monkeypatch.setenv("MAX_EXPIRES_IN_SECONDS", "7200")

    settings = Settings(_env_file=None)

    assert settings.expires_in_unit == "milliseconds"
    assert settings.max_expires_in_seconds == 7200


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_non_string_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError, match="LOG_LEVEL must be a level name"):
        build_settings(LOG_LEVEL=10)
