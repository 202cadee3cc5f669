"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from terminal_weather.config import Settings, load_settings
from terminal_weather.exceptions import ConfigError


def test_defaults_need_no_environment() -> None:
    settings = Settings(_env_file=None)

    assert str(settings.brightsky_base_url).rstrip("/") == "https://api.brightsky.dev"
    assert str(settings.nominatim_base_url).rstrip("/") == "https://nominatim.openstreetmap.org"
    assert settings.http_user_agent == "weather-cli"
    assert settings.forecast_days == 3
    assert settings.forecast_timezone is None
    assert settings.weather_default_title == "Overview"
    assert settings.has_default_location is False
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORECAST_DAYS", "5")
    monkeypatch.setenv("FORECAST_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("WEATHER_DEFAULT_LAT", "52.52")
    monkeypatch.setenv("WEATHER_DEFAULT_LON", "13.405")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.forecast_days == 5
    assert settings.forecast_timezone == "Europe/Berlin"
    assert settings.has_default_location is True
    assert settings.log_level == "DEBUG"


def test_empty_strings_parse_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_DEFAULT_LAT", "")
    monkeypatch.setenv("WEATHER_DEFAULT_LON", " ")
    monkeypatch.setenv("FORECAST_TIMEZONE", "")

    settings = Settings(_env_file=None)

    assert settings.weather_default_lat is None
    assert settings.weather_default_lon is None
    assert settings.forecast_timezone is None


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("FORECAST_DAYS", "0", "FORECAST_DAYS"),
        ("HTTP_TIMEOUT_SECONDS", "0", "HTTP_TIMEOUT_SECONDS"),
        ("HTTP_USER_AGENT", "  ", "HTTP_USER_AGENT"),
        ("WEATHER_DEFAULT_LAT", "52.0", "must be set together"),
    ],
)
def test_invalid_values_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str, message: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError, match=message):
        Settings(_env_file=None)


def test_load_settings_wraps_validation_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_DEFAULT_LAT", "120")
    monkeypatch.setenv("WEATHER_DEFAULT_LON", "10")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_settings()


def test_safe_summary_lists_effective_values() -> None:
    summary = Settings(_env_file=None).safe_summary()

    assert summary["forecast_days"] == 3
    assert summary["has_default_location"] is False
