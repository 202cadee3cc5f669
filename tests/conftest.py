"""Shared fixtures for terminal weather tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

import pytest

from terminal_weather.log_setup import STDERR_HANDLER_NAME
from terminal_weather.weather.models import HourlyObservation

_SETTINGS_ENV = (
    "BRIGHTSKY_BASE_URL",
    "NOMINATIM_BASE_URL",
    "HTTP_USER_AGENT",
    "HTTP_TIMEOUT_SECONDS",
    "FORECAST_DAYS",
    "FORECAST_TIMEZONE",
    "WEATHER_DEFAULT_LAT",
    "WEATHER_DEFAULT_LON",
    "WEATHER_DEFAULT_TITLE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    # Keep a developer's .env and shell settings out of the tests, and let each
    # test attach a fresh stderr handler. Capture handlers owned by pytest stay.
    monkeypatch.chdir(tmp_path)
    for name in (*_SETTINGS_ENV, "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    _drop_stderr_handlers()
    yield
    _drop_stderr_handlers()


def _drop_stderr_handlers() -> None:
    logger = logging.getLogger("terminal_weather")
    for handler in list(logger.handlers):
        if handler.get_name() == STDERR_HANDLER_NAME:
            logger.removeHandler(handler)


def make_observation(
    timestamp: str,
    temperature: float,
    precipitation_probability: float | None = None,
    condition: str = "dry",
) -> HourlyObservation:
    return HourlyObservation(
        timestamp=datetime.fromisoformat(timestamp),
        temperature=temperature,
        precipitation_probability=precipitation_probability,
        condition=condition,
    )
