"""Hourly forecast sources."""

from .base import WeatherProvider
from .brightsky import BrightSkyProvider
from .models import DEFAULT_CONDITION, ForecastSnapshot, ForecastWindow, HourlyObservation

__all__ = [
    "DEFAULT_CONDITION",
    "BrightSkyProvider",
    "ForecastSnapshot",
    "ForecastWindow",
    "HourlyObservation",
    "WeatherProvider",
]
