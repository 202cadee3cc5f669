"""Colour buckets and icon selection for report values."""

from __future__ import annotations

from collections.abc import Iterable

# Rich style strings; with the standard colour system these render as the
# matching SGR escape codes (bold=1, dim=2, blue=34, cyan=36, green=32,
# yellow=33, red=31).
STYLES: dict[str, str] = {
    "title": "bold cyan",
    "label": "bold",
    "muted": "dim",
    "cold": "blue",
    "cool": "cyan",
    "mild": "green",
    "warm": "yellow",
    "hot": "red",
    "rain_likely": "red",
    "rain_possible": "yellow",
    "rain_unlikely": "dim",
}

CONDITION_ICONS: dict[str, str] = {
    "thunderstorm": "⛈️",
    "rain": "🌧️",
    "snow": "❄️",
    "sleet": "🌨️",
    "hail": "🧊",
    "fog": "🌫️",
    "cloudy": "☁️",
}
CLEAR_ICON = "☀️"

# Highest priority first; the first category present on a day picks its icon.
ICON_PRIORITY: tuple[str, ...] = (
    "thunderstorm",
    "rain",
    "snow",
    "sleet",
    "hail",
    "fog",
    "cloudy",
)


def temperature_band(celsius: float) -> str:
    if celsius < 0:
        return "cold"
    if celsius < 10:
        return "cool"
    if celsius < 20:
        return "mild"
    if celsius < 30:
        return "warm"
    return "hot"


def precipitation_band(percent: float) -> str:
    if percent >= 70:
        return "rain_likely"
    if percent >= 40:
        return "rain_possible"
    return "rain_unlikely"


def temperature_style(celsius: float) -> str:
    return STYLES[temperature_band(celsius)]


def precipitation_style(percent: float) -> str:
    return STYLES[precipitation_band(percent)]


def condition_icon(condition: str) -> str:
    """Exact condition to icon mapping; unknown labels are clear."""
    return CONDITION_ICONS.get(condition, CLEAR_ICON)


def pick_icon(conditions: Iterable[str]) -> str:
    """Icon for a whole day, chosen by priority rather than frequency."""
    seen = set(conditions)
    for condition in ICON_PRIORITY:
        if condition in seen:
            return condition_icon(condition)
    return CLEAR_ICON
