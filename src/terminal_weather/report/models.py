"""Per-day rollups built from hourly observations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import NamedTuple

from ..weather.models import DEFAULT_CONDITION, HourlyObservation


class HourlyEntry(NamedTuple):
    """One row of the hourly breakdown for today."""

    hour: str
    temperature: float
    precipitation_probability: float
    condition: str


@dataclass(slots=True)
class DaySummary:
    """Running high/low, peak precipitation chance and conditions for one day."""

    day: date
    high: float = -math.inf
    low: float = math.inf
    max_precipitation_probability: float = 0.0
    conditions: list[str] = field(default_factory=list)
    hourly: list[HourlyEntry] = field(default_factory=list)

    def add(self, observation: HourlyObservation, *, is_today: bool) -> None:
        temperature = observation.temperature
        precipitation = observation.precipitation_probability or 0.0
        condition = observation.condition

        self.high = max(self.high, temperature)
        self.low = min(self.low, temperature)
        self.max_precipitation_probability = max(self.max_precipitation_probability, precipitation)
        if condition != DEFAULT_CONDITION and condition not in self.conditions:
            self.conditions.append(condition)
        if is_today:
            self.hourly.append(
                HourlyEntry(observation.hour_label, temperature, precipitation, condition)
            )
