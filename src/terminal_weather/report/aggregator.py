"""Hourly observation to daily summary rollup."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from ..weather.models import HourlyObservation
from .models import DaySummary


def aggregate(observations: Iterable[HourlyObservation], today: date) -> list[DaySummary]:
    """Group observations by day in first-seen order.

    Observations are expected in ascending timestamp order; they are not
    re-sorted. Only observations dated `today` populate `DaySummary.hourly`.
    """
    days: dict[date, DaySummary] = {}
    for observation in observations:
        day = observation.day_key
        summary = days.get(day)
        if summary is None:
            summary = days[day] = DaySummary(day=day)
        summary.add(observation, is_today=day == today)
    return list(days.values())


def find_day(days: Iterable[DaySummary], day: date) -> DaySummary | None:
    for summary in days:
        if summary.day == day:
            return summary
    return None
