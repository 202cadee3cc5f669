"""Daily rollup and terminal rendering of hourly forecasts."""

from .aggregator import aggregate
from .models import DaySummary, HourlyEntry
from .renderer import ForecastReport

__all__ = ["DaySummary", "ForecastReport", "HourlyEntry", "aggregate"]
