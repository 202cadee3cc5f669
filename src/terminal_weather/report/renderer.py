"""Colour-coded terminal report for daily summaries and today's hours."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from rich.console import Console
from rich.text import Text

from .aggregator import find_day
from .classify import (
    STYLES,
    condition_icon,
    pick_icon,
    precipitation_style,
    temperature_style,
)
from .models import DaySummary, HourlyEntry

INDENT = "  "
LABEL_WIDTH = 10
RULE = "─" * 38
CARD_HEADER = "                 Temp             Rain"
HOURLY_HEADER = "Time         Temp   Rain"
HOURLY_TITLE = "Hourly"
TODAY_LABEL = "Today"


def format_temperature(celsius: float) -> str:
    return f"{celsius:5.1f}°"


def format_percent(percent: float) -> str:
    # Python's float formatting rounds half to even: 12.5 -> " 12", 13.5 -> " 14".
    return f"{percent:3.0f}%"


class ForecastReport:
    """Builds and prints the report as rich `Text` lines."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def render(self, days: Sequence[DaySummary], today: date, title: str) -> None:
        for line in self.build_lines(days, today, title):
            self.console.print(line, soft_wrap=True)

    def build_lines(self, days: Sequence[DaySummary], today: date, title: str) -> list[Text]:
        lines: list[Text] = [Text()]
        lines.append(self._indented(Text(title, style=STYLES["title"])))
        lines.append(self._muted(CARD_HEADER))
        lines.append(self._muted(RULE))
        lines.extend(self._day_card(summary, today) for summary in days)

        current = find_day(days, today)
        if current is not None and current.hourly:
            lines.append(Text())
            lines.append(self._indented(Text(HOURLY_TITLE, style=STYLES["label"])))
            lines.append(self._muted(HOURLY_HEADER))
            lines.append(self._muted(RULE))
            lines.extend(self._hour_row(entry) for entry in current.hourly)

        lines.append(Text())
        return lines

    def _day_card(self, summary: DaySummary, today: date) -> Text:
        line = Text(INDENT)
        line.append_text(self._day_label(summary.day, today))
        line.append(f" {pick_icon(summary.conditions)}  ")
        line.append(format_temperature(summary.low), style=temperature_style(summary.low))
        line.append("  …  ")
        line.append(format_temperature(summary.high), style=temperature_style(summary.high))
        line.append("  ")
        line.append(
            format_percent(summary.max_precipitation_probability),
            style=precipitation_style(summary.max_precipitation_probability),
        )
        return line

    @staticmethod
    def _day_label(day: date, today: date) -> Text:
        if day == today:
            label = Text()
            label.append(TODAY_LABEL, style=STYLES["label"])
            label.append(" " * (LABEL_WIDTH - len(TODAY_LABEL)))
            return label
        return Text(f"{day:%a %d.%m.}".ljust(LABEL_WIDTH))

    @staticmethod
    def _hour_row(entry: HourlyEntry) -> Text:
        line = Text(f"{INDENT}{entry.hour}  {condition_icon(entry.condition)}  ")
        line.append(
            format_temperature(entry.temperature), style=temperature_style(entry.temperature)
        )
        line.append("  ")
        line.append(
            format_percent(entry.precipitation_probability),
            style=precipitation_style(entry.precipitation_probability),
        )
        return line

    @staticmethod
    def _indented(text: Text) -> Text:
        line = Text(INDENT)
        line.append_text(text)
        return line

    @classmethod
    def _muted(cls, content: str) -> Text:
        return cls._indented(Text(content, style=STYLES["muted"]))
