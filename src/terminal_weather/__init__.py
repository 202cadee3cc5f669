"""Terminal weather report: daily rollups and today's hours from Bright Sky forecasts."""

__version__ = "0.1.0"
