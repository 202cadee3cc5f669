"""Typed models for resolved locations."""

from __future__ import annotations

from pydantic import BaseModel


class GeocodeMatch(BaseModel):
    """Best geocoder candidate for a free-text query."""

    latitude: float
    longitude: float
    display_name: str

    @property
    def short_name(self) -> str:
        """First comma-separated segment of the full address."""
        return self.display_name.split(",", 1)[0].strip()


class ResolvedLocation(BaseModel):
    """Coordinates plus the title shown above the report."""

    latitude: float
    longitude: float
    title: str
