"""Dataclass models for the cleaned and geocoded table.

These are plain Python objects.  ``write_table`` serialises them; nothing
else persists them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Offset:
    """Decimal-fraction correction for one location.

    Applied as ``round(lat) + latitude`` and ``round(lon) - longitude``.
    """

    latitude: float
    longitude: float


@dataclass
class DiningLocationRow:
    label: str
    link: str
    latitude: float | None = None
    longitude: float | None = None
    # Anchor position the row came from; not part of the output columns.
    position: int | None = None

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    @property
    def is_located(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def set_coordinates(self, coords: Coordinates) -> None:
        """Fill in the corrected coordinates.  Allowed once per row."""
        if self.is_located:
            raise ValueError(f"Coordinates already set for {self.label!r}")
        self.latitude = coords.latitude
        self.longitude = coords.longitude

    def as_dict(self) -> dict[str, Any]:
        """Return the four output columns in table order."""
        return {
            "label": self.label,
            "link": self.link,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


TABLE_COLUMNS = ("label", "link", "latitude", "longitude")
