"""Exception taxonomy for the pipeline.

Every error is fatal to a run: library code raises, the CLI reports and exits.
"""

from __future__ import annotations


class DiningMapError(Exception):
    """Base class for all pipeline failures."""


class FetchError(DiningMapError):
    """The source page could not be retrieved or parsed."""


class EmptyResultError(DiningMapError):
    """Cleaning left no rows, or the row range does not fit the document."""


class GeocodeError(DiningMapError):
    """The geocoding service returned no usable coordinate."""

    def __init__(self, message: str, label: str | None = None) -> None:
        super().__init__(message)
        self.label = label

    def __str__(self) -> str:
        base = super().__str__()
        if self.label is not None:
            return f"{base} (label={self.label!r})"
        return base


class AlignmentError(DiningMapError):
    """Corrections or coordinates do not line up with the cleaned rows."""
