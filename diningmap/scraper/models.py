"""Data models for the scraper stage."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class LinkRecord:
    """One anchor node, in document order.

    ``position`` is 1-based.  ``label`` is kept exactly as extracted (no
    whitespace normalisation); ``href`` is ``""`` when the attribute is absent.
    """

    position: int
    label: str
    href: str
