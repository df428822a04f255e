"""Cleaning stage: turns extracted anchors into :class:`DiningLocationRow` items.

Steps run in a fixed order:

1. range filter: keep the contiguous block of anchors holding the eateries
2. deduplicate: first occurrence of each label wins
3. exclude: drop navigation / generic entries
4. qualify links: make every href absolute under the site domain

Labels are compared through :func:`normalize_label`, so ``Martha's`` and
``Martha’s`` count as the same location.  Stored labels are never rewritten.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable
from urllib.parse import urljoin, urlparse

from diningmap.errors import EmptyResultError
from diningmap.pipeline.models import DiningLocationRow
from diningmap.scraper.models import LinkRecord

# Typographic punctuation that NFKC leaves alone.
_PUNCTUATION_FOLDS = str.maketrans({
    "‘": "'",
    "’": "'",
    "‚": "'",
    "‛": "'",
    "′": "'",
    "`": "'",
    "“": '"',
    "”": '"',
    "„": '"',
    "–": "-",
    "—": "-",
})

_WHITESPACE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def normalize_label(label: str) -> str:
    """Return the comparison key for *label*."""
    text = unicodedata.normalize("NFKC", label).translate(_PUNCTUATION_FOLDS)
    return _WHITESPACE.sub(" ", text).strip()


def qualify_link(domain: str, href: str) -> str:
    """Join *href* onto *domain* with exactly one ``/`` between them.

    Hrefs that already carry a scheme (``https:``, ``mailto:`` ...) are returned
    unchanged; protocol-relative ones (``//host/path``) take the domain's scheme.
    """
    href = href.strip()
    parsed = urlparse(href)
    if parsed.scheme:
        return href
    if parsed.netloc:
        return urljoin(domain, href)
    return f"{domain.rstrip('/')}/{href.lstrip('/')}"


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

def select_range(records: Iterable[LinkRecord], start: int, end: int) -> list[LinkRecord]:
    """Keep records whose 1-based position lies in ``[start, end]``.

    Raises:
        EmptyResultError: If the bounds are inverted, start below 1, or
            ``end`` lies past the last record.
    """
    records = list(records)
    if start < 1 or start > end:
        raise EmptyResultError(f"Invalid row range [{start}, {end}]")
    if end > len(records):
        raise EmptyResultError(
            f"Row range [{start}, {end}] exceeds the {len(records)} links on the page"
        )
    return [r for r in records if start <= r.position <= end]


def deduplicate(records: Iterable[LinkRecord]) -> list[LinkRecord]:
    """Drop every record whose label was already seen, keeping the first."""
    seen: set[str] = set()
    kept: list[LinkRecord] = []
    for record in records:
        key = normalize_label(record.label)
        if key in seen:
            continue
        seen.add(key)
        kept.append(record)
    return kept


def exclude(records: Iterable[LinkRecord], excluded: Iterable[str]) -> list[LinkRecord]:
    """Drop records whose label is in *excluded*."""
    blocked = {normalize_label(label) for label in excluded}
    return [r for r in records if normalize_label(r.label) not in blocked]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def clean_records(
    records: Iterable[LinkRecord],
    start: int,
    end: int,
    excluded: Iterable[str],
    domain: str,
) -> list[DiningLocationRow]:
    """Run the four cleaning steps and build rows with unset coordinates.

    Raises:
        EmptyResultError: If the range is invalid or nothing survives.
    """
    selected = select_range(records, start, end)
    unique = deduplicate(selected)
    kept = exclude(unique, excluded)
    if not kept:
        raise EmptyResultError(
            f"No dining locations left after cleaning rows [{start}, {end}]"
        )
    return [
        DiningLocationRow(
            label=r.label,
            link=qualify_link(domain, r.href),
            position=r.position,
        )
        for r in kept
    ]
