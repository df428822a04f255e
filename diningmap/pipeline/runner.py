"""One-shot pipeline run: Fetch → Extract → Clean → Geocode → Correct.

Every stage blocks until done and every failure is fatal; the caller gets
either the finished table or a :class:`~diningmap.errors.DiningMapError`.

The stage functions print tagged progress lines, which act as the run log.
"""

from __future__ import annotations

from typing import Iterable

from diningmap.config import settings
from diningmap.locations import CORRECTIONS, EXCLUDED_LABELS
from diningmap.pipeline.cleaner import clean_records
from diningmap.pipeline.corrector import Corrections, apply_corrections
from diningmap.pipeline.geocoder import GeocodingService, build_geocoder, geocode_rows
from diningmap.pipeline.models import DiningLocationRow
from diningmap.scraper import extract_links, fetch_document


def run_pipeline(
    url: str | None = None,
    *,
    start: int | None = None,
    end: int | None = None,
    excluded: Iterable[str] | None = None,
    domain: str | None = None,
    corrections: Corrections | None = None,
    geocoder: GeocodingService | None = None,
    suffix: str | None = None,
) -> list[DiningLocationRow]:
    """Build the corrected dining table.

    Any argument left as ``None`` falls back to ``settings`` or to the
    constants in :mod:`diningmap.locations`.
    """
    url = url or settings.source_url
    start = settings.row_range_start if start is None else start
    end = settings.row_range_end if end is None else end
    excluded = EXCLUDED_LABELS if excluded is None else excluded
    domain = domain or settings.link_domain
    corrections = CORRECTIONS if corrections is None else corrections
    geocoder = geocoder or build_geocoder()

    print(f"[FETCH] {url}")
    document = fetch_document(url)

    records = list(extract_links(document))
    print(f"[EXTRACT] {len(records)} link(s) found.")

    rows = clean_records(records, start, end, excluded, domain)
    print(f"[CLEAN] {len(rows)} location(s) kept from rows [{start}, {end}].")

    print(f"[GEOCODE] Looking up {len(rows)} location(s) via {geocoder.name} …")
    coarse = geocode_rows(rows, geocoder, suffix)

    apply_corrections(rows, coarse, corrections)
    print(f"[CORRECT] {len(rows)} location(s) corrected.")

    print(f"[DONE] {len(rows)} row(s) ready.")
    return rows
