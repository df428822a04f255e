"""Scraper package: page fetch & anchor extraction."""

from diningmap.scraper.extractor import extract_links
from diningmap.scraper.fetcher import fetch_document, fetch_url, parse_document
from diningmap.scraper.models import LinkRecord, RawPage

__all__ = [
    "fetch_url",
    "parse_document",
    "fetch_document",
    "extract_links",
    "RawPage",
    "LinkRecord",
]
