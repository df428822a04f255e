"""Anchor extraction: turns a parsed document into :class:`LinkRecord` items."""

from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup

from diningmap.scraper.models import LinkRecord


def extract_links(document: BeautifulSoup, selector: str = "a") -> Iterator[LinkRecord]:
    """Yield one :class:`LinkRecord` per node matching *selector*.

    Nodes are visited in document order and numbered from 1; the position is
    what the row-range filter keys on.  The generator is single-use, so parse
    the page again to walk it a second time.
    """
    for position, node in enumerate(document.select(selector), start=1):
        yield LinkRecord(
            position=position,
            label=node.get_text(),
            href=node.get("href") or "",
        )
