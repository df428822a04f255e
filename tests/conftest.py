"""Shared fixtures: a synthetic eateries page laid out like the real one.

Anchors 1–44 are navigation, 45–78 the eatery block, 79–80 the footer.
The block holds the 30 surveyed eateries plus one exact duplicate, one
apostrophe-variant duplicate and the two excluded entries: 34 anchors that
clean down to 30 rows.
"""

from __future__ import annotations

import html
import re

import pytest
from bs4 import BeautifulSoup

from diningmap.locations import CORRECTION_PAIRS
from diningmap.scraper import extract_links

LISTING_URL = "https://dining.example.edu/eateries"
DOMAIN = "https://dining.example.edu"


def _slug(label: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", label.lower()).strip("-")


def _eatery_block() -> list[tuple[str, str]]:
    labels = [label for label, _, _ in CORRECTION_PAIRS]
    block: list[tuple[str, str]] = [("/dining-now", "Dining Now")]
    for label in labels:
        block.append((f"/eateries/{_slug(label)}", label))
        if label == "Okenshields":
            block.append(("/eateries/okenshields", "Okenshields"))
        if label == "Martha's Café":
            block.append(("/eateries/marthas-cafe", "Martha’s Café"))
    block.append(("/convenience-stores", "Convenience Stores"))
    return block


def build_listing_html() -> str:
    nav = [(f"/nav/{i}", f"Nav {i}") for i in range(1, 45)]
    footer = [("/about", "About"), ("https://www.example.edu/", "Example University")]
    anchors = "\n".join(
        f'<li><a href="{html.escape(href)}">{html.escape(label)}</a></li>'
        for href, label in nav + _eatery_block() + footer
    )
    return f"<html><head><title>Eateries</title></head><body><ul>\n{anchors}\n</ul></body></html>"


@pytest.fixture
def listing_html() -> str:
    return build_listing_html()


@pytest.fixture
def listing_records(listing_html):
    document = BeautifulSoup(listing_html, "html.parser")
    return list(extract_links(document))
