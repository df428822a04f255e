"""HTTP fetcher for the dining listing page."""

from __future__ import annotations

import httpx
from bs4 import BeautifulSoup

from diningmap.config import settings
from diningmap.errors import FetchError
from diningmap.scraper.models import RawPage


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    One request, no retry.  Redirects are followed.

    Raises:
        FetchError: On transport failure or a 4xx/5xx status code.  The
            underlying ``httpx`` exception is chained as ``__cause__``.
    """
    try:
        with httpx.Client(
            headers=_default_headers(),
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            html = response.text
            status_code = response.status_code
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            f"HTTP {exc.response.status_code} fetching {url!r}"
        ) from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"Could not fetch {url!r}: {exc}") from exc

    return RawPage(url=url, html=html, status_code=status_code)


def parse_document(raw: RawPage) -> BeautifulSoup:
    """Parse *raw* into a queryable document.

    Raises:
        FetchError: If the response body is empty.
    """
    if not raw.html or not raw.html.strip():
        raise FetchError(f"Empty document returned for {raw.url!r}")
    return BeautifulSoup(raw.html, "html.parser")


def fetch_document(url: str) -> BeautifulSoup:
    """Fetch and parse *url* in one step."""
    return parse_document(fetch_url(url))
