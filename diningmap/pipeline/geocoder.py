"""Geocoding providers and the per-row lookup loop.

Providers
---------
``nominatim`` (default)
    OpenStreetMap's Nominatim ``/search`` endpoint.  No key required, but a
    descriptive ``User-Agent`` is mandatory.  Configure via
    ``NOMINATIM_BASE_URL`` and ``USER_AGENT``.

``google``
    Google Geocoding API.  Requires ``GOOGLE_MAPS_API_KEY``.

Set ``GEOCODER_PROVIDER=google`` in your ``.env`` to switch providers.

Both providers share one interface: ``geocode(query) -> Coordinates``.  There
is no failover between providers and no retry: a failed lookup
raises :class:`GeocodeError` and the run stops.  Results for obscure points
of interest are often only city-level, which is what the corrector is for.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Sequence

import httpx

from diningmap.config import settings
from diningmap.errors import GeocodeError
from diningmap.pipeline.models import Coordinates, DiningLocationRow

_GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


def build_query(label: str, suffix: str) -> str:
    """Append the disambiguating *suffix* to *label*."""
    label = label.strip()
    suffix = suffix.strip()
    if not suffix:
        return label
    return f"{label}, {suffix}"


def _to_coordinates(lat: Any, lon: Any, query: str) -> Coordinates:
    try:
        latitude, longitude = float(lat), float(lon)
    except (TypeError, ValueError) as exc:
        raise GeocodeError(f"Unparsable coordinates for {query!r}: {lat!r}, {lon!r}") from exc
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise GeocodeError(f"Non-finite coordinates for {query!r}: {lat!r}, {lon!r}")
    return Coordinates(latitude=latitude, longitude=longitude)


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class GeocodingService(ABC):
    """Abstract base class for a single geocoding provider."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name."""

    @abstractmethod
    def geocode(self, query: str) -> Coordinates:
        """Return the best match for *query*.  Raises :class:`GeocodeError`."""


# ---------------------------------------------------------------------------
# Nominatim (OpenStreetMap)
# ---------------------------------------------------------------------------

class NominatimGeocoder(GeocodingService):
    """Nominatim ``/search`` with ``format=json&limit=1``."""

    def __init__(self, base_url: str | None = None) -> None:
        self._base_url = (base_url or settings.nominatim_base_url).rstrip("/")

    @property
    def name(self) -> str:
        return "Nominatim"

    def geocode(self, query: str) -> Coordinates:
        try:
            with httpx.Client(
                timeout=settings.request_timeout,
                headers={"User-Agent": settings.user_agent},
            ) as client:
                resp = client.get(
                    f"{self._base_url}/search",
                    params={"q": query, "format": "json", "limit": 1},
                )
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as exc:
            raise GeocodeError(f"[{self.name}] request failed for {query!r}: {exc}") from exc
        except ValueError as exc:
            raise GeocodeError(f"[{self.name}] invalid JSON for {query!r}") from exc

        if not isinstance(data, list) or not data:
            raise GeocodeError(f"[{self.name}] no result for {query!r}")
        best = data[0]
        return _to_coordinates(best.get("lat"), best.get("lon"), query)


# ---------------------------------------------------------------------------
# Google Geocoding API
# ---------------------------------------------------------------------------

class GoogleGeocoder(GeocodingService):
    """Google Geocoding API.

    Raises ``EnvironmentError`` on construction if no API key is configured.
    """

    def __init__(self, api_key: str | None = None) -> None:
        self._api_key = api_key or settings.google_maps_api_key
        if not self._api_key:
            raise EnvironmentError(
                "GOOGLE_MAPS_API_KEY environment variable is not set. "
                "Set it or switch to GEOCODER_PROVIDER=nominatim."
            )

    @property
    def name(self) -> str:
        return "Google"

    def geocode(self, query: str) -> Coordinates:
        try:
            with httpx.Client(timeout=settings.request_timeout) as client:
                resp = client.get(
                    _GOOGLE_GEOCODE_URL,
                    params={"address": query, "key": self._api_key},
                )
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as exc:
            raise GeocodeError(f"[{self.name}] request failed for {query!r}: {exc}") from exc
        except ValueError as exc:
            raise GeocodeError(f"[{self.name}] invalid JSON for {query!r}") from exc

        status = data.get("status")
        if status != "OK":
            detail = data.get("error_message") or status
            raise GeocodeError(f"[{self.name}] {detail} for {query!r}")
        try:
            location = data["results"][0]["geometry"]["location"]
        except (KeyError, IndexError, TypeError) as exc:
            raise GeocodeError(f"[{self.name}] no location in response for {query!r}") from exc
        return _to_coordinates(location.get("lat"), location.get("lng"), query)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

_PROVIDERS: dict[str, type[GeocodingService]] = {
    "nominatim": NominatimGeocoder,
    "google": GoogleGeocoder,
}


def build_geocoder(provider: str | None = None) -> GeocodingService:
    """Return the geocoder named by *provider* or ``settings.geocoder_provider``."""
    name = (provider or settings.geocoder_provider).strip().lower()
    try:
        cls = _PROVIDERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown geocoder provider {name!r}. Use: {' | '.join(_PROVIDERS)}"
        ) from None
    return cls()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def geocode_rows(
    rows: Sequence[DiningLocationRow],
    service: GeocodingService,
    suffix: str | None = None,
) -> list[Coordinates]:
    """Look up every row, one request at a time, in row order.

    Returns coarse coordinates aligned with *rows*.

    Raises:
        GeocodeError: On the first failing row; ``label`` names that row.
    """
    if suffix is None:
        suffix = settings.geocode_query_suffix

    coarse: list[Coordinates] = []
    for row in rows:
        query = build_query(row.label, suffix)
        try:
            coords = service.geocode(query)
        except GeocodeError as exc:
            raise GeocodeError(exc.args[0], label=row.label) from exc
        print(f"[GEOCODE] {row.label.strip()!r} → {coords.latitude:.4f}, {coords.longitude:.4f}")
        coarse.append(coords)
    return coarse
