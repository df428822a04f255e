"""Centralised settings for the dining map pipeline.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source page
    # ------------------------------------------------------------------
    source_url: str = field(
        default_factory=lambda: os.environ.get(
            "SOURCE_URL",
            "https://scl.cornell.edu/residential-life/dining/eateries-menus",
        )
    )
    link_domain: str = field(
        default_factory=lambda: os.environ.get("LINK_DOMAIN", "https://scl.cornell.edu")
    )
    # 1-based, inclusive window of anchors that hold the eatery list.
    row_range_start: int = field(
        default_factory=lambda: int(os.environ.get("ROW_RANGE_START", "45"))
    )
    row_range_end: int = field(
        default_factory=lambda: int(os.environ.get("ROW_RANGE_END", "78"))
    )

    # ------------------------------------------------------------------
    # Geocoding
    # ------------------------------------------------------------------
    geocoder_provider: str = field(
        default_factory=lambda: os.environ.get("GEOCODER_PROVIDER", "nominatim")
    )
    geocode_query_suffix: str = field(
        default_factory=lambda: os.environ.get(
            "GEOCODE_QUERY_SUFFIX", "Cornell University, Ithaca, NY"
        )
    )
    nominatim_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "NOMINATIM_BASE_URL", "https://nominatim.openstreetmap.org"
        )
    )
    google_maps_api_key: str = field(
        default_factory=lambda: os.environ.get("GOOGLE_MAPS_API_KEY", "")
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT",
            "Mozilla/5.0 (compatible; DiningMap-Bot/1.0; +https://github.com/dining-map)",
        )
    )


# Module-level singleton; import this everywhere:
#   from diningmap.config import settings
settings = Settings()
