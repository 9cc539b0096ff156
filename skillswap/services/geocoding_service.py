"""Geocoding Service - Address to coordinates via OpenStreetMap Nominatim.

Lookup order:
1. Structured search (country, state, city, postalcode)
2. Free-text search "{country}, {region}, {city}, {postal_code}", also tried
   when the structured request itself fails
3. The fixed default coordinate

Errors are logged and end in the default coordinate; geocode() never raises.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

import config
from skillswap.models import Location

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = Location(*config.DEFAULT_LOCATION)


class Geocoder:
    """Resolves an onboarding address to a map location."""

    def __init__(
        self,
        base_url: str = config.NOMINATIM_URL,
        timeout: int = config.GEOCODER_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        # Nominatim's usage policy requires an identifying agent
        self.session.headers.update({"User-Agent": config.GEOCODER_USER_AGENT})

    def geocode(self, country: str, region: str, city: str, postal_code: str) -> Location:
        """Resolve an address, falling back as described in the module docstring."""
        try:
            results = self._search({
                "format": "json",
                "country": country,
                "state": region,
                "city": city,
                "postalcode": postal_code,
                "limit": "1",
            })
        except requests.RequestException as e:
            logger.warning("[geocode] structured search failed: %s", e)
            results = []

        try:
            if results:
                return self._to_location(results[0])

            query = f"{country}, {region}, {city}, {postal_code}"
            logger.info("[geocode] structured search empty, trying q=%s", query)
            results = self._search({"format": "json", "q": query, "limit": "1"})
            if results:
                return self._to_location(results[0])
        except Exception as e:
            logger.error("[geocode] lookup failed: %s", e)
            return DEFAULT_LOCATION

        logger.warning("[geocode] no match for %s/%s/%s/%s, using default", country, region, city, postal_code)
        return DEFAULT_LOCATION

    def _search(self, params: dict[str, str]) -> list[dict[str, Any]]:
        resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json() or []

    @staticmethod
    def _to_location(item: dict[str, Any]) -> Location:
        return Location(lat=float(item["lat"]), lng=float(item["lon"]))
