"""Nominatim (OpenStreetMap) geocoder implementation."""

from typing import Any, Optional

import httpx
from loguru import logger

from zoning_lookup.config import Settings
from zoning_lookup.models import Point

from ..base import Geocoder
from ..registry import GeocoderRegistry


@GeocoderRegistry.register
class NominatimGeocoder(Geocoder):
    """Nominatim (OpenStreetMap) geocoder.

    Nominatim is a free, open-source geocoding service based on OpenStreetMap data.
    Requires: an identifying User-Agent header (usage policy requirement).
    """

    def __init__(self, config: Settings, client: Optional[httpx.AsyncClient] = None):
        super().__init__(config, client)
        self.nominatim_config = config.geocoders.nominatim

    @property
    def service_name(self) -> str:
        return "nominatim"

    @property
    def user_agent(self) -> str:
        if self.nominatim_config.email:
            return f"{self.nominatim_config.user_agent} ({self.nominatim_config.email})"
        return self.nominatim_config.user_agent

    def prepare_query(self, address: str) -> dict[str, Any]:
        """Build Nominatim search parameters, adding the locality context.

        Args:
            address: Free-text street address

        Returns:
            Query parameters for the /search endpoint
        """
        params: dict[str, Any] = {
            "q": f"{address.strip()}{self.nominatim_config.locality_suffix}",
            "format": "json",
            "limit": 1,
        }
        if self.nominatim_config.country_codes:
            params["countrycodes"] = self.nominatim_config.country_codes
        return params

    async def submit_request(self, prepared: dict[str, Any]) -> Optional[Any]:
        """Submit one search request to Nominatim.

        Returns:
            Decoded JSON payload, or None on any HTTP or decoding failure
        """
        if self.client is None:
            raise RuntimeError("NominatimGeocoder requires an HTTP client")

        try:
            response = await self.client.get(
                f"{self.nominatim_config.base_url}/search",
                params=prepared,
                headers={"User-Agent": self.user_agent},
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.warning("Nominatim request failed for '{}': {}", prepared["q"], e)
        except ValueError as e:
            logger.warning("Nominatim returned invalid JSON for '{}': {}", prepared["q"], e)
        return None

    def parse_response(self, response: Any) -> Optional[Point]:
        """Parse the first Nominatim match into a Point."""
        if not isinstance(response, list) or len(response) == 0:
            logger.debug("Nominatim returned no match")
            return None

        match = response[0]
        try:
            point = Point(longitude=float(match["lon"]), latitude=float(match["lat"]))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed Nominatim match {}: {}", match, e)
            return None

        logger.debug(
            "Geocoded to ({}, {}): {}",
            point.longitude,
            point.latitude,
            match.get("display_name", ""),
        )
        return point
