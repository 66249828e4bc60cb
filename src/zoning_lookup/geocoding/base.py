"""Abstract base class for geocoders."""

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from zoning_lookup.config import Settings
from zoning_lookup.models import Point


class Geocoder(ABC):
    """Abstract base class for all geocoders.

    Implementations never raise from ``geocode``: any transport failure,
    empty result or malformed payload is reported as None.
    """

    def __init__(self, config: Settings, client: Optional[httpx.AsyncClient] = None):
        """Initialize the geocoder with configuration.

        Args:
            config: Settings object containing geocoder configuration
            client: Shared HTTP client for outbound requests
        """
        self.config = config
        self.client = client

    @property
    @abstractmethod
    def service_name(self) -> str:
        """Unique identifier for this geocoder."""
        pass

    @abstractmethod
    def prepare_query(self, address: str) -> Any:
        """Format a free-text address for this geocoder's API."""
        pass

    @abstractmethod
    async def submit_request(self, prepared: Any) -> Any:
        """Submit the request, returning the raw payload or None on failure."""
        pass

    @abstractmethod
    def parse_response(self, response: Any) -> Optional[Point]:
        """Map the raw payload to a Point, or None when there is no usable match."""
        pass

    async def geocode(self, address: str) -> Optional[Point]:
        """Main workflow: prepare → submit → parse.

        Args:
            address: Free-text street address

        Returns:
            Coordinates of the best match, or None
        """
        prepared = self.prepare_query(address)
        response = await self.submit_request(prepared)
        if response is None:
            return None
        return self.parse_response(response)
