"""Abstract base class for zoning boundary sources.

A boundary source answers "which zoning district contains this point", either
by fetching the whole dataset and testing containment locally
(bulk-fetch-and-test) or by asking the provider to run the spatial query
(query-and-trust).
"""

from abc import ABC, abstractmethod
from typing import Optional

import httpx

from zoning_lookup.config import Settings
from zoning_lookup.models import Point
from zoning_lookup.resolver import MatchPolicy


class BoundarySource(ABC):
    """Abstract base class for all boundary sources."""

    def __init__(self, config: Settings, client: Optional[httpx.AsyncClient] = None):
        """Initialize the source with configuration.

        Args:
            config: Settings object containing source configuration
            client: Shared HTTP client for outbound requests
        """
        self.config = config
        self.client = client

    @property
    @abstractmethod
    def service_name(self) -> str:
        """Unique identifier for this source."""
        pass

    @property
    @abstractmethod
    def data_source(self) -> str:
        """Human-readable attribution returned with every result."""
        pass

    @property
    def default_policy(self) -> MatchPolicy:
        return MatchPolicy.FIRST_MATCH

    @property
    def parcels_enabled(self) -> bool:
        return False

    @abstractmethod
    async def zoning_code_at(self, point: Point, policy: MatchPolicy) -> str:
        """Return the zoning code of the district containing ``point``.

        Raises:
            DataUnavailable: If the boundary data could not be fetched or is empty
            NoMatch: If no district contains the point
            Ambiguous: If the policy requires one match and several were found
        """
        pass

    async def lot_area_at(self, point: Point) -> Optional[float]:
        """Return the lot area in square feet of the parcel at ``point``.

        Sources without a parcel layer return None.
        """
        return None

    def _require_client(self) -> httpx.AsyncClient:
        if self.client is None:
            raise RuntimeError(f"{type(self).__name__} requires an HTTP client")
        return self.client
