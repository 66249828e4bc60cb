"""Address → zoning code lookup pipeline.

Stages run sequentially, each depending on the previous one:

1. validate the address
2. geocode it
3. ask the boundary source for the zoning code (and lot area, if enabled)
4. build the result

Every failure collapses into the same ``not_found`` result; the specific
category is logged and kept on ``LookupResult.reason``.
"""

from typing import Any, Optional

import httpx
from loguru import logger

from zoning_lookup.boundaries import BoundarySource, BoundarySourceRegistry
from zoning_lookup.config import Settings
from zoning_lookup.exceptions import DataUnavailable, GeocodeMiss, InvalidInput, ZoningLookupError
from zoning_lookup.geocoding import Geocoder, GeocoderRegistry
from zoning_lookup.models import LookupResult
from zoning_lookup.resolver import MatchPolicy


class ZoningLookup:
    """Resolves street addresses to zoning codes."""

    def __init__(
        self,
        settings: Settings,
        geocoder: Geocoder,
        source: BoundarySource,
        policy: Optional[MatchPolicy] = None,
    ):
        self.settings = settings
        self.geocoder = geocoder
        self.source = source
        self.policy = policy or source.default_policy

    async def lookup(self, address: Any) -> LookupResult:
        """Look up the zoning code for an address.

        Never raises: invalid input, geocoding misses, data outages and
        unresolved points all produce a ``not_found`` result.

        Args:
            address: Free-text street address (anything else is invalid input)

        Returns:
            LookupResult
        """
        try:
            return await self._run(address)
        except ZoningLookupError as e:
            log = logger.warning if isinstance(e, DataUnavailable) else logger.info
            log("Lookup for {!r} not found ({}): {}", address, e.reason, e)
            return LookupResult.not_found(self.source.data_source, reason=e.reason)
        except httpx.HTTPError as e:
            logger.warning("Lookup for {!r} failed on an outbound request: {}", address, e)
            return LookupResult.not_found(self.source.data_source, reason=DataUnavailable.reason)
        except Exception:
            logger.exception("Unexpected error during lookup for {!r}", address)
            return LookupResult.not_found(self.source.data_source, reason=ZoningLookupError.reason)

    async def _run(self, address: Any) -> LookupResult:
        if not isinstance(address, str) or not address.strip():
            raise InvalidInput("Address must be a non-empty string")

        point = await self.geocoder.geocode(address)
        if point is None:
            raise GeocodeMiss(f"No geocoding match for {address!r}")
        logger.debug("Geocoded {!r} to {}", address, point)

        # TODO: issue the zoning and parcel queries concurrently with asyncio.gather
        zoning_code = await self.source.zoning_code_at(point, self.policy)

        lot_area = None
        if self.source.parcels_enabled:
            lot_area = await self.source.lot_area_at(point)

        logger.info(
            "Resolved {!r} to {} (lot area: {})", address, zoning_code, lot_area
        )
        return LookupResult.success(zoning_code, self.source.data_source, lot_area_sf=lot_area)


def build_lookup(settings: Settings, client: Optional[httpx.AsyncClient] = None) -> ZoningLookup:
    """Wire a ZoningLookup from settings.

    Args:
        settings: Application settings selecting geocoder, source and policy
        client: Shared HTTP client used for every outbound request

    Returns:
        Configured ZoningLookup

    Raises:
        ValueError: On unknown geocoder or source names
    """
    geocoder = GeocoderRegistry.get_geocoder(settings.geocoder, settings, client)
    source = BoundarySourceRegistry.get_source(settings.boundary_source, settings, client)
    policy = settings.match_policy

    logger.debug(
        "Lookup pipeline: geocoder={}, source={}, policy={}",
        geocoder.service_name,
        source.service_name,
        (policy or source.default_policy).value,
    )
    return ZoningLookup(settings, geocoder, source, policy)
