"""City of Vancouver Open Data zoning source (bulk fetch, local containment test)."""

from typing import Any, Optional

import httpx
from loguru import logger

from zoning_lookup.config import Settings
from zoning_lookup.exceptions import DataUnavailable
from zoning_lookup.geometry import parse_geojson_boundary
from zoning_lookup.models import Point, ZoningRecord
from zoning_lookup.resolver import MatchPolicy, resolve_strict

from ..base import BoundarySource
from ..registry import BoundarySourceRegistry


@BoundarySourceRegistry.register
class OpenDataBoundarySource(BoundarySource):
    """Fetches every zoning district polygon and tests containment locally.

    The dataset is fetched fresh on every lookup; nothing is cached.
    """

    def __init__(self, config: Settings, client: Optional[httpx.AsyncClient] = None):
        super().__init__(config, client)
        self.opendata_config = config.sources.opendata

    @property
    def service_name(self) -> str:
        return "opendata"

    @property
    def data_source(self) -> str:
        return self.opendata_config.data_source

    async def fetch_records(self) -> list[ZoningRecord]:
        """Download the zoning dataset and map it into ZoningRecords.

        Raises:
            DataUnavailable: On transport failure or when no usable records come back
        """
        client = self._require_client()
        params = {
            "limit": self.opendata_config.limit,
            "select": f"{self.opendata_config.code_field},{self.opendata_config.geometry_field}",
        }

        try:
            response = await client.get(self.opendata_config.records_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise DataUnavailable(f"Zoning dataset request failed: {e}") from e
        except ValueError as e:
            raise DataUnavailable(f"Zoning dataset returned invalid JSON: {e}") from e

        results = payload.get("results") if isinstance(payload, dict) else None
        if not results:
            raise DataUnavailable("Zoning dataset returned no records")

        records = self.parse_records(results)
        if not records:
            raise DataUnavailable("Zoning dataset contained no usable polygons")

        logger.debug("Loaded {} zoning records ({} in payload)", len(records), len(results))
        return records

    def parse_records(self, results: list[Any]) -> list[ZoningRecord]:
        """Map raw dataset rows into ZoningRecords, skipping unusable rows."""
        records = []
        skipped = 0

        for idx, row in enumerate(results, 1):
            if not isinstance(row, dict):
                skipped += 1
                continue

            code = row.get(self.opendata_config.code_field)
            shape = row.get(self.opendata_config.geometry_field)
            # geo_shape is a GeoJSON Feature; accept a bare geometry as well
            geometry = shape.get("geometry", shape) if isinstance(shape, dict) else None

            if not code or not isinstance(code, str) or not geometry:
                skipped += 1
                continue

            try:
                boundary = parse_geojson_boundary(geometry)
            except ValueError as e:
                logger.debug("Row {}: skipping {} - {}", idx, code, e)
                skipped += 1
                continue

            records.append(ZoningRecord(code=code, boundary=boundary))

        if skipped > 0:
            logger.debug("Skipped {} zoning rows without a usable code or polygon", skipped)
        return records

    async def zoning_code_at(self, point: Point, policy: MatchPolicy) -> str:
        records = await self.fetch_records()
        return resolve_strict(point, records, policy)
