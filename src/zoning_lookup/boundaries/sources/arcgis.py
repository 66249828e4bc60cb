"""ArcGIS feature layer source (server-side spatial query)."""

from typing import Any, Optional

import httpx
from loguru import logger

from zoning_lookup.config import Settings
from zoning_lookup.exceptions import Ambiguous, DataUnavailable, NoMatch
from zoning_lookup.models import ParcelRecord, Point
from zoning_lookup.resolver import MatchPolicy, select_candidate

from ..base import BoundarySource
from ..registry import BoundarySourceRegistry


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@BoundarySourceRegistry.register
class ArcGISBoundarySource(BoundarySource):
    """Asks ArcGIS feature layers which features intersect the point.

    The server does the containment test, so the client only enforces the
    match policy on the returned candidates. An optional parcel layer supplies
    lot area.
    """

    def __init__(self, config: Settings, client: Optional[httpx.AsyncClient] = None):
        super().__init__(config, client)
        self.arcgis_config = config.sources.arcgis
        if not self.arcgis_config.zoning_layer_url:
            raise ValueError(
                "ArcGIS source requires sources.arcgis.zoning_layer_url "
                "(ZONING_LOOKUP_SOURCES__ARCGIS__ZONING_LAYER_URL)"
            )

    @property
    def service_name(self) -> str:
        return "arcgis"

    @property
    def data_source(self) -> str:
        return self.arcgis_config.data_source

    @property
    def default_policy(self) -> MatchPolicy:
        return MatchPolicy.REQUIRE_EXACTLY_ONE

    @property
    def parcels_enabled(self) -> bool:
        return bool(self.arcgis_config.parcel_layer_url)

    async def query_layer(
        self, layer_url: str, point: Point, out_fields: list[str]
    ) -> list[dict[str, Any]]:
        """Run a point-intersects query against one feature layer.

        Args:
            layer_url: Feature layer URL (ending in the layer id)
            point: Query location
            out_fields: Attribute fields to return

        Returns:
            Attribute dictionaries of the intersecting features

        Raises:
            DataUnavailable: On transport failure or an error payload
        """
        client = self._require_client()
        params = {
            "geometry": f"{point.longitude},{point.latitude}",
            "geometryType": "esriGeometryPoint",
            "inSR": 4326,
            "spatialRel": "esriSpatialRelIntersects",
            "outFields": ",".join(out_fields),
            "returnGeometry": "false",
            "f": "json",
        }

        try:
            response = await client.get(f"{layer_url.rstrip('/')}/query", params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise DataUnavailable(f"ArcGIS query failed for {layer_url}: {e}") from e
        except ValueError as e:
            raise DataUnavailable(f"ArcGIS returned invalid JSON for {layer_url}: {e}") from e

        # ArcGIS reports query errors with HTTP 200 and an "error" object
        if not isinstance(payload, dict) or "error" in payload:
            error = payload.get("error") if isinstance(payload, dict) else payload
            raise DataUnavailable(f"ArcGIS query error for {layer_url}: {error}")

        features = payload.get("features")
        if not isinstance(features, list):
            raise DataUnavailable(f"ArcGIS response for {layer_url} has no features list")

        return [f.get("attributes") or {} for f in features if isinstance(f, dict)]

    async def zoning_code_at(self, point: Point, policy: MatchPolicy) -> str:
        field = self.arcgis_config.zoning_field
        features = await self.query_layer(self.arcgis_config.zoning_layer_url, point, [field])

        codes = [attrs.get(field) for attrs in features]
        candidates = [code for code in codes if isinstance(code, str) and code]
        if len(candidates) != len(codes):
            logger.debug("Ignored {} zoning features without a code", len(codes) - len(candidates))

        return select_candidate(candidates, policy)

    async def lot_area_at(self, point: Point) -> Optional[float]:
        """Return the parcel's lot area in square feet.

        Exactly one parcel must intersect the point. ``LOT_AREA`` is used when
        present, otherwise ``LOT_AREA_SQM`` is converted.

        Raises:
            NoMatch: If no parcel intersects the point
            Ambiguous: If more than one parcel does
        """
        if not self.parcels_enabled:
            return None

        area_field = self.arcgis_config.lot_area_field
        sqm_field = self.arcgis_config.lot_area_sqm_field
        features = await self.query_layer(
            self.arcgis_config.parcel_layer_url, point, [area_field, sqm_field]
        )

        if not features:
            raise NoMatch("No parcel intersects the point")
        if len(features) > 1:
            raise Ambiguous(f"{len(features)} parcels intersect the point")

        attrs = features[0]
        parcel = ParcelRecord(
            lot_area=_number(attrs.get(area_field)),
            lot_area_sqm=_number(attrs.get(sqm_field)),
        )
        return parcel.lot_area_sqft
