"""Fixed-answer boundary source for local development and demos."""

from typing import Optional

from zoning_lookup.models import Point
from zoning_lookup.resolver import MatchPolicy

from ..base import BoundarySource
from ..registry import BoundarySourceRegistry


@BoundarySourceRegistry.register
class StaticBoundarySource(BoundarySource):
    """Answers every point with the configured zoning code and lot area."""

    @property
    def service_name(self) -> str:
        return "static"

    @property
    def data_source(self) -> str:
        return self.config.sources.static.data_source

    @property
    def parcels_enabled(self) -> bool:
        return self.config.sources.static.lot_area_sqft is not None

    async def zoning_code_at(self, point: Point, policy: MatchPolicy) -> str:
        return self.config.sources.static.zoning_code

    async def lot_area_at(self, point: Point) -> Optional[float]:
        return self.config.sources.static.lot_area_sqft
