"""Fixed-point geocoder for local development and demos."""

from typing import Optional

from zoning_lookup.models import Point

from ..base import Geocoder
from ..registry import GeocoderRegistry


@GeocoderRegistry.register
class StaticGeocoder(Geocoder):
    """Returns the configured point for every address without any network call."""

    @property
    def service_name(self) -> str:
        return "static"

    def prepare_query(self, address: str) -> str:
        return address

    async def submit_request(self, prepared: str) -> Point:
        static = self.config.geocoders.static
        return Point(longitude=static.longitude, latitude=static.latitude)

    def parse_response(self, response: Point) -> Optional[Point]:
        return response
