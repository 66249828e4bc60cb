"""Registry for geocoders."""

from typing import Optional

import httpx

from zoning_lookup.config import Settings

from .base import Geocoder


class GeocoderRegistry:
    """Registry for discovering and instantiating geocoders."""

    _services: dict[str, type[Geocoder]] = {}

    @classmethod
    def register(cls, service_class: type[Geocoder]) -> type[Geocoder]:
        """Decorator to register a geocoder.

        Example:
            @GeocoderRegistry.register
            class NominatimGeocoder(Geocoder):
                ...
        """
        # service_name is a constant property, read it without an instance
        service_name = service_class.service_name.fget(None)  # type: ignore
        cls._services[service_name] = service_class
        return service_class

    @classmethod
    def get_geocoder(
        cls, name: str, config: Settings, client: Optional[httpx.AsyncClient] = None
    ) -> Geocoder:
        """Instantiate a geocoder by name.

        Args:
            name: Geocoder identifier (e.g., 'nominatim', 'static')
            config: Settings object to pass to the constructor
            client: Shared HTTP client

        Returns:
            Instantiated Geocoder

        Raises:
            ValueError: If the name is not registered
        """
        if name not in cls._services:
            available = ", ".join(cls.list_geocoders())
            raise ValueError(f"Unknown geocoder: {name}. Available geocoders: {available}")
        return cls._services[name](config, client)

    @classmethod
    def list_geocoders(cls) -> list[str]:
        """List all registered geocoder names."""
        return sorted(cls._services.keys())
