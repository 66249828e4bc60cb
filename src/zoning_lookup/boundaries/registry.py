"""Registry for boundary sources."""

from typing import Optional

import httpx

from zoning_lookup.config import Settings

from .base import BoundarySource


class BoundarySourceRegistry:
    """Registry for discovering and instantiating boundary sources."""

    _sources: dict[str, type[BoundarySource]] = {}

    @classmethod
    def register(cls, source_class: type[BoundarySource]) -> type[BoundarySource]:
        """Decorator to register a boundary source.

        Example:
            @BoundarySourceRegistry.register
            class OpenDataBoundarySource(BoundarySource):
                ...
        """
        service_name = source_class.service_name.fget(None)  # type: ignore
        cls._sources[service_name] = source_class
        return source_class

    @classmethod
    def get_source(
        cls, name: str, config: Settings, client: Optional[httpx.AsyncClient] = None
    ) -> BoundarySource:
        """Instantiate a boundary source by name.

        Args:
            name: Source identifier (e.g., 'opendata', 'arcgis', 'static')
            config: Settings object to pass to the constructor
            client: Shared HTTP client

        Returns:
            Instantiated BoundarySource

        Raises:
            ValueError: If the name is not registered
        """
        if name not in cls._sources:
            available = ", ".join(cls.list_sources())
            raise ValueError(
                f"Unknown boundary source: {name}. Available sources: {available}"
            )
        return cls._sources[name](config, client)

    @classmethod
    def list_sources(cls) -> list[str]:
        """List all registered source names."""
        return sorted(cls._sources.keys())
