"""Pytest configuration and fixtures for Zoning Lookup tests."""

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
from loguru import logger

from zoning_lookup.config import Settings

ZONING_LAYER = "https://gis.example.com/arcgis/rest/services/Zoning/MapServer/0"
PARCEL_LAYER = "https://gis.example.com/arcgis/rest/services/Parcels/MapServer/0"

# Rectangle around (-123.12, 49.28)
RT1_RING = [
    [-123.13, 49.27],
    [-123.11, 49.27],
    [-123.11, 49.29],
    [-123.13, 49.29],
    [-123.13, 49.27],
]

# Rectangle to the east, sharing no interior with RT1_RING
RS1_RING = [
    [-123.10, 49.27],
    [-123.08, 49.27],
    [-123.08, 49.29],
    [-123.10, 49.29],
    [-123.10, 49.27],
]


def square(x0: float, y0: float, x1: float, y1: float) -> list[list[float]]:
    """Closed ring for an axis-aligned rectangle."""
    return [[x0, y0], [x1, y0], [x1, y1], [x0, y1], [x0, y0]]


def opendata_row(code: Any, geometry: Any) -> dict[str, Any]:
    """One row of the open-data records response."""
    return {
        "zoning_district": code,
        "geo_shape": {"type": "Feature", "geometry": geometry, "properties": {}},
    }


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Provide test settings.

    Returns:
        Settings instance configured for testing.
    """
    return Settings(
        log_level="DEBUG",
        log_file=str(tmp_path / "test.log"),
        http_timeout=5,
    )


@pytest.fixture
def arcgis_settings(test_settings: Settings) -> Settings:
    """Settings pointing the ArcGIS source at the test layers, parcels enabled."""
    test_settings.boundary_source = "arcgis"
    test_settings.sources.arcgis.zoning_layer_url = ZONING_LAYER
    test_settings.sources.arcgis.parcel_layer_url = PARCEL_LAYER
    return test_settings


@pytest.fixture
def opendata_payload() -> dict[str, Any]:
    """Open-data response with two adjacent districts."""
    return {
        "total_count": 2,
        "results": [
            opendata_row("RT-1", {"type": "Polygon", "coordinates": [RT1_RING]}),
            opendata_row("RS-1", {"type": "MultiPolygon", "coordinates": [[RS1_RING]]}),
        ],
    }


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by setup_logging so they do not outlive a test."""
    yield
    logger.remove()
