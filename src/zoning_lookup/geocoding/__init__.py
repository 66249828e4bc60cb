"""Geocoders for Zoning Lookup.

This package maps free-text addresses to coordinates, isolating each
provider's request and response shape behind the ``Geocoder`` interface.
"""

from .base import Geocoder
from .registry import GeocoderRegistry
from . import services  # noqa: F401  (registers implementations)

__all__ = [
    "Geocoder",
    "GeocoderRegistry",
]
