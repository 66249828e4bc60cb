"""Geocoder implementations."""

# Geocoders auto-register on import
from . import nominatim  # noqa: F401
from . import static  # noqa: F401

__all__ = ["nominatim", "static"]
