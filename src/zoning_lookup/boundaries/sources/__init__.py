"""Boundary source implementations."""

# Sources auto-register on import
from . import arcgis  # noqa: F401
from . import opendata  # noqa: F401
from . import static  # noqa: F401

__all__ = ["arcgis", "opendata", "static"]
