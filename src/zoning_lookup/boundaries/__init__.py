"""Zoning boundary sources.

A boundary source is the pluggable part of the lookup pipeline: open data
(bulk fetch, local containment test), ArcGIS (server-side spatial query) or
a static stub.
"""

from .base import BoundarySource
from .registry import BoundarySourceRegistry
from . import sources  # noqa: F401  (registers implementations)

__all__ = [
    "BoundarySource",
    "BoundarySourceRegistry",
]
