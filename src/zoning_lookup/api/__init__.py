"""HTTP API for Zoning Lookup."""

from .app import LOOKUP_PATH, create_app

__all__ = ["LOOKUP_PATH", "create_app"]
