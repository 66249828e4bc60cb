"""Failure categories raised inside the lookup pipeline.

None of these escape ``ZoningLookup.lookup``; they are caught there, logged,
and collapsed into a ``not_found`` result.
"""


class ZoningLookupError(Exception):
    """Base class for lookup failures."""

    reason = "error"


class InvalidInput(ZoningLookupError):
    """Address absent or not a non-empty string."""

    reason = "invalid_input"


class GeocodeMiss(ZoningLookupError):
    """Geocoder returned no usable candidate."""

    reason = "geocode_miss"


class DataUnavailable(ZoningLookupError):
    """Boundary or parcel data could not be fetched, or came back empty."""

    reason = "data_unavailable"


class NoMatch(ZoningLookupError):
    """No boundary contains the point."""

    reason = "no_match"


class Ambiguous(ZoningLookupError):
    """More than one boundary matched where exactly one was required."""

    reason = "ambiguous"
