"""Request and response models for the HTTP API."""

from typing import Optional

from pydantic import BaseModel


class LookupRequest(BaseModel):
    address: str


class LookupResponse(BaseModel):
    lookup_status: str  # "success" or "not_found"
    zoning_code: Optional[str] = None
    lot_area_sf: Optional[int] = None
    data_source: str
    timestamp: str
    # Only present when error_reporting is "verbose"
    error_reason: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
