"""Data types shared across the lookup pipeline."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union

from shapely.geometry import MultiPolygon, Polygon

SQFT_PER_SQM = 10.7639

Boundary = Union[Polygon, MultiPolygon]


class LookupStatus(Enum):
    """Outcome of a zoning lookup."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Point:
    """A WGS84 coordinate pair."""

    longitude: float
    latitude: float


@dataclass(frozen=True)
class ZoningRecord:
    """A zoning district code and the area it covers."""

    code: str
    boundary: Boundary

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Zoning code must be non-empty")


@dataclass(frozen=True)
class ParcelRecord:
    """Area attributes of a single parcel."""

    lot_area: Optional[float] = None  # square feet
    lot_area_sqm: Optional[float] = None

    @property
    def lot_area_sqft(self) -> Optional[float]:
        """Lot area in square feet, converted from square metres if needed."""
        if self.lot_area is not None:
            return self.lot_area
        if self.lot_area_sqm is not None:
            return round(self.lot_area_sqm * SQFT_PER_SQM)
        return None


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class LookupResult:
    """Normalized lookup result returned to callers."""

    status: LookupStatus
    zoning_code: Optional[str]
    lot_area_sf: Optional[int]
    data_source: str
    timestamp: str = field(default_factory=_utc_now)
    reason: Optional[str] = None  # Internal failure category, never set on success

    @classmethod
    def success(
        cls, zoning_code: str, data_source: str, lot_area_sf: Optional[float] = None
    ) -> "LookupResult":
        return cls(
            status=LookupStatus.SUCCESS,
            zoning_code=zoning_code,
            lot_area_sf=round(lot_area_sf) if lot_area_sf is not None else None,
            data_source=data_source,
        )

    @classmethod
    def not_found(cls, data_source: str, reason: Optional[str] = None) -> "LookupResult":
        return cls(
            status=LookupStatus.NOT_FOUND,
            zoning_code=None,
            lot_area_sf=None,
            data_source=data_source,
            reason=reason,
        )

    def to_dict(self, include_reason: bool = False) -> dict[str, Any]:
        """Serialize to the wire shape of the HTTP response.

        Args:
            include_reason: Add ``error_reason`` (verbose error reporting)

        Returns:
            JSON-compatible dictionary
        """
        payload: dict[str, Any] = {
            "lookup_status": self.status.value,
            "zoning_code": self.zoning_code,
            "lot_area_sf": self.lot_area_sf,
            "data_source": self.data_source,
            "timestamp": self.timestamp,
        }
        if include_reason:
            payload["error_reason"] = self.reason
        return payload
