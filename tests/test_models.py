"""Tests for shared data types."""

from datetime import datetime

import pytest
from shapely.geometry import Polygon

from zoning_lookup.models import LookupResult, LookupStatus, ParcelRecord, ZoningRecord


class TestParcelRecord:
    """Tests for ParcelRecord lot area conversion."""

    def test_lot_area_used_directly(self):
        """Test that LOT_AREA wins over LOT_AREA_SQM."""
        assert ParcelRecord(lot_area=4026.0, lot_area_sqm=500.0).lot_area_sqft == 4026.0

    def test_lot_area_converted_from_sqm(self):
        """Test square metre conversion and rounding."""
        assert ParcelRecord(lot_area_sqm=500.0).lot_area_sqft == 5382

    def test_lot_area_unknown(self):
        """Test that a parcel without area fields has no lot area."""
        assert ParcelRecord().lot_area_sqft is None


class TestZoningRecord:
    """Tests for ZoningRecord."""

    def test_empty_code_rejected(self):
        """Test that a record needs a non-empty code."""
        with pytest.raises(ValueError):
            ZoningRecord(code="", boundary=Polygon())


class TestLookupResult:
    """Tests for LookupResult construction and serialization."""

    def test_success_to_dict(self):
        """Test the success wire shape."""
        result = LookupResult.success("RT-1", "City of Vancouver Open Data", lot_area_sf=5381.9)
        payload = result.to_dict()

        assert payload["lookup_status"] == "success"
        assert payload["zoning_code"] == "RT-1"
        assert payload["lot_area_sf"] == 5382
        assert payload["data_source"] == "City of Vancouver Open Data"
        assert "error_reason" not in payload

    def test_not_found_to_dict(self):
        """Test that not_found always carries null fields."""
        result = LookupResult.not_found("City of Vancouver Open Data", reason="geocode_miss")
        payload = result.to_dict()

        assert result.status is LookupStatus.NOT_FOUND
        assert payload["lookup_status"] == "not_found"
        assert payload["zoning_code"] is None
        assert payload["lot_area_sf"] is None
        assert "error_reason" not in payload

    def test_reason_included_when_requested(self):
        """Test verbose serialization."""
        result = LookupResult.not_found("Mock data", reason="no_match")

        assert result.to_dict(include_reason=True)["error_reason"] == "no_match"
        assert LookupResult.success("RS-1", "Mock data").to_dict(True)["error_reason"] is None

    def test_timestamp_is_utc_iso8601(self):
        """Test the timestamp format."""
        timestamp = LookupResult.success("RS-1", "Mock data").timestamp

        assert timestamp.endswith("Z")
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        assert parsed.utcoffset().total_seconds() == 0
