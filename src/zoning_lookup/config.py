"""Configuration management for Zoning Lookup using pydantic-settings."""

from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from zoning_lookup.resolver import MatchPolicy


class NominatimConfig(BaseModel):
    """Configuration for Nominatim (OpenStreetMap) Geocoder."""

    base_url: str = "https://nominatim.openstreetmap.org"
    user_agent: str = "vancouver-pre-feasibility-tool"  # Required by usage policy
    email: Optional[str] = None
    locality_suffix: str = ", Vancouver, BC"
    country_codes: Optional[str] = "ca"


class StaticGeocoderConfig(BaseModel):
    """Configuration for the fixed-point geocoder used in local development."""

    longitude: float = -123.12
    latitude: float = 49.28


class GeocodersConfig(BaseModel):
    """Container for all geocoder configurations."""

    nominatim: NominatimConfig = Field(default_factory=NominatimConfig)
    static: StaticGeocoderConfig = Field(default_factory=StaticGeocoderConfig)


class OpenDataConfig(BaseModel):
    """Configuration for the City of Vancouver Open Data zoning dataset."""

    records_url: str = (
        "https://opendata.vancouver.ca/api/explore/v2.1/catalog/datasets/"
        "zoning-districts-and-labels/records"
    )
    limit: int = 10000
    code_field: str = "zoning_district"
    geometry_field: str = "geo_shape"
    data_source: str = "City of Vancouver Open Data"


class ArcGISConfig(BaseModel):
    """Configuration for ArcGIS feature layers queried server-side."""

    zoning_layer_url: Optional[str] = None  # e.g. .../FeatureServer/0
    parcel_layer_url: Optional[str] = None  # Lot area lookup disabled when unset
    zoning_field: str = "ZONING_DISTRICT"
    lot_area_field: str = "LOT_AREA"
    lot_area_sqm_field: str = "LOT_AREA_SQM"
    data_source: str = "City of Vancouver ArcGIS"


class StaticSourceConfig(BaseModel):
    """Configuration for the fixed-answer boundary source."""

    zoning_code: str = "RS-1"
    lot_area_sqft: Optional[float] = None
    data_source: str = "Mock data"


class SourcesConfig(BaseModel):
    """Container for all boundary source configurations."""

    opendata: OpenDataConfig = Field(default_factory=OpenDataConfig)
    arcgis: ArcGISConfig = Field(default_factory=ArcGISConfig)
    static: StaticSourceConfig = Field(default_factory=StaticSourceConfig)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="ZONING_LOOKUP_",
        env_file=".env",
        env_nested_delimiter="__",  # ZONING_LOOKUP_SOURCES__ARCGIS__PARCEL_LAYER_URL
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: str = Field(
        default="logs/zoning-lookup.log",
        description="Path to log file",
    )

    geocoder: str = Field(default="nominatim", description="Geocoder to use")
    boundary_source: str = Field(
        default="opendata", description="Zoning boundary source to use"
    )
    match_policy: Optional[MatchPolicy] = Field(
        default=None,
        description="Override the source's match policy (first_match, require_exactly_one)",
    )
    error_reporting: Literal["uniform", "verbose"] = Field(
        default="uniform",
        description="'uniform' hides failure reasons, 'verbose' adds error_reason to responses",
    )
    http_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for each outbound request",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the HTTP API",
    )

    geocoders: GeocodersConfig = Field(default_factory=GeocodersConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)

    @property
    def verbose_errors(self) -> bool:
        return self.error_reporting == "verbose"


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
