"""Configuration model for the safety scoring service."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

OutputFormat = Literal["json", "csv", "markdown"]


class SafeMapConfig(BaseSettings):
    """All configurable parameters for fetching signals and scoring places.

    Values can be set via constructor arguments, environment variables
    prefixed with SAFEMAP_, or defaults.  Provider keys left empty switch
    the matching fetcher to its documented fallback.
    """

    model_config = {"env_prefix": "SAFEMAP_"}

    request_timeout: int = Field(
        default=10, ge=1, le=120, description="HTTP request timeout in seconds."
    )
    openweather_key: str = Field(default="", description="OpenWeatherMap API key.")
    news_api_key: str = Field(default="", description="NewsAPI.org API key.")
    news_data_key: str = Field(default="", description="NewsData.io API key.")
    google_maps_key: str = Field(default="", description="Google Geocoding API key.")
    news_query: str = Field(
        default="safety OR conflict", description="Query used for sentiment news."
    )
    default_country: str = Field(default="US", description="Country when none is given.")
    default_city: str = Field(default="New York", description="City when none is given.")
    use_base_profile: bool = Field(
        default=True,
        description="Use the country base profile for disaster/crime/air sub-scores "
        "instead of fixed baseline constants.",
    )
    cache_enabled: bool = Field(
        default=True, description="Enable disk caching of provider responses."
    )
    output_file: Path = Field(
        default=Path("safemap_countries.json"), description="Output file path."
    )
    output_format: OutputFormat = Field(
        default="json", description="Output format: json, csv, or markdown."
    )
