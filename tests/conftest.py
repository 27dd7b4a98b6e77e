"""Shared fixtures for safemap tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from safemap.config import SafeMapConfig
from safemap.models import CountryProfile, NewsArticle

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_cache(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the disk cache at a per-test directory."""
    cache_dir = tmp_path / "cache"
    monkeypatch.setattr("safemap.cache._CACHE_DIR", cache_dir)
    return cache_dir


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_openweather_response() -> dict:
    return json.loads((FIXTURES_DIR / "openweather_sample.json").read_text())


@pytest.fixture
def sample_newsapi_response() -> dict:
    return json.loads((FIXTURES_DIR / "newsapi_sample.json").read_text())


@pytest.fixture
def sample_newsdata_response() -> dict:
    return json.loads((FIXTURES_DIR / "newsdata_sample.json").read_text())


@pytest.fixture
def sample_countries() -> list[dict]:
    return json.loads((FIXTURES_DIR / "countries_sample.json").read_text())


@pytest.fixture
def sample_nominatim_response() -> list[dict]:
    return json.loads((FIXTURES_DIR / "nominatim_sample.json").read_text())


@pytest.fixture
def sample_google_response() -> dict:
    return json.loads((FIXTURES_DIR / "google_geocode_sample.json").read_text())


@pytest.fixture
def keyless_config(tmp_path: Path) -> SafeMapConfig:
    """Config with no provider keys: every fetcher takes its fallback path."""
    return SafeMapConfig(
        openweather_key="",
        news_api_key="",
        news_data_key="",
        google_maps_key="",
        cache_enabled=False,
        output_file=tmp_path / "output.json",
    )


@pytest.fixture
def keyed_config(tmp_path: Path) -> SafeMapConfig:
    """Config with dummy keys for every provider and caching off."""
    return SafeMapConfig(
        openweather_key="ow-test",
        news_api_key="na-test",
        news_data_key="nd-test",
        google_maps_key="",
        cache_enabled=False,
        output_file=tmp_path / "output.json",
    )


@pytest.fixture
def sample_articles() -> list[NewsArticle]:
    return [
        NewsArticle(title="Peace talks resume", description="Leaders call the region safe."),
        NewsArticle(title="Protest planned downtown", description="Police expect crowds."),
        NewsArticle(title="Weekend weather", description=""),
    ]


@pytest.fixture
def sample_profiles() -> list[CountryProfile]:
    return [
        CountryProfile(
            name="Iceland",
            iso="IS",
            flag="https://flagcdn.com/is.svg",
            capital="Reykjavik",
            region="Europe",
            population=366425,
            timezone="UTC",
            safety_score=94,
            disaster_risk=90,
            air_quality=95,
            crime_level=96,
            political_unrest=95,
        ),
        CountryProfile(
            name="Japan",
            iso="JP",
            flag="https://flagcdn.com/jp.svg",
            capital="Tokyo",
            region="Asia",
            population=125836021,
            timezone="UTC+09:00",
            safety_score=85,
            disaster_risk=40,
            air_quality=82,
            crime_level=95,
            political_unrest=90,
        ),
        CountryProfile(
            name="Estonia",
            iso="EE",
            flag="https://flagcdn.com/ee.svg",
            capital="Tallinn",
            region="Europe",
            population=1331057,
            timezone="UTC+02:00",
            safety_score=78,
            disaster_risk=74,
            air_quality=79,
            crime_level=76,
            political_unrest=80,
        ),
    ]
