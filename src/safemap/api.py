"""FastAPI wrapper exposing safety scores, country profiles and alerts."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse

from safemap import __version__
from safemap.config import SafeMapConfig
from safemap.fetchers.geocode import geocode
from safemap.fetchers.news import PLACEHOLDER_ARTICLES, fetch_news
from safemap.fetchers.weather import fetch_weather
from safemap.pipeline import (
    assess_location,
    build_alert_feed,
    build_country_profiles,
    city_intelligence,
    country_detail,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, None]:
    """Store startup state for the /health endpoint."""
    application.state.start_time = datetime.now(tz=timezone.utc)
    application.state.last_score = None
    application.state.score_count = 0
    yield


app = FastAPI(
    title="SafeMap API",
    description="Travel safety scores from country baselines, live weather and news.",
    version=__version__,
    lifespan=lifespan,
)


def get_config() -> SafeMapConfig:
    """Build configuration from the environment for each request."""
    return SafeMapConfig()


ConfigDep = Annotated[SafeMapConfig, Depends(get_config)]


def _upstream_error(what: str, exc: Exception) -> JSONResponse:
    logger.exception("%s failed", what)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Upstream error while {what}: {exc}"},
    )


@app.get("/health")
def health() -> dict[str, Any]:
    """Server health check with uptime, version, and score count."""
    now = datetime.now(tz=timezone.utc)
    return {
        "status": "ok",
        "version": __version__,
        "uptime_seconds": round((now - app.state.start_time).total_seconds(), 1),
        "last_score": app.state.last_score.isoformat() if app.state.last_score else None,
        "score_count": app.state.score_count,
    }


@app.get("/safety-score", response_model=None)
def get_safety_score(
    config: ConfigDep,
    country: Annotated[
        str | None, Query(description="ISO alpha-2 or alpha-3 country code.")
    ] = None,
    city: Annotated[str | None, Query(description="City for live weather.")] = None,
) -> dict[str, Any] | JSONResponse:
    """Composite safety score combining base profile, weather and news sentiment."""
    try:
        result = assess_location(config, country=country, city=city)
    except Exception as exc:
        return _upstream_error("calculating safety score", exc)

    app.state.last_score = datetime.now(tz=timezone.utc)
    app.state.score_count += 1
    return asdict(result)


@app.get("/country-scores", response_model=None)
def get_country_scores(
    config: ConfigDep,
    code: Annotated[
        str | None, Query(description="Single country code for a detailed profile.")
    ] = None,
    region: Annotated[str | None, Query(description="Filter by region.")] = None,
) -> Any:
    """Base profiles for all countries, or one country with live news and weather."""
    try:
        if code:
            profile = country_detail(config, code)
            if profile is None:
                return JSONResponse(status_code=404, content={"detail": "Country not found"})
            return asdict(profile)
        return [asdict(p) for p in build_country_profiles(config, region=region)]
    except Exception as exc:
        return _upstream_error("fetching country scores", exc)


@app.get("/city-intelligence", response_model=None)
def get_city_intelligence(
    config: ConfigDep,
    city: Annotated[str, Query(min_length=1, description="City name.")],
) -> dict[str, Any] | JSONResponse:
    """Country base profile plus live signals for a city."""
    try:
        return asdict(city_intelligence(config, city))
    except Exception as exc:
        return _upstream_error("resolving city intelligence", exc)


@app.get("/alerts")
def get_alerts(
    config: ConfigDep,
    country: Annotated[str | None, Query(description="Restrict to a country.")] = None,
) -> dict[str, Any]:
    """Classified disaster/conflict alerts feed."""
    return {"alerts": [asdict(a) for a in build_alert_feed(config, country=country)]}


@app.get("/weather")
def get_weather(
    config: ConfigDep,
    city: Annotated[str, Query(min_length=1, description="City name.")],
    country: Annotated[str, Query(min_length=2, description="Country code.")],
) -> dict[str, Any]:
    """Current conditions and weather risk; degrades to fallback values."""
    report = fetch_weather(
        city,
        country,
        api_key=config.openweather_key,
        timeout=config.request_timeout,
        use_cache=config.cache_enabled,
    )
    return asdict(report)


@app.get("/news")
def get_news(
    config: ConfigDep,
    country: Annotated[str | None, Query(description="Country code.")] = None,
    q: Annotated[str, Query(description="Search query.")] = "safety",
) -> dict[str, Any]:
    """Latest news for a country, or placeholder articles when no feed is available."""
    articles = fetch_news(
        country or config.default_country,
        query=q,
        news_data_key=config.news_data_key,
        news_api_key=config.news_api_key,
        timeout=config.request_timeout,
        use_cache=config.cache_enabled,
    )
    return {"articles": [asdict(a) for a in articles or PLACEHOLDER_ARTICLES]}


@app.get("/geocode")
def get_geocode(
    config: ConfigDep,
    q: Annotated[str, Query(min_length=1, description="Place to geocode.")],
) -> dict[str, Any]:
    """Resolve a place name to coordinates and country."""
    result = geocode(
        q,
        google_key=config.google_maps_key,
        timeout=config.request_timeout,
        use_cache=config.cache_enabled,
    )
    return asdict(result)
