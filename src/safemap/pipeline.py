"""Pipeline orchestrator: fetch live signals -> normalize -> score -> assemble."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from safemap.alerts import PLACEHOLDER_ALERTS, build_alerts
from safemap.config import SafeMapConfig
from safemap.data.base_scores import get_country_score
from safemap.fetchers.countries import (
    fetch_all_countries,
    find_country,
    find_country_for_city,
)
from safemap.fetchers.geocode import resolve_location
from safemap.fetchers.news import (
    PLACEHOLDER_ARTICLES,
    fetch_alert_articles,
    fetch_news,
    search_news,
)
from safemap.fetchers.weather import fetch_weather, unavailable_report
from safemap.models import (
    Alert,
    BaseScore,
    CityIntelligence,
    CountryProfile,
    NewsArticle,
    SafetyScoreResult,
    WeatherReport,
)
from safemap.normalize import to_iso2
from safemap.scoring import calculate_political_sentiment, compute_safety_score

logger = logging.getLogger(__name__)

# Used for disaster/crime/air when the country base profile is switched off.
BASELINE_PROFILE = BaseScore(overall=60, disaster=30, air=80, crime=70, political=70)


def _extract_country_metadata(cd: dict) -> dict:
    """Extract standardized country metadata from a REST Countries entry."""
    capitals = cd.get("capital") or []
    timezones = cd.get("timezones") or []
    flags = cd.get("flags") or {}
    return {
        "name": (cd.get("name") or {}).get("common", ""),
        "iso": str(cd.get("cca2", "")).upper(),
        "flag": flags.get("svg") or flags.get("png") or "",
        "capital": capitals[0] if capitals else "N/A",
        "region": cd.get("region", ""),
        "population": cd.get("population", 0),
        "timezone": timezones[0] if timezones else "UTC",
    }


def _profile_from_metadata(
    meta: dict,
    news: list[NewsArticle] | None = None,
    weather: WeatherReport | None = None,
) -> CountryProfile:
    base = get_country_score(meta["iso"], meta["region"])
    return CountryProfile(
        name=meta["name"],
        iso=meta["iso"],
        flag=meta["flag"],
        capital=meta["capital"],
        region=meta["region"],
        population=meta["population"],
        timezone=meta["timezone"],
        safety_score=base.overall,
        disaster_risk=base.disaster,
        air_quality=base.air,
        crime_level=base.crime,
        political_unrest=base.political,
        news=news or [],
        weather=weather,
    )


def _gather_live_signals(
    config: SafeMapConfig,
    city: str | None,
    country: str,
    news_query: str,
    search: bool = False,
) -> tuple[WeatherReport | None, list[NewsArticle]]:
    """Fetch weather and news in parallel.

    With *search* set, news comes from a NewsAPI free-text search instead of
    the per-country headline feeds.  Weather is skipped when *city* is empty.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        weather_future = None
        if city:
            weather_future = pool.submit(
                fetch_weather,
                city,
                country,
                api_key=config.openweather_key,
                timeout=config.request_timeout,
                use_cache=config.cache_enabled,
            )
        if search:
            news_future = pool.submit(
                search_news,
                news_query,
                news_api_key=config.news_api_key,
                page_size=5,
                timeout=config.request_timeout,
                use_cache=config.cache_enabled,
            )
        else:
            news_future = pool.submit(
                fetch_news,
                country,
                query=news_query,
                news_data_key=config.news_data_key,
                news_api_key=config.news_api_key,
                timeout=config.request_timeout,
                use_cache=config.cache_enabled,
            )
        weather = weather_future.result() if weather_future else None
        articles = news_future.result() or []
    return weather, articles


def assess_location(
    config: SafeMapConfig,
    country: str | None = None,
    city: str | None = None,
) -> SafetyScoreResult:
    """Compute the composite safety score for a city.

    Steps:
    1. Resolve the country code (alpha-3 accepted)
    2. Fetch weather and news concurrently (fallbacks on failure)
    3. Score news sentiment on live articles only
    4. Combine the base profile with live political and weather signals
    """
    cc = to_iso2(country or config.default_country)
    city = city or config.default_city
    logger.info("Assessing %s, %s", city, cc)

    weather, articles = _gather_live_signals(config, city, cc, config.news_query)
    if weather is None:
        weather = unavailable_report(city, cc)
    sentiment = calculate_political_sentiment(articles)
    logger.info(
        "Signals for %s: weather_risk=%d political=%d critical=%s articles=%d",
        cc,
        weather.weather_risk,
        sentiment.score,
        sentiment.has_critical,
        len(articles),
    )

    base = get_country_score(cc) if config.use_base_profile else BASELINE_PROFILE

    return compute_safety_score(
        disaster_risk=base.disaster,
        crime_level=base.crime,
        air_quality=base.air,
        political_risk=sentiment.score,
        weather_risk=weather.weather_risk,
        has_critical_news=sentiment.has_critical,
        news_alerts=articles or list(PLACEHOLDER_ARTICLES),
        weather_data=weather,
    )


def build_country_profiles(
    config: SafeMapConfig,
    region: str | None = None,
) -> list[CountryProfile]:
    """Join every country with its base profile, safest first."""
    countries = fetch_all_countries(
        timeout=config.request_timeout, use_cache=config.cache_enabled
    )
    profiles = [
        _profile_from_metadata(_extract_country_metadata(cd)) for cd in countries
    ]
    if region:
        profiles = [p for p in profiles if p.region.lower() == region.lower()]

    profiles.sort(key=lambda p: (-p.safety_score, p.name))
    logger.info("Built %d country profiles", len(profiles))
    return profiles


def country_detail(config: SafeMapConfig, code: str) -> CountryProfile | None:
    """Base profile plus live news and capital-city weather for one country."""
    countries = fetch_all_countries(
        timeout=config.request_timeout, use_cache=config.cache_enabled
    )
    cd = find_country(countries, to_iso2(code))
    if cd is None:
        logger.warning("Country %s not found", code)
        return None

    meta = _extract_country_metadata(cd)
    capital = meta["capital"] if meta["capital"] != "N/A" else None
    weather, news = _gather_live_signals(
        config, capital, meta["iso"], f"{meta['name']} safety travel", search=True,
    )
    return _profile_from_metadata(meta, news=news, weather=weather)


def city_intelligence(config: SafeMapConfig, city: str) -> CityIntelligence:
    """Resolve a city to its country and attach base profile and live signals.

    Resolution order: capital/country name, popular-city table, geocoder.
    A city that resolves nowhere is reported against the global default.
    """
    countries = fetch_all_countries(
        timeout=config.request_timeout, use_cache=config.cache_enabled
    )
    cd = find_country_for_city(countries, city)
    if cd is None:
        location = resolve_location(
            city,
            google_key=config.google_maps_key,
            timeout=config.request_timeout,
            use_cache=config.cache_enabled,
        )
        if location is not None:
            cd = find_country(countries, location.country_code)

    if cd is None:
        logger.warning("Could not resolve a country for %r", city)
        meta = {
            "name": "Unknown", "iso": "", "flag": "", "capital": "N/A",
            "region": "", "population": 0, "timezone": "UTC",
        }
    else:
        meta = _extract_country_metadata(cd)

    weather, news = _gather_live_signals(
        config, city, meta["iso"] or config.default_country,
        f"{city} safety travel", search=True,
    )
    base = get_country_score(meta["iso"], meta["region"])
    return CityIntelligence(
        city=city,
        country=meta["name"],
        iso=meta["iso"],
        flag=meta["flag"],
        region=meta["region"],
        timezone=meta["timezone"],
        safety_score=base.overall,
        disaster_risk=base.disaster,
        air_quality=base.air,
        crime_level=base.crime,
        political_unrest=base.political,
        news=news,
        weather=weather,
    )


def build_alert_feed(config: SafeMapConfig, country: str | None = None) -> list[Alert]:
    """Classify the latest disaster/conflict news into alerts.

    Falls back to the fixed placeholder alerts when no feed is available.
    """
    articles = fetch_alert_articles(
        country,
        news_api_key=config.news_api_key,
        timeout=config.request_timeout,
        use_cache=config.cache_enabled,
    )
    if articles is None:
        logger.info("No alert feed available, using placeholder alerts")
        return list(PLACEHOLDER_ALERTS)

    alerts = build_alerts(articles, affected_location=country)
    logger.info("Classified %d alerts", len(alerts))
    return alerts
