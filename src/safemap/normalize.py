"""Map provider JSON payloads onto the strict input types of the scorer."""

from __future__ import annotations

import logging
import math
from typing import Any

from safemap.data.iso_codes import ISO3_TO_ISO2
from safemap.models import NewsArticle, WeatherObservation

logger = logging.getLogger(__name__)

FALLBACK_ISO2 = "US"


def _number(value: Any, default: float) -> float:
    """Coerce a JSON value to a finite float, else return *default*."""
    if isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value).strip() or default


def to_iso2(code: str) -> str:
    """Resolve an ISO alpha-2 or alpha-3 code to upper-case alpha-2.

    Unknown codes fall back to ``US``.  Three-letter codes are never sliced,
    since e.g. ARE (UAE) would become AR (Argentina).
    """
    upper = (code or "").strip().upper()
    if len(upper) == 2:
        return upper
    iso2 = ISO3_TO_ISO2.get(upper)
    if iso2:
        return iso2
    logger.warning("Unknown ISO code %r, falling back to %s", code, FALLBACK_ISO2)
    return FALLBACK_ISO2


def weather_from_openweather(payload: dict) -> WeatherObservation:
    """Normalize an OpenWeatherMap current-weather response (metric units)."""
    main = payload.get("main") or {}
    wind = payload.get("wind") or {}
    conditions = payload.get("weather") or []
    first = conditions[0] if conditions and isinstance(conditions[0], dict) else {}

    return WeatherObservation(
        temperature=_number(main.get("temp"), 25.0),
        wind_speed=max(0.0, _number(wind.get("speed"), 0.0)),
        condition=_text(first.get("main"), "Clear"),
        description=_text(first.get("description"), "clear sky"),
        humidity=_number(main.get("humidity"), 50.0),
    )


def _source_name(source: Any) -> str:
    if isinstance(source, dict):
        return _text(source.get("name"))
    return _text(source)


def article_from_newsapi(item: dict) -> NewsArticle:
    """Normalize one NewsAPI.org article."""
    return NewsArticle(
        title=_text(item.get("title")),
        description=_text(item.get("description")),
        source=_source_name(item.get("source")),
        url=_text(item.get("url")),
        published_at=_text(item.get("publishedAt")),
        url_to_image=item.get("urlToImage") or None,
    )


def article_from_newsdata(item: dict) -> NewsArticle:
    """Normalize one NewsData.io result."""
    return NewsArticle(
        title=_text(item.get("title")),
        description=_text(item.get("description")),
        source=_text(item.get("source_id")),
        url=_text(item.get("link")),
        published_at=_text(item.get("pubDate")),
        url_to_image=item.get("image_url") or None,
    )
