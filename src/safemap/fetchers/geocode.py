"""Forward geocoding: Google Geocoding with a Nominatim fallback."""

from __future__ import annotations

import logging
from dataclasses import asdict

from requests import Session

from safemap.cache import GEOCODE_TTL, cache_get, cache_key, cache_put
from safemap.http import create_session, get_json
from safemap.models import GeocodeResult

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


def fallback_location(query: str) -> GeocodeResult:
    """Last-resort location (New York) so callers always get coordinates."""
    return GeocodeResult(
        lat=40.7128,
        lng=-74.0060,
        formatted_address=query,
        country="United States",
        country_code="US",
    )


def _from_google(payload: dict) -> GeocodeResult | None:
    if payload.get("status") != "OK" or not payload.get("results"):
        return None
    result = payload["results"][0]
    location = result["geometry"]["location"]
    country = next(
        (
            c for c in result.get("address_components", [])
            if "country" in c.get("types", [])
        ),
        None,
    )
    return GeocodeResult(
        lat=float(location["lat"]),
        lng=float(location["lng"]),
        formatted_address=result.get("formatted_address", ""),
        country=country["long_name"] if country else "Unknown",
        country_code=country["short_name"] if country else "Unknown",
    )


def _from_nominatim(payload: list) -> GeocodeResult | None:
    if not payload:
        return None
    result = payload[0]
    address = result.get("address") or {}
    return GeocodeResult(
        lat=float(result["lat"]),
        lng=float(result["lon"]),
        formatted_address=result.get("display_name", ""),
        country=address.get("country") or "Unknown",
        country_code=(address.get("country_code") or "").upper(),
    )


def resolve_location(
    query: str,
    google_key: str = "",
    timeout: int = 10,
    session: Session | None = None,
    use_cache: bool = True,
) -> GeocodeResult | None:
    """Resolve a place name through Google, then Nominatim.

    Returns None when neither provider answered with a usable result.
    """
    key = cache_key("geocode", query.strip().lower())
    if use_cache:
        cached = cache_get(key, GEOCODE_TTL)
        if cached is not None:
            return GeocodeResult(**cached)

    if session is None:
        session = create_session()

    result: GeocodeResult | None = None
    if google_key:
        payload = get_json(
            session,
            GOOGLE_GEOCODE_URL,
            params={"address": query, "key": google_key},
            timeout=timeout,
            label="Google geocode",
        )
        if isinstance(payload, dict):
            try:
                result = _from_google(payload)
            except (KeyError, TypeError, ValueError):
                logger.warning("Malformed Google geocode payload for %r", query, exc_info=True)

    if result is None:
        payload = get_json(
            session,
            NOMINATIM_URL,
            params={"q": query, "format": "json", "addressdetails": 1, "limit": 1},
            timeout=timeout,
            label="Nominatim",
        )
        if isinstance(payload, list):
            try:
                result = _from_nominatim(payload)
            except (KeyError, TypeError, ValueError):
                logger.warning("Malformed Nominatim payload for %r", query, exc_info=True)

    if result is not None and use_cache:
        cache_put(key, asdict(result))
    return result


def geocode(
    query: str,
    google_key: str = "",
    timeout: int = 10,
    session: Session | None = None,
    use_cache: bool = True,
) -> GeocodeResult:
    """Resolve a free-text place name to coordinates and a country.

    Never raises; falls through Google, Nominatim and finally New York.
    """
    result = resolve_location(
        query,
        google_key=google_key,
        timeout=timeout,
        session=session,
        use_cache=use_cache,
    )
    if result is None:
        logger.info("Geocoding %r failed, using fallback location", query)
        return fallback_location(query)
    return result
