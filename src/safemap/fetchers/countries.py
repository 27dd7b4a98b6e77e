"""REST Countries API fetcher and lookups."""

from __future__ import annotations

import logging

from requests import Session

from safemap.cache import COUNTRIES_TTL, cache_get, cache_put
from safemap.http import create_session

logger = logging.getLogger(__name__)

REST_COUNTRIES_ALL = "https://restcountries.com/v3.1/all"
COUNTRY_FIELDS = "name,cca2,flags,capital,region,population,timezones"

_CACHE_KEY = "countries_all.json"

# Popular non-capital cities that cannot be matched by capital or name.
CITY_COUNTRY_CODES: dict[str, str] = {
    "mumbai": "IN",
    "new york": "US",
    "sydney": "AU",
    "dubai": "AE",
    "toronto": "CA",
    "rio de janeiro": "BR",
    "shanghai": "CN",
}


def fetch_all_countries(
    timeout: int = 10,
    base_url: str = REST_COUNTRIES_ALL,
    session: Session | None = None,
    use_cache: bool = True,
) -> list[dict]:
    """Fetch name, code, flag, capital, region and population for every country.

    Raises ``requests.HTTPError`` on a failed response; there is no useful
    fallback for the country list.  Successful responses are cached for 1 hour.
    """
    if use_cache:
        cached = cache_get(_CACHE_KEY, COUNTRIES_TTL)
        if cached is not None:
            logger.debug("Using cached country list")
            return cached

    if session is None:
        session = create_session()

    resp = session.get(base_url, params={"fields": COUNTRY_FIELDS}, timeout=timeout)
    resp.raise_for_status()
    countries = [c for c in resp.json() if isinstance(c, dict) and c.get("cca2")]
    logger.info("Retrieved %d countries", len(countries))

    if use_cache:
        cache_put(_CACHE_KEY, countries)
    return countries


def find_country(countries: list[dict], code: str) -> dict | None:
    """Find a country by alpha-2 code, case-insensitively."""
    code = code.strip().upper()
    for cd in countries:
        if str(cd.get("cca2", "")).upper() == code:
            return cd
    return None


def find_country_for_city(countries: list[dict], city: str) -> dict | None:
    """Resolve a city to its country.

    Matches a capital or the country's common name first, then the
    popular-city table.  Returns None when nothing matches.
    """
    needle = city.strip().lower()
    for cd in countries:
        capitals = [c.lower() for c in cd.get("capital") or []]
        name = (cd.get("name") or {}).get("common", "").lower()
        if needle in capitals or needle == name:
            return cd

    code = CITY_COUNTRY_CODES.get(needle)
    if code:
        return find_country(countries, code)
    return None
