"""OpenWeatherMap current-conditions fetcher."""

from __future__ import annotations

import logging

from requests import Session

from safemap.cache import WEATHER_TTL, cache_get, cache_key, cache_put
from safemap.http import create_session, get_json
from safemap.models import WeatherObservation, WeatherReport
from safemap.normalize import to_iso2, weather_from_openweather
from safemap.scoring import calculate_weather_risk

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

# No provider key configured.
UNAVAILABLE_OBSERVATION = WeatherObservation(
    temperature=25.0,
    wind_speed=0.0,
    condition="Clear",
    description="clear sky",
    humidity=60.0,
)

# Provider failed; 5 m/s is 18 km/h.
ERROR_OBSERVATION = WeatherObservation(
    temperature=22.0,
    wind_speed=5.0,
    condition="Unknown",
    description="weather data unavailable",
    humidity=50.0,
)
ERROR_WEATHER_RISK = 50


def unavailable_report(city: str = "", country: str = "") -> WeatherReport:
    """Fallback when weather is not configured; scored like any observation."""
    obs = UNAVAILABLE_OBSERVATION
    return WeatherReport(
        observation=obs,
        weather_risk=calculate_weather_risk(obs.temperature, obs.wind_speed, obs.condition),
        city=city,
        country=country,
    )


def error_report(city: str = "", country: str = "") -> WeatherReport:
    """Fallback when the provider failed; risk is fixed, not recomputed."""
    return WeatherReport(
        observation=ERROR_OBSERVATION,
        weather_risk=ERROR_WEATHER_RISK,
        city=city,
        country=country,
    )


def fetch_weather(
    city: str,
    country: str,
    api_key: str = "",
    timeout: int = 10,
    session: Session | None = None,
    use_cache: bool = True,
) -> WeatherReport:
    """Fetch current weather for a city and score its risk.

    Never raises: a missing key yields the "unavailable" fallback (risk 20)
    and any provider failure yields the "error" fallback (risk 50).
    """
    cc = to_iso2(country)
    if not api_key:
        logger.info("No OpenWeather key configured, using default conditions")
        return unavailable_report(city, cc)

    key = cache_key("weather", city.lower(), cc)
    payload = cache_get(key, WEATHER_TTL) if use_cache else None

    if payload is None:
        if session is None:
            session = create_session()
        payload = get_json(
            session,
            OPENWEATHER_URL,
            params={"q": f"{city},{cc}", "appid": api_key, "units": "metric"},
            timeout=timeout,
            label=f"OpenWeather {city},{cc}",
        )
        if not isinstance(payload, dict):
            return error_report(city, cc)
        if use_cache:
            cache_put(key, payload)

    obs = weather_from_openweather(payload)
    risk = calculate_weather_risk(obs.temperature, obs.wind_speed, obs.condition)
    logger.debug("Weather %s,%s: %s %.1fC risk=%d", city, cc, obs.condition, obs.temperature, risk)
    return WeatherReport(observation=obs, weather_risk=risk, city=city, country=cc)
