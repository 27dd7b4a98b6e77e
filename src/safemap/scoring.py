"""Safety scoring: weather risk, news sentiment, composite score and insight."""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import datetime, timezone

from safemap.models import NewsArticle, SafetyScoreResult, SentimentResult, WeatherReport

SEVERE_CONDITIONS: tuple[str, ...] = ("storm", "tornado", "hurricane", "cyclone")
PRECIPITATION_CONDITIONS: tuple[str, ...] = ("snow", "rain", "thunder")

BASE_WEATHER_RISK = 20
SEVERE_WEATHER_RISK = 95

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "peace", "stable", "safe", "tourism", "development",
    "growth", "agreement", "ceasefire", "recovery",
)
NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "war", "conflict", "attack", "bomb", "protest", "riot", "flood",
    "earthquake", "tsunami", "hurricane", "epidemic", "explosion",
    "shooting", "terror",
)
CRITICAL_KEYWORDS: frozenset[str] = frozenset({"war", "tsunami", "earthquake", "terror"})

BASE_POLITICAL_SCORE = 70
POSITIVE_WEIGHT = 2
NEGATIVE_WEIGHT = 3

# Composite weights, sum to 1.0
DISASTER_WEIGHT = 0.25
CRIME_WEIGHT = 0.25
AIR_WEIGHT = 0.20
POLITICAL_WEIGHT = 0.20
WEATHER_WEIGHT = 0.10

CRITICAL_NEWS_CAP = 40
NEWS_ALERT_LIMIT = 3

INSIGHT_CRITICAL = (
    "WARNING: Critical events detected in regional news. Travel not recommended."
)
INSIGHT_SEVERE_WEATHER = "Caution advised due to severe weather conditions in the area."
INSIGHT_TENSIONS = (
    "Increased civil or geopolitical tensions found in recent reports. Remain vigilant."
)
INSIGHT_STABLE = "Conditions are stable. Favorable environment for travel."


def _finite(value: float, default: float) -> float:
    """Return *value* unless it is NaN, in which case return *default*."""
    return default if math.isnan(value) else value


def clamp_score(value: float) -> int:
    """Round half-up and clamp a score to an integer in [0, 100]."""
    if math.isnan(value):
        return 0
    return math.floor(max(0.0, min(100.0, value)) + 0.5)


def calculate_weather_risk(temp: float, wind_speed: float, condition: str) -> int:
    """Map current conditions to a 0-100 weather risk (higher = more dangerous).

    Severe conditions short-circuit to 95.  Otherwise precipitation, temperature
    band and wind band contributions are added to a base risk of 20.
    Wind speed is given in m/s and banded in km/h.
    """
    text = (condition or "").lower()
    if any(kw in text for kw in SEVERE_CONDITIONS):
        return SEVERE_WEATHER_RISK

    risk = BASE_WEATHER_RISK
    if any(kw in text for kw in PRECIPITATION_CONDITIONS):
        risk += 15

    temp = _finite(temp, 25.0)
    if temp < 0 or temp > 40:
        risk += 40
    elif temp < 5 or temp > 35:
        risk += 15

    wind_kmh = _finite(wind_speed, 0.0) * 3.6
    if wind_kmh > 50:
        risk += 30
    elif wind_kmh > 30:
        risk += 10

    return min(risk, 100)


def calculate_political_sentiment(articles: Iterable[NewsArticle]) -> SentimentResult:
    """Score a batch of articles for political stability (higher = calmer).

    Each keyword counts at most once per article: +2 per positive keyword,
    -3 per negative keyword.  Any of war/tsunami/earthquake/terror flags the
    whole batch as critical.
    """
    score = BASE_POLITICAL_SCORE
    has_critical = False

    for article in articles:
        text = f"{article.title} {article.description}".lower()

        for kw in POSITIVE_KEYWORDS:
            if kw in text:
                score += POSITIVE_WEIGHT

        for kw in NEGATIVE_KEYWORDS:
            if kw in text:
                score -= NEGATIVE_WEIGHT
                if kw in CRITICAL_KEYWORDS:
                    has_critical = True

    return SentimentResult(score=clamp_score(score), has_critical=has_critical)


def calculate_overall_safety_score(
    disaster_risk: float,
    crime_level: float,
    air_quality: float,
    political_risk: float,
    weather_risk: float,
    has_critical_news: bool,
) -> int:
    """Combine sub-scores into one 0-100 safety score (higher = safer).

    Formula:

        0.25 * (100 - disaster_risk) + 0.25 * crime_level + 0.20 * air_quality
        + 0.20 * political_risk + 0.10 * (100 - weather_risk)

    Only ``disaster_risk`` and ``weather_risk`` are risk-direction and get
    inverted.  ``political_risk`` is used as-is even though its name suggests
    otherwise; baseline tables and the sentiment score are both
    safety-direction.

    The sum is rounded once, clamped, and capped at 40 when critical news
    was detected.
    """
    total = (
        DISASTER_WEIGHT * (100 - _finite(disaster_risk, 50.0))
        + CRIME_WEIGHT * _finite(crime_level, 50.0)
        + AIR_WEIGHT * _finite(air_quality, 50.0)
        + POLITICAL_WEIGHT * _finite(political_risk, 50.0)
        + WEATHER_WEIGHT * (100 - _finite(weather_risk, 50.0))
    )
    overall = clamp_score(total)
    if has_critical_news:
        overall = min(overall, CRITICAL_NEWS_CAP)
    return overall


def generate_insight(
    has_critical_news: bool, weather_risk: float, political_score: float
) -> str:
    """Pick the verdict string; critical news, then weather, then politics."""
    if has_critical_news:
        return INSIGHT_CRITICAL
    if weather_risk > 70:
        return INSIGHT_SEVERE_WEATHER
    if political_score < 50:
        return INSIGHT_TENSIONS
    return INSIGHT_STABLE


def compute_safety_score(
    disaster_risk: float,
    crime_level: float,
    air_quality: float,
    political_risk: float,
    weather_risk: float,
    has_critical_news: bool,
    news_alerts: list[NewsArticle] | None = None,
    weather_data: WeatherReport | None = None,
    now: datetime | None = None,
) -> SafetyScoreResult:
    """Build the full safety assessment from normalized inputs.

    Sub-scores in the result are safety-direction, so the two risk-direction
    inputs are reported as ``100 - risk``.
    """
    if now is None:
        now = datetime.now(tz=timezone.utc)

    return SafetyScoreResult(
        overall=calculate_overall_safety_score(
            disaster_risk,
            crime_level,
            air_quality,
            political_risk,
            weather_risk,
            has_critical_news,
        ),
        disaster=clamp_score(100 - disaster_risk),
        air_quality=clamp_score(air_quality),
        crime=clamp_score(crime_level),
        political=clamp_score(political_risk),
        weather=clamp_score(100 - weather_risk),
        last_updated=now.isoformat(),
        ai_insight=generate_insight(has_critical_news, weather_risk, political_risk),
        news_alerts=list(news_alerts or [])[:NEWS_ALERT_LIMIT],
        weather_data=weather_data,
    )
